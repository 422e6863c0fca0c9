from typing import List

OPERATORS = {"+", "-", "*", "/"}

def quick_tokenize(expression: str) -> List[str]:
    """
    single-pass tokenizer. splits on operators and drops whitespace and parentheses.

    accepts any string: characters that aren't operators simply accumulate
    into the current token, so there is no error case.
    """
    tokens = []
    buffer = ""

    for char in expression:
        # skipped without flushing, so "ab c" stays one token
        if char.isspace() or char in "()":
            continue

        if char in OPERATORS:
            if buffer:
                tokens.append(buffer)
                buffer = ""
            tokens.append(char)
            continue

        buffer += char

    if buffer:
        tokens.append(buffer)

    return tokens
