import re
from typing import Optional, Tuple

from ..domain.errors import RuleRegistrationError
from ..domain.models import TokenType

class TokenRule:
    """pairs a token type with a pattern matched at a cursor position."""

    def __init__(self, type: TokenType, pattern: str):
        self.type = type
        self.pattern = pattern
        try:
            self.regex = re.compile(pattern)
        except re.error as e:
            raise RuleRegistrationError(f"invalid pattern for {type.value} rule: {e}") from e

    def match(self, text: str, pos: int = 0) -> Optional[int]:
        """
        length of the match starting exactly at pos.

        empty matches count as no match, so a rule always advances the cursor.
        """
        m = self.regex.match(text, pos)
        if m and m.end() > pos:
            return m.end() - pos
        return None

    def __repr__(self):
        return f"TokenRule({self.type.value}, {self.pattern!r})"

# order matters! the first rule that matches wins, even if a later one would match more
DEFAULT_RULES: Tuple[TokenRule, ...] = (
    TokenRule(TokenType.NUMBER, r"[0-9]+"),
    TokenRule(TokenType.OPERATOR, r"[+\-*/]"),
    TokenRule(TokenType.COMPONENT, r"[a-zA-Z]{5}(?:~R\+)?(?:->[^+\-*/() ]+)?"),
)
