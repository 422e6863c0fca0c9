import logging
import re
from typing import Iterable, List, Optional, Tuple

from ..domain.errors import RuleRegistrationError, UnmatchedTokenError
from ..domain.models import Token, TokenType
from .rules import DEFAULT_RULES, TokenRule

logger = logging.getLogger(__name__)

# whitespace and grouping characters never reach the matcher
_IGNORED = re.compile(r"[()\s]")

def clean(expression: str) -> str:
    """strip whitespace and parentheses. error positions index into this string."""
    return _IGNORED.sub("", expression)

class RuleTokenizer:
    """
    rule-driven tokenizer for arithmetic expressions over numbers, operators and components.

    rules are tried in order at every position and the first one that matches wins.
    there is no backtracking: a later rule is never consulted once an earlier one matched.
    """

    def __init__(self, rules: Optional[Iterable[TokenRule]] = None):
        self._rules: List[TokenRule] = list(DEFAULT_RULES if rules is None else rules)
        self._frozen = False

    @property
    def rules(self) -> Tuple[TokenRule, ...]:
        return tuple(self._rules)

    def register_rule(self, token_type: TokenType, pattern: str, position: Optional[int] = None) -> TokenRule:
        """
        add a rule to this tokenizer.

        args:
            token_type: kind of token the rule produces
            pattern: regex matched at the cursor position
            position: index in the rule order, appended when omitted

        raises RuleRegistrationError once the tokenizer has been used.
        """
        if self._frozen:
            raise RuleRegistrationError("rules can't be registered after the tokenizer has been used")

        rule = TokenRule(token_type, pattern)
        if position is None:
            self._rules.append(rule)
        else:
            self._rules.insert(position, rule)
        logger.debug("registered %r at precedence %d", rule, self._rules.index(rule))
        return rule

    def tokenize(self, expression: str) -> List[Token]:
        self._frozen = True
        cleaned = clean(expression)
        tokens = []
        pos = 0
        length = len(cleaned)

        while pos < length:
            for rule in self._rules:
                size = rule.match(cleaned, pos)
                if size:
                    tokens.append(Token(rule.type, cleaned[pos:pos + size]))
                    pos += size
                    break
            else:
                logger.debug("no rule matches %r at position %d", cleaned, pos)
                raise UnmatchedTokenError(cleaned[pos], pos)

        logger.debug("tokenized %r into %d tokens", expression, len(tokens))
        return tokens

    def tokenize_values(self, expression: str) -> List[str]:
        """same as tokenize, keeping only the values."""
        return [token.value for token in self.tokenize(expression)]

    def reconstruct(self, tokens: List[Token]) -> str:
        return "".join(t.value for t in tokens)

_default_tokenizer = RuleTokenizer()

def tokenize(expression: str) -> List[Token]:
    return _default_tokenizer.tokenize(expression)

def tokenize_values(expression: str) -> List[str]:
    return _default_tokenizer.tokenize_values(expression)
