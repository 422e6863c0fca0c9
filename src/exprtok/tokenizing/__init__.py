"""expression tokenizers: the rule-driven core and the single-pass baseline."""
from .rules import TokenRule, DEFAULT_RULES
from .tokenizer import RuleTokenizer, clean, tokenize, tokenize_values
from .quick import quick_tokenize, OPERATORS
from ..domain.models import Token, TokenType
from ..domain.errors import UnmatchedTokenError, RuleRegistrationError

__all__ = [
    "TokenRule",
    "DEFAULT_RULES",
    "RuleTokenizer",
    "clean",
    "tokenize",
    "tokenize_values",
    "quick_tokenize",
    "OPERATORS",
    "Token",
    "TokenType",
    "UnmatchedTokenError",
    "RuleRegistrationError",
]
