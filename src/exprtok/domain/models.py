from enum import Enum
from typing import List, NamedTuple, Optional
from pydantic import BaseModel, Field

class TokenType(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    COMPONENT = "component"

class Token(NamedTuple):
    type: TokenType
    value: str

class ComparisonReport(BaseModel):
    """outcome of running both tokenizers over one expression."""
    expression: str
    quick: List[str] = Field(default_factory=list)
    rule: List[str] = Field(default_factory=list)
    tokens: List[Token] = Field(default_factory=list)  # typed rule tokens, empty on error
    match: bool = False
    diff: List[str] = Field(default_factory=list)  # unified diff, quick -> rule
    error: Optional[str] = None  # set when the rule tokenizer rejected the input
