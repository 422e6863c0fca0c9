import difflib
import logging
from typing import Optional

from ..domain.errors import UnmatchedTokenError
from ..domain.models import ComparisonReport
from ..tokenizing.quick import quick_tokenize
from ..tokenizing.tokenizer import RuleTokenizer

logger = logging.getLogger(__name__)

class CompareService:
    """runs the single-pass and the rule-driven tokenizers side by side."""

    def __init__(self, tokenizer: Optional[RuleTokenizer] = None):
        self.tokenizer = tokenizer or RuleTokenizer()

    def compare(self, expression: str) -> ComparisonReport:
        quick = quick_tokenize(expression)

        try:
            tokens = self.tokenizer.tokenize(expression)
        except UnmatchedTokenError as e:
            logger.debug("rule tokenizer rejected %r: %s", expression, e)
            return ComparisonReport(
                expression=expression,
                quick=quick,
                match=False,
                error=str(e),
            )

        rule = [t.value for t in tokens]
        match = quick == rule
        diff = []
        if not match:
            diff = list(difflib.unified_diff(
                quick, rule, fromfile="quick", tofile="rule", lineterm=""
            ))

        return ComparisonReport(
            expression=expression,
            quick=quick,
            rule=rule,
            tokens=tokens,
            match=match,
            diff=diff,
        )
