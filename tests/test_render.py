"""test suite for rich rendering."""
import pytest
import sys
from io import StringIO
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console

from exprtok.domain.models import ComparisonReport
from exprtok.tokenizing import tokenize
from exprtok.ui.render import tokens_table, print_report


def make_console():
    return Console(file=StringIO(), width=120, color_system=None)


class TestRender:
    def test_tokens_table(self):
        console = make_console()
        console.print(tokens_table(tokenize("12 + Abcde")))
        output = console.file.getvalue()
        assert "number" in output
        assert "operator" in output
        assert "Abcde" in output

    def test_report_match(self):
        console = make_console()
        report = ComparisonReport(expression="1+2", quick=["1", "+", "2"], rule=["1", "+", "2"], match=True)
        print_report(console, report)
        output = console.file.getvalue()
        assert "Results match: True" in output

    def test_report_with_diff(self):
        console = make_console()
        report = ComparisonReport(
            expression="x",
            quick=["a"],
            rule=["b"],
            match=False,
            diff=["--- quick", "+++ rule", "@@ -1 +1 @@", "-a", "+b"],
        )
        print_report(console, report)
        output = console.file.getvalue()
        assert "Results match: False" in output
        assert "--- quick" in output
        assert "+b" in output

    def test_report_with_error(self):
        console = make_console()
        report = ComparisonReport(expression="@", quick=["@"], error='Unexpected token at position 0: "@"')
        print_report(console, report)
        output = console.file.getvalue()
        assert "Rule tokenizer error:" in output
        assert "position 0" in output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
