"""rich rendering of tokens and comparison reports."""

from typing import List
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..domain.models import ComparisonReport, Token

TYPE_STYLES = {
    "number": "cyan",
    "operator": "yellow",
    "component": "green",
}


def tokens_table(tokens: List[Token], title: str = "Tokens") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Value")
    table.add_column("Type")

    for i, token in enumerate(tokens):
        kind = token.type.value
        table.add_row(str(i), escape(token.value), f"[{TYPE_STYLES.get(kind, 'white')}]{kind}[/]")
    return table


def print_values(console: Console, label: str, values: List[str]):
    console.print(f"[bold]{label}:[/bold]", values)


def print_report(console: Console, report: ComparisonReport):
    """
    print both tokenizer outputs and whether they agree.

    the unified diff is only shown when the outputs differ.
    """
    print_values(console, "Quick", report.quick)
    if report.error:
        console.print(f"[red]Rule tokenizer error:[/red] {escape(report.error)}")
    else:
        print_values(console, "Rule", report.rule)

    color = "green" if report.match else "red"
    console.print(f"Results match: [{color}]{report.match}[/{color}]")

    if report.diff:
        console.print("\n".join(report.diff), markup=False, highlight=False)
