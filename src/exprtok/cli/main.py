import logging
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from ..config import get_demo_expression, resolve_demo_expression, set_demo_expression
from ..domain.errors import UnmatchedTokenError
from ..services.compare import CompareService
from ..tokenizing import RuleTokenizer, quick_tokenize
from ..ui.render import tokens_table, print_values, print_report

app = typer.Typer()
console = Console()

# always rejected: "inval" is a component, then nothing matches "id@symbol"
ERROR_DEMO_EXPRESSION = "invalid@symbol"

@app.callback()
def main_callback(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    """tokenize arithmetic expressions with a rule-driven and a single-pass tokenizer."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )

@app.command()
def tokenize(expression: str, values: bool = typer.Option(False, "--values", help="Print token values only")):
    """tokenize an expression with the rule-driven tokenizer."""
    tokenizer = RuleTokenizer()
    try:
        tokens = tokenizer.tokenize(expression)
    except UnmatchedTokenError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if values:
        print_values(console, "Values", [t.value for t in tokens])
    else:
        console.print(tokens_table(tokens))

@app.command()
def quick(expression: str):
    """tokenize an expression with the single-pass tokenizer."""
    print_values(console, "Values", quick_tokenize(expression))

@app.command()
def compare(expression: str):
    """run both tokenizers and show where their outputs differ."""
    report = CompareService().compare(expression)
    print_report(console, report)

@app.command()
def demo():
    """walk through both tokenizers on the configured demo expression."""
    expression = resolve_demo_expression()
    console.print(Panel(f"Input: {escape(expression)}", title="Expression Tokenizer Demo"))

    service = CompareService()
    report = service.compare(expression)
    print_report(console, report)

    if not report.error:
        console.print(tokens_table(report.tokens, title="Tokens with types"))

    console.print()
    console.print("[bold]Error Handling Demo:[/bold]")
    try:
        service.tokenizer.tokenize(ERROR_DEMO_EXPRESSION)
    except UnmatchedTokenError as e:
        console.print(f"Caught error: {escape(str(e))}")

@app.command()
def config(expression: str = typer.Option(None, "--expression", "-e", help="Set the demo expression")):
    """show or set the demo expression."""
    if expression is None:
        current = get_demo_expression()
        if current:
            console.print(f"Demo expression: {current}")
        else:
            console.print(f"[dim]No demo expression configured, using default:[/dim] {resolve_demo_expression()}")
        return

    try:
        set_demo_expression(expression)
    except (ValueError, RuntimeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] Demo expression set to: {expression}")

if __name__ == "__main__":
    app()
