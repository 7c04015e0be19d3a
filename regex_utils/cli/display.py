"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted JSON
- Pattern summaries
- Validation messages
- Match and validator tables
- Success/failure indicators
"""

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from regex_utils.regex import Regex


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_result(value: str) -> None:
    """Print a command's result on its own line, without markup processing."""
    console.print(Text(value))


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=2, ensure_ascii=False)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_pattern(pattern: Regex) -> None:
    """Print the source and flags of a compiled pattern."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Source", Text(pattern.source))
    table.add_row("Flags", Text(pattern.flags or "(none)"))
    console.print(table)


def print_validation_errors(errors: List[str]) -> None:
    """
    Print validation errors in a formatted list.

    Args:
        errors: List of validation error messages
    """
    if not errors:
        return

    console.print()
    console.print("[bold red]Validation Errors:[/bold red]")
    for error in errors:
        console.print(Text.assemble(("  • ", "red"), error))
    console.print()


def print_match_results(results: Sequence[Tuple[str, bool]]) -> None:
    """Print a table of test strings and whether the pattern matched them."""
    table = Table(title="Matches", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Text", style="cyan")
    table.add_column("Match", justify="center", width=8)

    for i, (text, matched) in enumerate(results, 1):
        icon = "[green]✓[/green]" if matched else "[red]✗[/red]"
        table.add_row(str(i), Text(text), icon)

    console.print()
    console.print(table)
    console.print()


def print_checks(text: str, checks: Dict[str, Any]) -> None:
    """
    Print the outcome of every validator for one input.

    Args:
        text: The input that was checked
        checks: Mapping of check name to result (bool or derived string)
    """
    table = Table(title=Text(f"Checks for {text!r}"), show_header=True, header_style="bold cyan")
    table.add_column("Check", style="cyan", width=20)
    table.add_column("Result", width=40)

    for name, result in checks.items():
        if isinstance(result, bool):
            cell = Text("✓ yes", style="green bold") if result else Text("✗ no", style="red bold")
        else:
            cell = Text(str(result))
        table.add_row(name, cell)

    console.print()
    console.print(table)
    console.print()
