"""
Main CLI entry point using Typer.

This module defines the command-line interface for regex-utils. Each command
exercises one group of helpers: escape, strip-accents, slugify, transform,
check and validate.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from regex_utils.regex import TransformOptions

from .commands import (
    check_command,
    escape_command,
    slugify_command,
    strip_accents_command,
    transform_command,
    validate_command,
)
from .display import console, print_error


app = typer.Typer(
    name="regex-utils",
    help="regex-utils - Regex composition helpers and input validators",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("escape")
def escape(
    text: Annotated[str, typer.Argument(help="Text to match literally")],
    flags: Annotated[
        str,
        typer.Option("--flags", "-f", help="Regex flags (any of gimsuy)")
    ] = "",
) -> None:
    """
    Print a pattern that matches TEXT literally.

    Example:
        regex-utils escape "1+1=2?"
    """
    try:
        escape_command(text, flags)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("strip-accents")
def strip_accents(
    text: Annotated[str, typer.Argument(help="Text to strip accents from")],
) -> None:
    """
    Remove accents from the vowels of TEXT.

    Example:
        regex-utils strip-accents "Crème brûlée"
    """
    try:
        strip_accents_command(text)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("slugify")
def slugify(
    text: Annotated[str, typer.Argument(help="Text to convert")],
    separator: Annotated[
        str,
        typer.Option("--separator", "-s", help="String placed between words")
    ] = "-",
) -> None:
    """
    Reduce TEXT to alphanumeric words joined by a separator.

    Example:
        regex-utils slugify "Héllo, World!" --separator _
    """
    try:
        slugify_command(text, separator)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("transform")
def transform(
    pattern: Annotated[str, typer.Argument(help="Regex source")],
    flags: Annotated[
        str,
        typer.Option("--flags", "-f", help="Regex flags (any of gimsuy)")
    ] = "",
    accent_insensitive: Annotated[
        bool,
        typer.Option("--accent-insensitive", "-a", help="Match vowels with or without accents")
    ] = False,
    case_insensitive: Annotated[
        bool,
        typer.Option("--case-insensitive", "-c", help="Ignore case")
    ] = False,
    match_whole: Annotated[
        bool,
        typer.Option("--match-whole", "-w", help="Require the pattern to match the whole string")
    ] = False,
    tests: Annotated[
        Optional[List[str]],
        typer.Option("--test", "-t", help="String to test the resulting pattern against (repeatable)")
    ] = None,
) -> None:
    """
    Build a pattern with the selected transforms and optionally test it.

    Example:
        regex-utils transform cafe -a -c -w \\
            --test "CAFÉ" \\
            --test "cafes"
    """
    options = TransformOptions(
        flags=flags,
        accent_insensitive=accent_insensitive,
        case_insensitive=case_insensitive,
        match_whole=match_whole,
    )
    try:
        transform_command(pattern, options, tests)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("check")
def check(
    text: Annotated[str, typer.Argument(help="Input to run every validator on")],
) -> None:
    """
    Show what every helper makes of TEXT.

    Example:
        regex-utils check "(555) 123-4567"
    """
    try:
        check_command(text)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("validate")
def validate(
    data: Annotated[
        Path,
        typer.Option("--data", "-d", help="Path to JSON file to validate", exists=True, file_okay=True, dir_okay=False)
    ],
    schema: Annotated[
        Path,
        typer.Option("--schema", "-s", help="Path to JSON schema file", exists=True, file_okay=True, dir_okay=False)
    ],
    separator: Annotated[
        str,
        typer.Option("--separator", help="Separator between path segments in messages")
    ] = ".",
    prefix: Annotated[
        Optional[str],
        typer.Option("--prefix", help="Path prefix for every message")
    ] = None,
    show_data: Annotated[
        bool,
        typer.Option("--show-data", help="Display the input JSON")
    ] = False,
) -> None:
    """
    Validate a JSON file against a JSON Schema.

    Example:
        regex-utils validate \\
            --data user.json \\
            --schema user.schema.json \\
            --prefix user
    """
    try:
        validate_command(
            data_path=data,
            schema_path=schema,
            separator=separator,
            prefix=prefix,
            show_data=show_data
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug output")
    ] = False,
) -> None:
    """
    regex-utils - Regex composition helpers and input validators.
    """
    if version:
        from regex_utils import __version__
        typer.echo(f"regex-utils version {__version__}")
        raise typer.Exit()

    if verbose:
        from rich.logging import RichHandler
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
