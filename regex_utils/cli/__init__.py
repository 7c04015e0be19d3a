"""
Command-line interface module.

This module provides a rich terminal interface for regex-utils using Typer and Rich.

Commands:
    - escape: Print a pattern matching text literally
    - strip-accents: Remove accents from text
    - slugify: Reduce text to alphanumeric words
    - transform: Build a pattern with accent/case/whole-string transforms
    - check: Run every validator on one input
    - validate: Validate a JSON file against a JSON Schema

Example Usage:
    ```bash
    # Accent- and case-insensitive whole-word pattern
    regex-utils transform jose -a -c -w --test "José" --test "joseph"

    # Validate with prefixed, slash-separated paths
    regex-utils validate \\
        --data user.json \\
        --schema user.schema.json \\
        --separator / \\
        --prefix user
    ```
"""

from .main import app

__all__ = ["app"]
