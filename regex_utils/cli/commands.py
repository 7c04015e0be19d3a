"""
CLI command implementations.

This module contains the logic behind each CLI command:
- escape: Escape text into a literal pattern
- strip-accents: Remove accents from text
- slugify: Reduce text to alphanumeric words
- transform: Build a pattern with transform_regex and test it
- check: Run every validator on one input
- validate: Validate a JSON file against a JSON Schema
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from regex_utils.regex import (
    TransformOptions,
    escape_regex,
    is_valid_regex,
    is_valid_regex_flags,
    remove_accents,
    transform_regex,
)
from regex_utils.validation import (
    format_violations,
    is_alphanumeric,
    is_valid_email,
    is_valid_phone_number,
    is_valid_ssn,
    is_valid_url,
    to_alphanumeric,
)
from regex_utils.validation.validator import JsonSchema

from .display import (
    print_checks,
    print_error,
    print_header,
    print_info,
    print_json,
    print_match_results,
    print_pattern,
    print_result,
    print_success,
    print_validation_errors,
)


def load_json_file(path: Path, what: str = "JSON") -> Any:
    """
    Load and parse a JSON file.

    Args:
        path: Path to the file
        what: Description used in error messages

    Returns:
        Parsed JSON value

    Raises:
        ValueError: If the file doesn't exist or isn't valid JSON
    """
    if not path.exists():
        raise ValueError(f"{what} file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {what.lower()} file: {e}")


def check_flags_option(flags: str) -> None:
    """
    Raises:
        ValueError: If flags contains characters outside the recognized alphabet
    """
    if not is_valid_regex_flags(flags):
        raise ValueError(f"Invalid flags: {flags!r}")


def escape_command(text: str, flags: str) -> None:
    check_flags_option(flags)
    print_result(escape_regex(text, flags).source)


def strip_accents_command(text: str) -> None:
    print_result(remove_accents(text))


def slugify_command(text: str, separator: str) -> None:
    print_result(to_alphanumeric(text, separator))


def transform_command(
    pattern: str,
    options: TransformOptions,
    tests: Optional[List[str]] = None,
) -> None:
    """
    Execute the transform command.

    Args:
        pattern: Pattern source as typed by the user
        options: Transforms to apply
        tests: Strings to test the resulting pattern against

    Raises:
        ValueError: If the flags or the pattern are invalid
    """
    check_flags_option(options.flags)
    if not is_valid_regex(pattern):
        raise ValueError(f"Invalid regex: {pattern!r}")

    result = transform_regex(pattern, options)
    print_pattern(result)

    if tests:
        print_match_results([(text, result.test(text)) for text in tests])


def check_command(text: str) -> None:
    """Run every validator against text and show the results in a table."""
    checks: Dict[str, Any] = {
        "Escaped": escape_regex(text).source,
        "Accents removed": remove_accents(text),
        "To alphanumeric": to_alphanumeric(text),
        "Alphanumeric": is_alphanumeric(text),
        "Email": is_valid_email(text),
        "Phone number": is_valid_phone_number(text),
        "URL": is_valid_url(text),
        "SSN": is_valid_ssn(text),
    }
    print_checks(text, checks)


def validate_command(
    data_path: Path,
    schema_path: Path,
    separator: str = ".",
    prefix: Optional[str] = None,
    show_data: bool = False,
) -> None:
    """
    Execute the validate command.

    Args:
        data_path: Path to JSON file to validate
        schema_path: Path to JSON schema file
        separator: Path separator used in error messages
        prefix: Path prefix prepended to every error message
        show_data: Whether to display the input JSON

    Raises:
        ValueError: If either file can't be loaded
    """
    print_header("regex-utils - Validate JSON")

    schema = JsonSchema(load_json_file(schema_path, "Schema"))
    print_success(f"Loaded schema from: {schema_path}")

    data = load_json_file(data_path, "Data")
    print_success(f"Loaded JSON from: {data_path}")

    if show_data:
        print_json(data, title="Input JSON")

    print_info("Validating...")
    result = schema.safe_parse(data)

    if result.success:
        print_success("Validation passed!")
        return

    print_error("Validation failed")
    print_validation_errors(format_violations(result.errors, separator=separator, prefix=prefix))
    raise SystemExit(1)
