"""
regex-utils: Regex composition helpers and schema validation adapters

A small toolkit for the input checks most applications end up rewriting:
emails, URLs, phone numbers, SSNs and slugs, plus helpers for building
regular expressions that ignore accents or case, or must match a whole string.

Key Features:
    - Compose patterns: literal escaping, accent/case insensitivity, anchoring
    - Regex values that keep their JavaScript-style flag string ("gimsuy")
    - One safe-parse interface over pydantic types, JSON Schema and functions
    - Path-qualified error messages ("user.address.zip: ...")

Quick Start:
    ```python
    from regex_utils import transform_regex, make_detailed_validator, to_alphanumeric

    name = transform_regex("jose", accent_insensitive=True, case_insensitive=True)
    name.test("José")  # True

    to_alphanumeric("Héllo, World!")  # "Hello-World"

    check = make_detailed_validator({"type": "object", "required": ["id"]})
    check({})  # "'id' is a required property"
    ```

Architecture:
    1. Regex: Regex type, accent table, composer transforms
    2. Validation: safe-parse adapters, error formatting, ready-made validators
    3. CLI: Typer app exercising every helper from the terminal
"""

__version__ = "0.1.0"

from regex_utils.regex import (  # noqa: F401
    RECOGNIZED_FLAGS,
    InvalidFlagsError,
    Regex,
    TransformOptions,
    combine_flags,
    escape_regex,
    regex_accent_insensitive,
    remove_accents,
    regex_case_insensitive,
    regex_match_whole,
    transform_regex,
    is_valid_regex,
    is_valid_regex_flags,
)
from regex_utils.validation import (  # noqa: F401
    FunctionSchema,
    JsonSchema,
    PydanticSchema,
    SafeParseResult,
    Violation,
    ViolationKind,
    ValidationFailedError,
    CoercedBoolean,
    make_validator,
    make_detailed_validator,
    interpret_errors,
    is_alphanumeric,
    to_alphanumeric,
    is_valid_email,
    is_valid_url,
    is_valid_phone_number,
    is_valid_ssn,
    parse_coerced_boolean,
)

__all__ = [
    "RECOGNIZED_FLAGS",
    "InvalidFlagsError",
    "Regex",
    "TransformOptions",
    "combine_flags",
    "escape_regex",
    "regex_accent_insensitive",
    "remove_accents",
    "regex_case_insensitive",
    "regex_match_whole",
    "transform_regex",
    "is_valid_regex",
    "is_valid_regex_flags",
    "FunctionSchema",
    "JsonSchema",
    "PydanticSchema",
    "SafeParseResult",
    "Violation",
    "ViolationKind",
    "ValidationFailedError",
    "CoercedBoolean",
    "make_validator",
    "make_detailed_validator",
    "interpret_errors",
    "is_alphanumeric",
    "to_alphanumeric",
    "is_valid_email",
    "is_valid_url",
    "is_valid_phone_number",
    "is_valid_ssn",
    "parse_coerced_boolean",
]
