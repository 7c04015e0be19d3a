"""
Validation module.

This module wraps schema engines behind a uniform safe-parse interface and
provides ready-made validators for common inputs.

Components:
    - validator: SafeParseable protocol, pydantic / JSON Schema / function
      adapters, make_validator()
    - error_formatter: Violation flattening, interpret_errors(),
      make_detailed_validator(), ValidationFailedError
    - validators: Email, URL, phone number, SSN and alphanumeric checks,
      to_alphanumeric(), CoercedBoolean

Validation Flow:
    1. Coerce the schema into a SafeParseable
    2. safe_parse() the value, collecting every violation (not just the first)
    3. Return a bool, or flatten violations into "path: message" strings
    4. Optionally raise ValidationFailedError with all messages

Example:
    ```python
    from regex_utils.validation import make_detailed_validator

    schema = {"type": "object", "properties": {"age": {"type": "integer"}}}
    check = make_detailed_validator(schema)

    check({"age": 30})     # True
    check({"age": "old"})  # "age: 'old' is not of type 'integer'"
    ```
"""

from regex_utils.validation.validator import (
    FunctionSchema,
    JsonSchema,
    PydanticSchema,
    SafeParseable,
    SafeParseResult,
    Violation,
    ViolationKind,
    as_safe_parseable,
    make_validator,
)
from regex_utils.validation.error_formatter import (
    ValidationFailedError,
    format_violations,
    interpret_errors,
    make_detailed_validator,
)
from regex_utils.validation.validators import (
    ALPHANUMERIC_PATTERN,
    NON_ALPHANUMERIC_PATTERN,
    PHONE_NUMBER_PATTERN,
    SSN_PATTERN,
    COERCED_BOOLEAN_VALUES,
    CoercedBoolean,
    is_alphanumeric,
    to_alphanumeric,
    is_valid_email,
    is_valid_url,
    is_valid_phone_number,
    is_valid_ssn,
    parse_coerced_boolean,
)

__all__ = [
    "FunctionSchema",
    "JsonSchema",
    "PydanticSchema",
    "SafeParseable",
    "SafeParseResult",
    "Violation",
    "ViolationKind",
    "as_safe_parseable",
    "make_validator",
    "ValidationFailedError",
    "format_violations",
    "interpret_errors",
    "make_detailed_validator",
    "ALPHANUMERIC_PATTERN",
    "NON_ALPHANUMERIC_PATTERN",
    "PHONE_NUMBER_PATTERN",
    "SSN_PATTERN",
    "COERCED_BOOLEAN_VALUES",
    "CoercedBoolean",
    "is_alphanumeric",
    "to_alphanumeric",
    "is_valid_email",
    "is_valid_url",
    "is_valid_phone_number",
    "is_valid_ssn",
    "parse_coerced_boolean",
]
