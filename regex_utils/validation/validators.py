"""
Common input validators.

Every is_* function is a plain predicate returning a bool; none of them raise
for invalid input. They are built by pairing a pattern from the regex
composer (or a pydantic format type) with make_validator().
"""

from typing import Any, Callable, Literal

from email_validator import validate_email
from pydantic import AfterValidator, AnyUrl, BeforeValidator, StrictStr
from typing_extensions import Annotated

from regex_utils.regex import Regex, remove_accents, transform_regex
from regex_utils.validation.error_formatter import ValidationFailedError, format_violations
from regex_utils.validation.validator import PydanticSchema, make_validator


ALPHANUMERIC_PATTERN = Regex(r"[A-Za-z0-9_-]+", "i")
NON_ALPHANUMERIC_PATTERN = Regex(r"[^A-Za-z0-9_-]+", "i")

PHONE_NUMBER_PATTERN = Regex(r"^\+?[0-9]?\s*(\([0-9]{3}\)|[0-9]{3})(\s*|-)[0-9]{3}(\s*|-)[0-9]{4}\Z")
SSN_PATTERN = Regex(r"^[0-9]{3}-?[0-9]{2}-?[0-9]{4}\Z")

_WHOLE_ALPHANUMERIC = transform_regex(ALPHANUMERIC_PATTERN, match_whole=True)
_GLOBAL_NON_ALPHANUMERIC = transform_regex(NON_ALPHANUMERIC_PATTERN, flags="g")


def _matching(pattern: Regex, message: str) -> Callable[[str], str]:
    def check(value: str) -> str:
        if not pattern.test(value):
            raise ValueError(message)
        return value
    return check


def _address(value: str) -> str:
    # A bare address only; the "Name <addr>" form is rejected.
    validate_email(value, check_deliverability=False)
    return value


AlphanumericStr = Annotated[
    StrictStr, AfterValidator(_matching(_WHOLE_ALPHANUMERIC, "must contain only letters, digits, '_' and '-'"))
]
PhoneNumberStr = Annotated[
    str, BeforeValidator(str), AfterValidator(_matching(PHONE_NUMBER_PATTERN, "invalid phone number"))
]
SSNStr = Annotated[
    str, BeforeValidator(str), AfterValidator(_matching(SSN_PATTERN, "invalid SSN"))
]
EmailAddressStr = Annotated[StrictStr, AfterValidator(_address)]

_is_alphanumeric = make_validator(AlphanumericStr)
_is_email = make_validator(EmailAddressStr)
_is_url = make_validator(AnyUrl)
_is_phone_number = make_validator(PhoneNumberStr)
_is_ssn = make_validator(SSNStr)


def is_alphanumeric(value: str) -> bool:
    """
    Whole-string check for letters, digits, underscores and hyphens.

    Example:
        ```python
        is_alphanumeric("hello_world-1")  # True
        is_alphanumeric("hello world")    # False
        is_alphanumeric("")               # False
        ```
    """
    return _is_alphanumeric(value)


def to_alphanumeric(text: str, separator: str = "-") -> str:
    """
    Reduce text to alphanumeric words joined by separator.

    Accents are removed first, then the text is split on runs of other
    characters; empty pieces are dropped.

    Example:
        ```python
        to_alphanumeric("Héllo, World!")       # "Hello-World"
        to_alphanumeric("a  b--c", separator="_")  # "a_b--c"
        ```
    """
    words = _GLOBAL_NON_ALPHANUMERIC.split(remove_accents(text))
    words = (_GLOBAL_NON_ALPHANUMERIC.sub("", word) for word in words)
    return separator.join(word for word in words if word)


def is_valid_email(value: Any) -> bool:
    return _is_email(value)


def is_valid_url(value: Any) -> bool:
    return _is_url(value)


def is_valid_phone_number(value: Any) -> bool:
    """
    US-style phone number: optional "+" and country digit, a three digit area
    code (optionally parenthesized), then 3 and 4 digits separated by spaces
    or a hyphen. Non-string input is converted with str() first.
    """
    return _is_phone_number(value)


def is_valid_ssn(value: Any) -> bool:
    """Social security number, with or without hyphens (123-45-6789 / 123456789)."""
    return _is_ssn(value)


COERCED_BOOLEAN_VALUES = Literal[
    "true", "false",
    "t", "f",
    "yes", "no",
    "y", "n",
    "1", "0",
    "on", "off",
]

_TRUE_VALUES = frozenset({"true", "t", "yes", "y", "1", "on"})

CoercedBoolean = Annotated[COERCED_BOOLEAN_VALUES, AfterValidator(lambda value: value in _TRUE_VALUES)]
"""Pydantic type accepting the strings of COERCED_BOOLEAN_VALUES and yielding a bool."""

_coerced_boolean = PydanticSchema(CoercedBoolean)


def parse_coerced_boolean(value: Any) -> bool:
    """
    Convert one of COERCED_BOOLEAN_VALUES into a bool.

    Raises:
        ValidationFailedError: If value is not one of the accepted strings

    Example:
        ```python
        parse_coerced_boolean("yes")  # True
        parse_coerced_boolean("off")  # False
        ```
    """
    result = _coerced_boolean.safe_parse(value)
    if not result.success:
        raise ValidationFailedError(format_violations(result.errors))
    return result.value
