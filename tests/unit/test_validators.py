"""
Unit tests for the ready-made validators.
"""

import pytest
from pydantic import BaseModel

from regex_utils.validation import (
    ALPHANUMERIC_PATTERN,
    CoercedBoolean,
    ValidationFailedError,
    is_alphanumeric,
    is_valid_email,
    is_valid_phone_number,
    is_valid_ssn,
    is_valid_url,
    parse_coerced_boolean,
    to_alphanumeric,
)


class TestAlphanumeric:
    """Test is_alphanumeric and to_alphanumeric."""

    def test_is_alphanumeric(self):
        assert is_alphanumeric("hello_world-1") is True
        assert is_alphanumeric("ABC123") is True

    def test_is_not_alphanumeric(self):
        assert is_alphanumeric("") is False
        assert is_alphanumeric("hello world") is False
        assert is_alphanumeric("héllo") is False
        assert is_alphanumeric("abc\n") is False

    def test_non_string_input(self):
        assert is_alphanumeric(123) is False
        assert is_alphanumeric(None) is False
        assert is_alphanumeric(b"abc") is False

    def test_base_pattern_is_unanchored(self):
        assert ALPHANUMERIC_PATTERN.test("  word  ")

    def test_to_alphanumeric(self):
        assert to_alphanumeric("Héllo, World!") == "Hello-World"

    def test_to_alphanumeric_separator(self):
        assert to_alphanumeric("  Crème brûlée  ", separator="_") == "Creme_brulee"

    def test_to_alphanumeric_keeps_underscore_and_hyphen(self):
        assert to_alphanumeric("a  b--c") == "a-b--c"

    def test_unhandled_accents_split_words(self):
        assert to_alphanumeric("Ça va? Très bien.") == "a-va-Tres-bien"

    def test_to_alphanumeric_empty(self):
        assert to_alphanumeric("!!! ???") == ""


class TestFormatValidators:
    """Test email and URL validators."""

    def test_valid_email(self):
        assert is_valid_email("jane.doe@gmail.com") is True

    def test_invalid_email(self):
        assert is_valid_email("jane.doe") is False
        assert is_valid_email("jane@") is False
        assert is_valid_email(42) is False
        assert is_valid_email(b"jane@example.com") is False

    def test_display_name_form_rejected(self):
        assert is_valid_email("Jane Doe <jane.doe@gmail.com>") is False
        assert is_valid_email("<jane.doe@gmail.com>") is False

    def test_valid_url(self):
        assert is_valid_url("https://www.python.org/downloads/") is True
        assert is_valid_url("ftp://files.example.org/pub") is True

    def test_invalid_url(self):
        assert is_valid_url("not a url") is False
        assert is_valid_url("") is False


class TestPatternValidators:
    """Test phone number and SSN validators."""

    @pytest.mark.parametrize("value", [
        "(555) 123-4567",
        "555-123-4567",
        "5551234567",
        "+1 555 123 4567",
        "1(555)123-4567",
        5551234567,
    ])
    def test_valid_phone_numbers(self, value):
        assert is_valid_phone_number(value) is True

    @pytest.mark.parametrize("value", [
        "12-34",
        "555-1234",
        "(555 123-4567",
        "555-123-45678",
        "",
    ])
    def test_invalid_phone_numbers(self, value):
        assert is_valid_phone_number(value) is False

    def test_valid_ssn(self):
        assert is_valid_ssn("123-45-6789") is True
        assert is_valid_ssn("123456789") is True
        assert is_valid_ssn(123456789) is True

    def test_invalid_ssn(self):
        assert is_valid_ssn("12-345-6789") is False
        assert is_valid_ssn("123-45-678") is False
        assert is_valid_ssn("123-45-6789\n") is False


class TestCoercedBoolean:
    """Test the coerced boolean type."""

    @pytest.mark.parametrize("value", ["true", "t", "yes", "y", "1", "on"])
    def test_true_values(self, value):
        assert parse_coerced_boolean(value) is True

    @pytest.mark.parametrize("value", ["false", "f", "no", "n", "0", "off"])
    def test_false_values(self, value):
        assert parse_coerced_boolean(value) is False

    def test_rejects_other_values(self):
        with pytest.raises(ValidationFailedError):
            parse_coerced_boolean("maybe")

    def test_model_field(self):
        class Settings(BaseModel):
            debug: CoercedBoolean

        assert Settings(debug="on").debug is True
        assert Settings(debug="no").debug is False
