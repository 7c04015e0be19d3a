"""
Unit tests for error flattening and detailed validators.
"""

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from regex_utils.validation import (
    FunctionSchema,
    ValidationFailedError,
    Violation,
    ViolationKind,
    format_violations,
    interpret_errors,
    make_detailed_validator,
)


class Address(BaseModel):
    city: str
    zip_code: int


class Person(BaseModel):
    name: str
    address: Address


def greet(name: str, times: int) -> str:
    return name * times


class TestInterpretErrors:
    """Test interpret_errors / format_violations."""

    def test_no_violations(self):
        assert interpret_errors([]) is None

    def test_single_violation_with_path(self):
        violations = [Violation(("user", "age"), "must be positive")]
        assert interpret_errors(violations) == "user.age: must be positive"

    def test_single_violation_without_path(self):
        assert interpret_errors([Violation((), "bad value")]) == "bad value"

    def test_multiple_violations_keep_order(self):
        violations = [
            Violation(("name",), "required"),
            Violation(("items", 0, "price"), "must be positive"),
        ]
        assert interpret_errors(violations) == [
            "name: required",
            "items.0.price: must be positive",
        ]

    def test_separator_and_prefix(self):
        violations = [Violation(("name",), "required"), Violation((), "too many keys")]

        assert interpret_errors(violations, separator="/", prefix="request") == [
            "request/name: required",
            "request: too many keys",
        ]

    def test_sequence_prefix(self):
        violations = [Violation(("id",), "missing")]
        assert interpret_errors(violations, prefix=("rows", 3)) == "rows.3.id: missing"

    def test_empty_prefix_ignored(self):
        assert interpret_errors([Violation((), "bad")], prefix="") == "bad"

    def test_invalid_arguments_are_flattened(self):
        violations = [
            Violation(
                (),
                "Invalid function arguments",
                ViolationKind.INVALID_ARGUMENTS,
                inner=(Violation(("width",), "bad int"), Violation((1,), "too big")),
            )
        ]
        assert interpret_errors(violations) == [
            "arguments.width: bad int",
            "arguments.1: too big",
        ]

    def test_invalid_return_type_under_path(self):
        violations = [
            Violation(
                ("handler",),
                "Invalid function return type",
                ViolationKind.INVALID_RETURN_TYPE,
                inner=(Violation((), "Input should be a valid string"),),
            )
        ]
        assert interpret_errors(violations) == "handler.returnType: Input should be a valid string"

    def test_nested_kind_given_as_plain_string(self):
        violations = [
            Violation((), "wrapped", "invalid_arguments", inner=(Violation(("x",), "bad"),))
        ]
        assert interpret_errors(violations) == "arguments.x: bad"

    def test_nested_kind_without_inner(self):
        violations = [Violation((), "Invalid function arguments", ViolationKind.INVALID_ARGUMENTS)]
        assert interpret_errors(violations) == "Invalid function arguments"

    def test_pydantic_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            TypeAdapter(int).validate_python("abc")

        message = interpret_errors(exc_info.value)
        assert message == "Input should be a valid integer, unable to parse string as an integer"

    def test_nested_model_paths(self):
        with pytest.raises(ValidationError) as exc_info:
            Person.model_validate({"name": "Ana", "address": {"city": "Lima", "zip_code": "x"}})

        messages = format_violations(exc_info.value)
        assert len(messages) == 1
        assert messages[0].startswith("address.zip_code: ")


class TestDetailedValidator:
    """Test make_detailed_validator."""

    SCHEMA = {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "integer", "minimum": 0},
        },
        "required": ["name"],
    }

    def test_success(self):
        assert make_detailed_validator(self.SCHEMA)({"name": "Ana", "age": 3}) is True

    def test_single_error(self):
        check = make_detailed_validator(self.SCHEMA)
        assert check({"name": "Ana", "age": -1}) == "age: -1 is less than the minimum of 0"

    def test_multiple_errors(self):
        check = make_detailed_validator(self.SCHEMA)
        errors = check({"name": 5, "age": -1})

        assert errors == [
            "name: 5 is not of type 'string'",
            "age: -1 is less than the minimum of 0",
        ]

    def test_prefix_and_separator(self):
        check = make_detailed_validator(self.SCHEMA, separator="/", prefix="body")
        assert check({"name": "Ana", "age": -1}) == "body/age: -1 is less than the minimum of 0"

    def test_pydantic_model(self):
        check = make_detailed_validator(Person)
        errors = check({"address": {"city": "Lima", "zip_code": 1}})

        assert errors == "name: Field required"

    def test_function_schema(self):
        check = make_detailed_validator(FunctionSchema(greet))
        errors = check({"name": "hi", "times": "many"})

        assert isinstance(errors, str)
        assert errors.startswith("arguments.times: ")

    def test_throw_mode(self):
        check = make_detailed_validator(self.SCHEMA, throw=True)

        with pytest.raises(ValidationFailedError) as exc_info:
            check({"name": 5, "age": -1})

        error = exc_info.value
        assert str(error) == "name: 5 is not of type 'string'\nage: -1 is less than the minimum of 0"
        assert error.messages == [
            "name: 5 is not of type 'string'",
            "age: -1 is less than the minimum of 0",
        ]
        assert error.errors == error.messages

    def test_throw_mode_custom_joiner(self):
        check = make_detailed_validator(self.SCHEMA, throw=True, joiner="; ")

        with pytest.raises(ValidationFailedError, match="name: 5 is not of type 'string'; age: "):
            check({"name": 5, "age": -1})

    def test_throw_mode_single_error(self):
        check = make_detailed_validator(self.SCHEMA, throw=True)

        with pytest.raises(ValidationFailedError) as exc_info:
            check({"age": 1})

        assert exc_info.value.errors == "'name' is a required property"

    def test_throw_mode_success(self):
        check = make_detailed_validator(self.SCHEMA, throw=True)
        assert check({"name": "Ana"}) is True

    def test_validation_failed_is_value_error(self):
        assert issubclass(ValidationFailedError, ValueError)
