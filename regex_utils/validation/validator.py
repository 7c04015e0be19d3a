"""
Schema adapter - uniform safe-parse interface over pydantic and JSON Schema.

Any object with a ``safe_parse(value)`` method returning a SafeParseResult can
be turned into a predicate with make_validator() or make_detailed_validator()
(see error_formatter.py). Three adapters are provided:

    PydanticSchema  - anything pydantic.TypeAdapter accepts (models,
                      Annotated constraint types, EmailStr, AnyUrl, ...)
    JsonSchema      - a JSON Schema dict, validated with jsonschema
    FunctionSchema  - a function call: arguments and return value are
                      validated against the function's annotations

Usage:
    ```python
    from pydantic import BaseModel
    from regex_utils.validation import PydanticSchema

    class User(BaseModel):
        name: str
        age: int

    result = PydanticSchema(User).safe_parse({"name": "Alice", "age": "x"})
    result.success       # False
    result.errors[0]     # Violation(path=('age',), message='Input should be a valid integer, ...', ...)
    ```
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union, get_type_hints

from pydantic import TypeAdapter, ValidationError, validate_call
from typing_extensions import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

PathSegment = Union[str, int]


class ViolationKind(str, Enum):
    """
    Violation kinds with special meaning to the error formatter.

    Other kinds are plain strings reported by the schema engine
    (pydantic error types, jsonschema validator names).
    """
    CUSTOM = "custom"
    INVALID_ARGUMENTS = "invalid_arguments"
    INVALID_RETURN_TYPE = "invalid_return_type"


@dataclass(frozen=True)
class Violation:
    """
    A single failed constraint.

    Attributes:
        path: Location of the failure inside the input (keys and indices)
        message: Human-readable description
        kind: Violation kind (ViolationKind member or engine-specific string)
        inner: Nested violations for INVALID_ARGUMENTS / INVALID_RETURN_TYPE
    """
    path: Tuple[PathSegment, ...]
    message: str
    kind: str = ViolationKind.CUSTOM
    inner: Tuple["Violation", ...] = ()


@dataclass(frozen=True)
class SafeParseResult:
    """
    Result of a non-throwing validation.

    Attributes:
        success: Whether the input satisfied the schema
        value: Parsed value (None on failure)
        errors: Violations in the order the engine reported them
    """
    success: bool
    value: Any = None
    errors: Tuple[Violation, ...] = field(default_factory=tuple)

    @classmethod
    def ok(cls, value: Any) -> "SafeParseResult":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, errors: Sequence[Violation]) -> "SafeParseResult":
        return cls(success=False, errors=tuple(errors))


@runtime_checkable
class SafeParseable(Protocol):
    """Anything that can validate a value without raising."""

    def safe_parse(self, value: Any) -> SafeParseResult:
        ...


def violations_from_pydantic(error: ValidationError) -> Tuple[Violation, ...]:
    """Convert a pydantic ValidationError into violations, keeping its order."""
    return tuple(
        Violation(path=tuple(item["loc"]), message=item["msg"], kind=item["type"])
        for item in error.errors(include_url=False)
    )


class PydanticSchema:
    """
    Safe-parse adapter for any type pydantic can validate.

    Args:
        tp: Model class, Annotated type, or any other pydantic-compatible type
    """

    def __init__(self, tp: Any):
        self.type = tp
        self._adapter = TypeAdapter(tp)

    def safe_parse(self, value: Any) -> SafeParseResult:
        try:
            return SafeParseResult.ok(self._adapter.validate_python(value))
        except ValidationError as e:
            return SafeParseResult.fail(violations_from_pydantic(e))

    def __repr__(self) -> str:
        return f"PydanticSchema({self.type!r})"


class JsonSchema:
    """
    Safe-parse adapter for a JSON Schema dict (Draft 7).

    Raises:
        jsonschema.SchemaError: If the schema itself is invalid
    """

    def __init__(self, schema: Dict[str, Any]):
        try:
            from jsonschema import Draft7Validator
        except ImportError:
            raise ImportError(
                "jsonschema is required. Install with: pip install jsonschema"
            )

        Draft7Validator.check_schema(schema)
        self.schema = schema
        self._validator = Draft7Validator(schema)

    def safe_parse(self, value: Any) -> SafeParseResult:
        errors = [
            Violation(path=tuple(error.path), message=error.message, kind=error.validator)
            for error in self._validator.iter_errors(value)
        ]
        if errors:
            return SafeParseResult.fail(errors)
        return SafeParseResult.ok(value)

    def __repr__(self) -> str:
        return f"JsonSchema({self.schema!r})"


class FunctionSchema:
    """
    Safe-parse adapter for calls to an annotated function.

    Arguments are validated with pydantic.validate_call and the return value
    against the return annotation (when there is one). Failures are reported
    as a single INVALID_ARGUMENTS or INVALID_RETURN_TYPE violation holding the
    underlying violations in ``inner``.

    A pydantic ValidationError raised by the function body itself is reported
    as an argument failure.

    Example:
        ```python
        def area(width: int, height: int) -> int:
            return width * height

        schema = FunctionSchema(area)
        schema.safe_call(2, 3).value           # 6
        schema.safe_parse({"width": "x", "height": 3}).errors[0].kind
        # ViolationKind.INVALID_ARGUMENTS
        ```
    """

    def __init__(self, func: Callable[..., Any]):
        self.func = func
        self._call = validate_call(func)

        return_type = get_type_hints(func).get("return")
        self._returns: Optional[TypeAdapter] = (
            TypeAdapter(return_type) if return_type is not None else None
        )

    def safe_parse(self, value: Any) -> SafeParseResult:
        """
        Validate a call given as positional (tuple/list) or keyword (mapping) arguments.

        Any other value is passed as the single positional argument.
        """
        if isinstance(value, Mapping):
            return self.safe_call(**value)
        if isinstance(value, (tuple, list)):
            return self.safe_call(*value)
        return self.safe_call(value)

    def safe_call(self, *args: Any, **kwargs: Any) -> SafeParseResult:
        try:
            result = self._call(*args, **kwargs)
        except ValidationError as e:
            return SafeParseResult.fail([
                Violation(
                    path=(),
                    message="Invalid function arguments",
                    kind=ViolationKind.INVALID_ARGUMENTS,
                    inner=violations_from_pydantic(e),
                )
            ])

        if self._returns is None:
            return SafeParseResult.ok(result)

        try:
            return SafeParseResult.ok(self._returns.validate_python(result))
        except ValidationError as e:
            return SafeParseResult.fail([
                Violation(
                    path=(),
                    message="Invalid function return type",
                    kind=ViolationKind.INVALID_RETURN_TYPE,
                    inner=violations_from_pydantic(e),
                )
            ])

    def __repr__(self) -> str:
        return f"FunctionSchema({getattr(self.func, '__qualname__', self.func)!r})"


def as_safe_parseable(schema: Any) -> SafeParseable:
    """
    Coerce a schema into something with safe_parse().

    Objects that already have safe_parse() pass through, dicts are treated as
    JSON Schema, and anything else is handed to pydantic.
    """
    if isinstance(schema, SafeParseable):
        return schema
    if isinstance(schema, dict):
        return JsonSchema(schema)
    return PydanticSchema(schema)


def make_validator(schema: Any) -> Callable[[Any], bool]:
    """
    Build a predicate that returns True when a value satisfies the schema.

    All error detail is discarded.

    Example:
        ```python
        is_port = make_validator(Annotated[int, Field(ge=1, le=65535)])
        is_port(8080)   # True
        is_port(70000)  # False
        ```
    """
    parser = as_safe_parseable(schema)

    def validator(value: Any) -> bool:
        result = parser.safe_parse(value)
        if not result.success:
            logger.debug(f"{parser!r} rejected value with {len(result.errors)} violation(s)")
        return result.success

    return validator
