"""
Error formatter - flatten violations into path-qualified messages.

A violation with a non-empty path is formatted as ``path: message`` (path
segments joined with a separator, "." by default); one with an empty path is
just ``message``. Violations of kind INVALID_ARGUMENTS / INVALID_RETURN_TYPE
are not printed themselves: their inner violations are, with the path
extended by the marker ``arguments`` or ``returnType``.

Example:
    ```python
    interpret_errors([Violation(("user", "age"), "must be positive")])
    # "user.age: must be positive"

    interpret_errors(violations, prefix="request", separator="/")
    # ["request/name: required", "request/age: must be positive"]
    ```
"""

import logging
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from regex_utils.validation.validator import (
    PathSegment,
    Violation,
    ViolationKind,
    as_safe_parseable,
    violations_from_pydantic,
)

logger = logging.getLogger(__name__)

NESTED_MARKERS = {
    ViolationKind.INVALID_ARGUMENTS.value: "arguments",
    ViolationKind.INVALID_RETURN_TYPE.value: "returnType",
}

GENERIC_MESSAGE = "Invalid value"

Prefix = Union[None, str, Sequence[PathSegment]]
InterpretedErrors = Union[str, List[str]]


class ValidationFailedError(ValueError):
    """
    Raised by throwing validators when a value fails validation.

    Attributes:
        errors: The interpreted result (one message or a list of messages)
        messages: Every formatted message, always as a list
    """

    def __init__(self, messages: List[str], joiner: str = "\n"):
        super().__init__(joiner.join(messages))
        self.messages = messages
        self.errors: InterpretedErrors = messages[0] if len(messages) == 1 else messages


def _prefix_path(prefix: Prefix) -> Tuple[PathSegment, ...]:
    if prefix is None:
        return ()
    if isinstance(prefix, str):
        return (prefix,) if prefix else ()
    return tuple(prefix)


def _flatten(violation: Violation, base: Tuple[PathSegment, ...]) -> Iterator[Tuple[Tuple[PathSegment, ...], str]]:
    path = base + tuple(violation.path)
    kind = getattr(violation.kind, "value", violation.kind)
    marker = NESTED_MARKERS.get(kind)
    if marker is not None and violation.inner:
        for inner in violation.inner:
            yield from _flatten(inner, path + (marker,))
    else:
        yield path, violation.message


def format_violations(
    violations: Union[Sequence[Violation], ValidationError],
    separator: str = ".",
    prefix: Prefix = None,
) -> List[str]:
    """
    Format every violation as a message.

    Args:
        violations: Violations, or a pydantic ValidationError
        separator: String used to join path segments
        prefix: Path segment(s) prepended to every violation's path

    Returns:
        List[str]: One message per (flattened) violation, in order
    """
    if isinstance(violations, ValidationError):
        violations = violations_from_pydantic(violations)

    base = _prefix_path(prefix)
    messages = []
    for violation in violations:
        for path, message in _flatten(violation, base):
            if path:
                messages.append(f"{separator.join(str(p) for p in path)}: {message}")
            else:
                messages.append(message)
    return messages


def interpret_errors(
    violations: Union[Sequence[Violation], ValidationError],
    separator: str = ".",
    prefix: Prefix = None,
) -> Optional[InterpretedErrors]:
    """
    Turn violations into a single message or a list of messages.

    Returns:
        None if there are no violations, the message itself if there is
        exactly one, otherwise the list of messages
    """
    messages = format_violations(violations, separator=separator, prefix=prefix)
    if not messages:
        return None
    if len(messages) == 1:
        return messages[0]
    return messages


def make_detailed_validator(
    schema: Any,
    throw: bool = False,
    separator: str = ".",
    prefix: Prefix = None,
    joiner: str = "\n",
) -> Callable[[Any], Union[bool, InterpretedErrors]]:
    """
    Build a predicate that returns True or the formatted validation errors.

    Args:
        schema: Anything accepted by as_safe_parseable()
        throw: Raise ValidationFailedError instead of returning the errors
        separator: Path separator used in messages
        prefix: Path segment(s) prepended to every message's path
        joiner: Separator between messages in the raised error's text

    Returns:
        Callable returning True on success, otherwise a message (exactly one
        violation) or a list of messages

    Example:
        ```python
        check = make_detailed_validator({"type": "object", "required": ["id"]})
        check({"id": 1})  # True
        check({})         # "'id' is a required property"
        ```
    """
    parser = as_safe_parseable(schema)

    def validator(value: Any) -> Union[bool, InterpretedErrors]:
        result = parser.safe_parse(value)
        if result.success:
            return True

        messages = format_violations(result.errors, separator=separator, prefix=prefix) or [GENERIC_MESSAGE]
        logger.debug(f"{parser!r} rejected value: {messages}")
        if throw:
            raise ValidationFailedError(messages, joiner=joiner)
        return messages[0] if len(messages) == 1 else messages

    return validator
