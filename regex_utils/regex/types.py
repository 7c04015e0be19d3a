"""
Pattern type definitions for the regex composer.

Python's ``re`` module stores flags as integers and has no concept of a
"global" or "sticky" expression, so patterns handled by this package are
represented by a small immutable value type that pairs the source text with a
flag string:

    Regex
    ├── source: the expression text, exactly as written
    ├── flags:  a flag string over RECOGNIZED_FLAGS ("gimsuy")
    └── pattern: the compiled re.Pattern (built once, at construction)

Flag letters:
    g  global       - sub() replaces every occurrence
    i  ignore case  - re.IGNORECASE
    m  multiline    - re.MULTILINE
    s  dot-all      - re.DOTALL
    u  unicode      - re.UNICODE (always on for str patterns)
    y  sticky       - test()/search() only match at the start position

Anything the composer accepts as a pattern is a PatternSource: a plain
``str`` (not yet compiled), a ``Regex``, or a plain ``re.Pattern``.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple, Union


RECOGNIZED_FLAGS = "gimsuy"

# Letters that map onto a compile-time flag of the re module.
_RE_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": re.UNICODE,
}

# Bits that can be read back from a plain re.Pattern.
_RE_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
)

# Always present on compiled str patterns; not something a caller chose.
_IMPLICIT_RE_FLAGS = re.UNICODE


class InvalidFlagsError(ValueError):
    """Raised when a flag string contains unknown or repeated characters."""


def check_flags(flags: str) -> None:
    """
    Check that a flag string can be used to build a Regex.

    Args:
        flags: Flag string such as "gi"

    Raises:
        InvalidFlagsError: If a character is outside RECOGNIZED_FLAGS or
            appears more than once
    """
    seen = set()
    for char in flags:
        if char not in RECOGNIZED_FLAGS:
            raise InvalidFlagsError(f"Invalid regex flag {char!r} in {flags!r}")
        if char in seen:
            raise InvalidFlagsError(f"Duplicate regex flag {char!r} in {flags!r}")
        seen.add(char)


def to_re_flags(flags: str) -> int:
    """Translate a flag string into the integer flags understood by re.compile."""
    result = 0
    for char in flags:
        result |= _RE_FLAGS.get(char, 0)
    return result


def from_re_flags(value: int) -> str:
    """
    Translate integer re flags back into a flag string.

    Raises:
        InvalidFlagsError: If the value carries flags with no letter equivalent
            (for example re.VERBOSE or re.ASCII)
    """
    letters = ""
    remaining = value & ~_IMPLICIT_RE_FLAGS
    for bit, letter in _RE_FLAG_LETTERS:
        if remaining & bit:
            letters += letter
            remaining &= ~bit

    if remaining:
        raise InvalidFlagsError(
            f"Pattern carries flags with no letter equivalent: {re.RegexFlag(remaining)!r}"
        )
    return letters


@dataclass(frozen=True)
class Regex:
    """
    A compiled regular expression that remembers its source and flag string.

    Attributes:
        source: Expression text
        flags: Flag string over RECOGNIZED_FLAGS
        pattern: Compiled re.Pattern (derived, not part of equality)

    Raises:
        re.error: If source is not a valid expression
        InvalidFlagsError: If flags is not a valid flag string

    Example:
        ```python
        word = Regex(r"caf(e|é)", "gi")
        word.test("Un CAFÉ")                 # True
        word.sub("tea", "cafe and café")     # "tea and tea"
        ```
    """

    source: str
    flags: str = ""
    pattern: "re.Pattern[str]" = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        check_flags(self.flags)
        object.__setattr__(self, "pattern", re.compile(self.source, to_re_flags(self.flags)))

    @classmethod
    def from_pattern(cls, pattern: "re.Pattern[str]", flags: str = "") -> "Regex":
        """Build a Regex from a plain re.Pattern, merging in extra flags."""
        return cls(*split_source(pattern, flags))

    @property
    def is_global(self) -> bool:
        return "g" in self.flags

    @property
    def is_sticky(self) -> bool:
        return "y" in self.flags

    @property
    def ignore_case(self) -> bool:
        return "i" in self.flags

    def search(self, text: str) -> Optional["re.Match[str]"]:
        """Find the first match; sticky expressions only match at position 0."""
        if self.is_sticky:
            return self.pattern.match(text)
        return self.pattern.search(text)

    def test(self, text: str) -> bool:
        """Return True if the expression matches anywhere in text."""
        return self.search(text) is not None

    def finditer(self, text: str) -> Iterator["re.Match[str]"]:
        return self.pattern.finditer(text)

    def sub(self, repl: Union[str, Callable[["re.Match[str]"], str]], text: str) -> str:
        """Replace every match when global, otherwise only the first one."""
        return self.pattern.sub(repl, text, count=0 if self.is_global else 1)

    def split(self, text: str) -> List[str]:
        return self.pattern.split(text)

    def __str__(self) -> str:
        return f"/{self.source}/{self.flags}"


PatternSource = Union[str, Regex, "re.Pattern[str]"]


def split_source(value: PatternSource, flags: str = "") -> Tuple[str, str]:
    """
    Reduce any pattern source to (text, flags).

    A str is taken as-is with the given flags. A Regex or re.Pattern
    contributes its own source text, and its flags are merged with the given
    ones (existing flags first).

    Raises:
        TypeError: If value is not a str, Regex or str-based re.Pattern
    """
    # Import here to avoid circular dependency
    from regex_utils.regex.composer import combine_flags

    if isinstance(value, str):
        return value, flags
    if isinstance(value, Regex):
        return value.source, combine_flags(value.flags, flags)
    if isinstance(value, re.Pattern) and isinstance(value.pattern, str):
        return value.pattern, combine_flags(from_re_flags(value.flags), flags)

    raise TypeError(f"Expected str or Regex, got {type(value).__name__}")
