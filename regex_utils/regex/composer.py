"""
Regex composer - build and combine regular expressions.

Every transform accepts a PatternSource (str, Regex or re.Pattern) plus an
optional flag string and returns a new compiled Regex. When the input is
already compiled, its flags are merged with the supplied ones (set union,
first-seen order).

Usage:
    ```python
    from regex_utils.regex import transform_regex

    pattern = transform_regex(
        "cafe",
        accent_insensitive=True,
        case_insensitive=True,
        match_whole=True,
    )
    pattern.test("CAFÉ")   # True
    pattern.test("cafes")  # False
    ```

Transform order (transform_regex):
    1. accent-insensitive expansion (rewrites the source text)
    2. case-insensitive flag
    3. whole-string anchoring
    4. final compile with options.flags merged in

Limitations:
    - Accent expansion is textual substitution over the source, so vowels
      inside character classes are rewritten as well
    - Anchoring does not check for existing anchors; applying match_whole to an
      already anchored pattern wraps it again
"""

import dataclasses
import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from regex_utils.regex.accents import expand_accents
from regex_utils.regex.types import (
    RECOGNIZED_FLAGS,
    InvalidFlagsError,
    PatternSource,
    Regex,
    split_source,
)

logger = logging.getLogger(__name__)

# Characters escaped by escape_regex(). Only top-level literal escaping.
_METACHARACTERS = re.compile(r"[\-\^$.*+?{}()|\[\]\\]")

_VALID_FLAGS = re.compile(f"[{RECOGNIZED_FLAGS}]*")


@dataclass(frozen=True)
class TransformOptions:
    """
    Options for transform_regex().

    Attributes:
        flags: Extra flags merged into the result
        accent_insensitive: Expand vowels to match their accented variants
        case_insensitive: Add the "i" flag
        match_whole: Anchor the pattern to the whole string
    """
    flags: str = ""
    accent_insensitive: bool = False
    case_insensitive: bool = False
    match_whole: bool = False


def combine_flags(*flags: Optional[str]) -> str:
    """
    Union of the characters of every flag string, in first-seen order.

    Empty and None inputs are ignored.

    Example:
        ```python
        combine_flags("gi", "im", None, "")  # "gim"
        ```
    """
    result = []
    for value in flags:
        if not value:
            continue
        for char in value:
            if char not in result:
                result.append(char)
    return "".join(result)


def escape_regex(value: PatternSource, flags: str = "") -> Regex:
    """
    Compile a pattern that matches the given text literally.

    Args:
        value: Text to escape, or a compiled pattern whose source is escaped
        flags: Flags for the result (merged with existing ones)

    Returns:
        Regex: Pattern matching the literal text

    Raises:
        TypeError: If value is not a pattern source

    Example:
        ```python
        escape_regex("a.b*c").source  # r"a\\.b\\*c"
        ```
    """
    text, flags = split_source(value, flags)
    return Regex(_METACHARACTERS.sub(r"\\\g<0>", text), flags)


def regex_accent_insensitive(value: PatternSource, flags: str = "") -> Regex:
    """
    Rewrite a pattern so every vowel also matches its accented variants.

    Each vowel in the source text is replaced by its alternation group,
    e.g. "cafe" becomes "caf(e|é|è|ë|ê)".
    """
    text, flags = split_source(value, flags)
    return Regex(expand_accents(text), flags)


def regex_case_insensitive(value: PatternSource, flags: str = "") -> Regex:
    """Compile the pattern with the "i" flag added."""
    text, flags = split_source(value, flags)
    if "i" not in flags:
        flags += "i"
    return Regex(text, flags)


def regex_match_whole(value: PatternSource, flags: str = "") -> Regex:
    """Anchor the pattern to the start and end of the string."""
    text, flags = split_source(value, flags)
    return Regex(f"^{text}\\Z", flags)


def transform_regex(
    value: PatternSource,
    options: Optional[TransformOptions] = None,
    **overrides: Any,
) -> Regex:
    """
    Apply the transforms selected by options, in a fixed order.

    Args:
        value: Pattern source to transform
        options: TransformOptions (defaults to no transforms)
        **overrides: TransformOptions fields overriding options

    Returns:
        Regex: The transformed pattern

    Example:
        ```python
        transform_regex("abc", match_whole=True).test("xabcx")  # False

        opts = TransformOptions(flags="g", case_insensitive=True)
        transform_regex(r"\\d+", opts).flags  # "gi"
        ```
    """
    if options is None:
        options = TransformOptions(**overrides)
    elif overrides:
        options = dataclasses.replace(options, **overrides)

    flags = options.flags
    if options.accent_insensitive:
        value = regex_accent_insensitive(value, flags)
    if options.case_insensitive:
        value = regex_case_insensitive(value, flags)
    if options.match_whole:
        value = regex_match_whole(value, flags)

    text, flags = split_source(value, flags)
    result = Regex(text, flags)
    logger.debug(f"transform_regex({options}) -> {result}")
    return result


def is_valid_regex(value: PatternSource, flags: str = "") -> bool:
    """
    Check whether a pattern compiles with the given flags.

    Returns:
        bool: True if compilation succeeds, False otherwise

    Example:
        ```python
        assert is_valid_regex("[a-z]+") == True
        assert is_valid_regex("(unclosed") == False
        ```
    """
    try:
        Regex(*split_source(value, flags))
        return True
    except (re.error, InvalidFlagsError, OverflowError, RecursionError) as e:
        logger.debug(f"Invalid regex {value!r} with flags {flags!r}: {e}")
        return False


def is_valid_regex_flags(value: str) -> bool:
    """Return True if every character of value is a recognized flag letter."""
    return _VALID_FLAGS.fullmatch(value) is not None
