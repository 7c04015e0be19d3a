"""
Regex composition module.

This module builds and combines regular expressions: flag union, literal
escaping, accent-insensitive and case-insensitive rewriting, whole-string
anchoring, and a pipeline that applies a subset of these in a fixed order.

Components:
    - types: Regex value type, flag alphabet and flag translation
    - accents: Accent substitution table and remove_accents()
    - composer: The transform functions and validity checks

Example:
    ```python
    from regex_utils.regex import escape_regex, transform_regex, remove_accents

    escape_regex("1+1=2").test("1+1=2")           # True
    transform_regex("resume", accent_insensitive=True).test("résumé")  # True
    remove_accents("Crème brûlée")                 # "Creme brulee"
    ```
"""

from regex_utils.regex.types import (
    RECOGNIZED_FLAGS,
    InvalidFlagsError,
    PatternSource,
    Regex,
)
from regex_utils.regex.accents import ACCENT_GROUPS, AccentGroup, remove_accents
from regex_utils.regex.composer import (
    TransformOptions,
    combine_flags,
    escape_regex,
    regex_accent_insensitive,
    regex_case_insensitive,
    regex_match_whole,
    transform_regex,
    is_valid_regex,
    is_valid_regex_flags,
)

__all__ = [
    "RECOGNIZED_FLAGS",
    "InvalidFlagsError",
    "PatternSource",
    "Regex",
    "ACCENT_GROUPS",
    "AccentGroup",
    "remove_accents",
    "TransformOptions",
    "combine_flags",
    "escape_regex",
    "regex_accent_insensitive",
    "regex_case_insensitive",
    "regex_match_whole",
    "transform_regex",
    "is_valid_regex",
    "is_valid_regex_flags",
]
