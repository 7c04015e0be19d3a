"""
Accent substitution table shared by the regex composer and remove_accents().

Each entry pairs an alternation pattern with its canonical (unaccented)
letter. The table covers the Latin vowels in both cases; consonants and other
diacritics are not handled. Text is expected in composed (NFC) form.
"""

import re
from typing import NamedTuple, Tuple


class AccentGroup(NamedTuple):
    """One vowel and its accented variants, written as a regex alternation."""

    pattern: str
    canonical: str

    @property
    def compiled(self) -> "re.Pattern[str]":
        return _COMPILED[self.pattern]


ACCENT_GROUPS: Tuple[AccentGroup, ...] = (
    AccentGroup("(a|á|à|ä|â|ã)", "a"), AccentGroup("(A|Á|À|Ä|Â|Ã)", "A"),
    AccentGroup("(e|é|è|ë|ê)", "e"),   AccentGroup("(E|É|È|Ë|Ê)", "E"),
    AccentGroup("(i|í|ì|ï|î)", "i"),   AccentGroup("(I|Í|Ì|Ï|Î)", "I"),
    AccentGroup("(o|ó|ò|ö|ô|õ)", "o"), AccentGroup("(O|Ó|Ò|Ö|Ô|Õ)", "O"),
    AccentGroup("(u|ú|ù|ü|û)", "u"),   AccentGroup("(U|Ú|Ù|Ü|Û)", "U"),
)

_COMPILED = {group.pattern: re.compile(group.pattern) for group in ACCENT_GROUPS}


def expand_accents(text: str) -> str:
    """
    Replace every accentable vowel in text with its full alternation group.

    This is plain textual substitution over the expression source: a vowel
    inside a character class or an existing group is rewritten too, which can
    change the meaning of such constructs.
    """
    for group in ACCENT_GROUPS:
        text = group.compiled.sub(lambda _match, p=group.pattern: p, text)
    return text


def remove_accents(text: str) -> str:
    """
    Replace accented vowels with their plain form.

    Args:
        text: Literal text (not a pattern)

    Returns:
        str: text with every vowel from ACCENT_GROUPS reduced to its canonical letter

    Raises:
        TypeError: If text is not a str

    Example:
        ```python
        remove_accents("café")    # "cafe"
        remove_accents("RÉSUMÉ")  # "RESUME"
        ```
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    for group in ACCENT_GROUPS:
        text = group.compiled.sub(group.canonical, text)
    return text
