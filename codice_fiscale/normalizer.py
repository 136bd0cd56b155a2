"""Name normalization for encoding and place matching.

Free text (surname, name, birthplace) is folded to lowercase ASCII slugs so
that comparisons ignore case, accents and punctuation.
"""

from __future__ import annotations

import re
import unicodedata

CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyz")
VOWELS = frozenset("aeiou")

# Letters NFKD does not decompose into an ASCII base
_TRANSLITERATIONS: dict[str, str] = {
    "ø": "o", "æ": "ae", "œ": "oe", "ł": "l", "đ": "d",
    "ð": "d", "þ": "th", "ı": "i", "ħ": "h",
}

_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slug(text: str | None) -> str:
    """Fold ``text`` into a lowercase ASCII slug.

    >>> slug("  Forlì-Cesena ")
    'forli-cesena'
    >>> slug("L'Aquila")
    'l-aquila'
    """
    if not text:
        return ""
    folded = "".join(_TRANSLITERATIONS.get(ch, ch) for ch in text.casefold())
    decomposed = unicodedata.normalize("NFKD", folded)
    ascii_only = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    ascii_only = ascii_only.encode("ascii", "ignore").decode("ascii")
    return _SEPARATORS.sub("-", ascii_only).strip("-")


def extract_consonants(text: str | None) -> str:
    """Consonants of the slugged ``text``, in order."""
    return "".join(ch for ch in slug(text) if ch in CONSONANTS)


def extract_vowels(text: str | None) -> str:
    """Vowels of the slugged ``text``, in order."""
    return "".join(ch for ch in slug(text) if ch in VOWELS)
