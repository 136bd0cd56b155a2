"""Fixed lookup tables of the codice fiscale.

Reference: DPR 605/1973, Decreto MEF 12/03/1974 (checksum), DM 23/12/1976
(omocodia).

The tables are grouped in a frozen ``CodecTables`` value so the encoder and
decoder receive them explicitly; ``DEFAULT_TABLES`` is the standard set.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MONTHS: tuple[str, ...] = ("A", "B", "C", "D", "E", "H", "L", "M", "P", "R", "S", "T")

# Checksum tables per Decreto MEF 12/03/1974
ODD_VALUES: dict[str, int] = {
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15,
    "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15,
    "H": 17, "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20,
    "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14, "U": 16,
    "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
}

EVEN_VALUES: dict[str, int] = {
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6,
    "7": 7, "8": 8, "9": 9,
    "A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5, "G": 6,
    "H": 7, "I": 8, "J": 9, "K": 10, "L": 11, "M": 12, "N": 13,
    "O": 14, "P": 15, "Q": 16, "R": 17, "S": 18, "T": 19, "U": 20,
    "V": 21, "W": 22, "X": 23, "Y": 24, "Z": 25,
}

CIN_REMAINDERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Digit → homograph letter used to build omocodes
OMOCODIA: dict[str, str] = {
    "0": "L", "1": "M", "2": "N", "3": "P", "4": "Q",
    "5": "R", "6": "S", "7": "T", "8": "U", "9": "V",
}

# 0-indexed body positions that may carry a homograph letter
OMOCODIA_INDEXES: tuple[int, ...] = (6, 7, 9, 10, 12, 13, 14)

SUPPRESSED_MARKER = " (soppresso)"


def _build_regex(months: tuple[str, ...], omocodia: Mapping[str, str]) -> re.Pattern[str]:
    digit = "[0-9" + "".join(omocodia.values()) + "]"
    month = "[" + "".join(months) + "]"
    return re.compile(
        rf"^([A-Z]{{3}})([A-Z]{{3}})(({digit}{{2}})({month})({digit}{{2}}))([A-Z]{digit}{{3}})([A-Z])$"
    )


# ---------------------------------------------------------------------------
# Injectable bundle
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CodecTables:
    """Immutable bundle of every table the codec reads."""

    months: tuple[str, ...] = MONTHS
    odd_values: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(dict(ODD_VALUES)))
    even_values: Mapping[str, int] = field(default_factory=lambda: MappingProxyType(dict(EVEN_VALUES)))
    cin_remainders: str = CIN_REMAINDERS
    omocodia: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(OMOCODIA)))
    omocodia_indexes: tuple[int, ...] = OMOCODIA_INDEXES

    @cached_property
    def omocodia_inverse(self) -> Mapping[str, str]:
        """Homograph letter → digit."""
        return MappingProxyType({letter: digit for digit, letter in self.omocodia.items()})

    @cached_property
    def regex(self) -> re.Pattern[str]:
        """Structural grammar of a 16-character tax code."""
        return _build_regex(self.months, self.omocodia)


DEFAULT_TABLES = CodecTables()
