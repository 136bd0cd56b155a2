"""Check character (CIN) of the codice fiscale.

Each of the first 15 characters is weighted through the odd-position or the
even-position table (1-indexed), the weights are summed and the remainder
modulo 26 picks the check letter.
"""

from __future__ import annotations

import re

from codice_fiscale.tables import DEFAULT_TABLES, CodecTables

_BODY_PATTERN = re.compile(r"[A-Z0-9]{15}")


def compute_cin(body: str, tables: CodecTables = DEFAULT_TABLES) -> str:
    """Compute the check character of a 15-character body.

    Raises:
        ValueError: If ``body`` is not 15 uppercase alphanumeric characters.
    """
    if not _BODY_PATTERN.fullmatch(body):
        msg = f"Checksum body must be 15 uppercase alphanumeric characters, got {body!r}"
        raise ValueError(msg)
    total = 0
    for i, char in enumerate(body):
        if i % 2 == 0:  # odd position (1-indexed)
            total += tables.odd_values[char]
        else:  # even position (1-indexed)
            total += tables.even_values[char]
    return tables.cin_remainders[total % 26]


def has_valid_cin(tax_code: str, tables: CodecTables = DEFAULT_TABLES) -> bool:
    """Check that the 16th character matches the computed CIN."""
    tax_code = tax_code.upper().strip()
    if len(tax_code) != 16 or not _BODY_PATTERN.fullmatch(tax_code[:15]):
        return False
    return tax_code[15] == compute_cin(tax_code[:15], tables)
