"""Omocodia: homograph substitution of digits at fixed body positions.

When two people would receive the same code, the tax office replaces digits
with letters (0→L, 1→M, ... 9→V) starting from the rightmost substitutable
position. Any such variant identifies the same person as its canonical code,
the one with every substitutable position decoded back to a digit.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import combinations

from codice_fiscale.checksum import compute_cin
from codice_fiscale.tables import DEFAULT_TABLES, CodecTables


def decode_char(char: str, tables: CodecTables = DEFAULT_TABLES) -> str:
    """Homograph letter → digit; digits and other characters pass through."""
    return tables.omocodia_inverse.get(char, char)


def encode_char(char: str, tables: CodecTables = DEFAULT_TABLES) -> str:
    """Digit → homograph letter; non-digits pass through."""
    return tables.omocodia.get(char, char)


def decode_chars(text: str, tables: CodecTables = DEFAULT_TABLES) -> str:
    return "".join(decode_char(c, tables) for c in text)


def encode_chars(text: str, tables: CodecTables = DEFAULT_TABLES) -> str:
    return "".join(encode_char(c, tables) for c in text)


def all_substitution_combinations(
    include_empty: bool = True,
    tables: CodecTables = DEFAULT_TABLES,
) -> list[tuple[int, ...]]:
    """Power set of the substitutable positions.

    Ordered by subset size, then lexicographically, so output built from it
    is reproducible. 128 subsets with the empty one, 127 without.
    """
    indexes = tables.omocodia_indexes
    start = 0 if include_empty else 1
    return [combo for size in range(start, len(indexes) + 1) for combo in combinations(indexes, size)]


def _translate(
    tax_code: str,
    indexes: tuple[int, ...],
    translation: Callable[[str], str],
    tables: CodecTables,
) -> str:
    chars = list(tax_code[:15])
    for index in indexes:
        chars[index] = translation(chars[index])
    body = "".join(chars)
    return body + compute_cin(body, tables)


def canonical_code(tax_code: str, tables: CodecTables = DEFAULT_TABLES) -> str:
    """Code with every substitutable position decoded, CIN recomputed."""
    return _translate(tax_code, tables.omocodia_indexes, lambda c: decode_char(c, tables), tables)


def all_omocodes(tax_code: str, tables: CodecTables = DEFAULT_TABLES) -> list[str]:
    """Canonical code followed by its 127 homograph variants.

    Every independent combination of substituted positions is produced, so
    this is the complete set of codes that may be assigned to one person.
    """
    original = canonical_code(tax_code, tables)
    return [original] + [
        _translate(original, combo, lambda c: encode_char(c, tables), tables)
        for combo in all_substitution_combinations(include_empty=False, tables=tables)
    ]


def nested_omocodes(tax_code: str, tables: CodecTables = DEFAULT_TABLES) -> list[str]:
    """Canonical code followed by the 7 cumulative substitutions.

    Positions are re-encoded one at a time from the rightmost, each step
    keeping the previous substitutions: the order in which the tax office
    assigns omocodes.
    """
    chars = list(canonical_code(tax_code, tables)[:15])
    body = "".join(chars)
    codes = [body + compute_cin(body, tables)]
    for index in reversed(tables.omocodia_indexes):
        chars[index] = encode_char(chars[index], tables)
        body = "".join(chars)
        codes.append(body + compute_cin(body, tables))
    return codes
