"""Italian Codice Fiscale (CF) encoder.

Pure Python, no I/O once the place tables are loaded. Builds the
16-character tax code from surname, name, gender, birthdate and birthplace.

CF format: AAABBB 00C00 D000 E
  - AAA:  surname consonants (then vowels, then X)
  - BBB:  name consonants, 2nd one dropped when there are more than 3
  - 00:   year of birth (last 2 digits)
  - C:    month of birth (letter A–T, non-sequential)
  - 00:   day of birth (1–31 male, 41–71 female)
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    check character

Reference: DPR 605/1973, Decreto MEF 12/03/1974.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from codice_fiscale.checksum import compute_cin
from codice_fiscale.errors import InvalidBirthdateError, MissingDataError
from codice_fiscale.normalizer import extract_consonants, extract_vowels
from codice_fiscale.places import PlaceDirectory, default_directory
from codice_fiscale.schemas.tax_code import BirthdateInput, Gender, PersonalData
from codice_fiscale.tables import DEFAULT_TABLES, CodecTables

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("surname", "name", "gender", "birthdate", "birthplace")

_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%Y/%m/%d", "%d.%m.%Y")


# ---------------------------------------------------------------------------
# Input resolution
# ---------------------------------------------------------------------------


def resolve_birthdate(value: BirthdateInput) -> date:
    """Turn a date or a date string into a calendar date.

    Raises:
        InvalidBirthdateError: If a string matches none of the accepted formats.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise InvalidBirthdateError(f"{value} is not a valid date")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def build_personal_data(data: PersonalData | Mapping[str, Any]) -> PersonalData:
    """Validate raw encoder input into a PersonalData.

    Raises:
        MissingDataError: If a field is missing, blank, or gender is not M/F.
        InvalidBirthdateError: If the birthdate is not a calendar date.
    """
    if isinstance(data, PersonalData):
        data = data.model_dump()

    for field_name in REQUIRED_FIELDS:
        if _is_blank(data.get(field_name)):
            raise MissingDataError(f"missing {field_name} value")

    raw_gender = data["gender"]
    gender = (raw_gender.value if isinstance(raw_gender, Gender) else str(raw_gender)).strip().upper()
    if gender not in {g.value for g in Gender}:
        raise MissingDataError(f"invalid gender value: {data['gender']!r} (expected M or F)")

    return PersonalData(
        surname=data["surname"],
        name=data["name"],
        gender=Gender(gender),
        birthdate=resolve_birthdate(data["birthdate"]),
        birthplace=str(data["birthplace"]).strip(),
    )


# ---------------------------------------------------------------------------
# Encoder
# ---------------------------------------------------------------------------


class Encoder:
    """Computes the tax code of one person.

    Usage:
        Encoder({
            "surname": "Rossi",
            "name": "Mario",
            "gender": "M",
            "birthdate": "1980-01-01",
            "birthplace": "Milano",
        }).encode()  # "RSSMRA80A01F205X"
    """

    def __init__(
        self,
        data: PersonalData | Mapping[str, Any],
        places: PlaceDirectory | None = None,
        tables: CodecTables = DEFAULT_TABLES,
    ) -> None:
        self.data = build_personal_data(data)
        self.places = places if places is not None else default_directory()
        self.tables = tables

    def encode(self) -> str:
        code = self.encode_surname()
        code += self.encode_name()
        code += self.encode_birthdate()
        code += self.encode_birthplace()
        code += compute_cin(code, self.tables)
        logger.debug("Encoded %s", code)
        return code

    def encode_surname(self) -> str:
        consonants = extract_consonants(self.data.surname)
        vowels = extract_vowels(self.data.surname)
        return f"{consonants[:3]}{vowels[:3]}XXX"[:3].upper()

    def encode_name(self) -> str:
        consonants = extract_consonants(self.data.name)
        vowels = extract_vowels(self.data.name)
        if len(consonants) > 3:
            consonants = consonants[0] + consonants[2:]
        return f"{consonants[:3]}{vowels[:3]}XXX"[:3].upper()

    def encode_birthdate(self) -> str:
        birthdate = self.data.birthdate
        year = f"{birthdate.year % 100:02d}"
        month = self.tables.months[birthdate.month - 1]
        day = birthdate.day + (40 if self.data.gender is Gender.FEMALE else 0)
        return f"{year}{month}{day:02d}"

    def encode_birthplace(self) -> str:
        return self.places.find(self.data.birthplace).code


def encode(
    data: PersonalData | Mapping[str, Any],
    places: PlaceDirectory | None = None,
    tables: CodecTables = DEFAULT_TABLES,
) -> str:
    """Encode personal data into a 16-character codice fiscale.

    Args:
        data: PersonalData or a mapping with surname, name, gender,
            birthdate (date or string) and birthplace (name or Belfiore code).
        places: Place directory to resolve the birthplace; defaults to the
            bundled reference data.
        tables: Codec tables; defaults to the standard ones.

    Returns:
        The uppercase tax code.

    Raises:
        MissingDataError: Missing attribute or unknown birthplace.
        InvalidBirthdateError: Unparsable birthdate.
    """
    return Encoder(data, places=places, tables=tables).encode()
