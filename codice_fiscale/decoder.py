"""Italian Codice Fiscale (CF) decoder.

Recovers gender, birthdate and birthplace from a 16-character tax code and
lists its omocode variants. Homograph letters (omocodia) are accepted in
every numeric position of the year, day and place code.

The check character is not validated: a code is decodable as soon as it
matches the structural grammar and its place code is known.
"""

from __future__ import annotations

import logging
from datetime import date

from codice_fiscale.errors import ParseError
from codice_fiscale.omocodia import decode_chars, nested_omocodes
from codice_fiscale.places import PlaceDirectory, default_directory
from codice_fiscale.schemas.tax_code import DecodedResult, Gender, PlaceRecord, RawGroups
from codice_fiscale.tables import DEFAULT_TABLES, CodecTables

logger = logging.getLogger(__name__)


class Decoder:
    """Decodes one tax code.

    Usage:
        Decoder("RSSMRA80A01F205X").decode().birthplace.name  # "Milano"

    ``today`` anchors century inference and defaults to ``date.today()``.
    """

    def __init__(
        self,
        tax_code: str | None,
        places: PlaceDirectory | None = None,
        tables: CodecTables = DEFAULT_TABLES,
        today: date | None = None,
    ) -> None:
        self.tax_code = (tax_code or "").strip().upper()
        self.places = places if places is not None else default_directory()
        self.tables = tables
        self.today = today or date.today()

    def decode(self) -> DecodedResult:
        """Decode the tax code in its components.

        Raises:
            ParseError: Malformed code, impossible date or unknown place code.
        """
        raw = self.raw()
        gender, day = self._decode_day_and_gender(raw)
        birthdate = self._decode_birthdate(raw, day)
        birthplace = self._decode_birthplace(raw)

        return DecodedResult(
            code=self.tax_code,
            gender=gender,
            birthdate=birthdate,
            birthplace=birthplace,
            omocodes=nested_omocodes(self.tax_code, self.tables),
            raw=raw,
        )

    def raw(self) -> RawGroups:
        """Split the code into its capture groups.

        Raises:
            ParseError: If the code does not match the grammar.
        """
        match = self.tables.regex.match(self.tax_code)
        if match is None:
            logger.debug("Rejected malformed tax code %r", self.tax_code)
            raise ParseError(f"{self.tax_code!r} is not a valid tax code", tax_code=self.tax_code)
        groups = match.groups()
        return RawGroups(
            surname=groups[0],
            name=groups[1],
            birthdate=groups[2],
            birthdate_year=groups[3],
            birthdate_month=groups[4],
            birthdate_day=groups[5],
            birthplace=groups[6],
            cin=groups[7],
        )

    # -----------------------------------------------------------------------
    # Components
    # -----------------------------------------------------------------------

    def _decode_day_and_gender(self, raw: RawGroups) -> tuple[Gender, int]:
        day = int(decode_chars(raw.birthdate_day, self.tables))
        if day > 40:
            return Gender.FEMALE, day - 40
        return Gender.MALE, day

    def _decode_birthdate(self, raw: RawGroups, day: int) -> date:
        # Century is inferred: the current one unless that puts the birth in the future
        year = int(str(self.today.year)[:2] + decode_chars(raw.birthdate_year, self.tables))
        month = self.tables.months.index(raw.birthdate_month) + 1

        try:
            birthdate = date(year, month, day)
            if birthdate > self.today:
                birthdate = date(year - 100, month, day)
        except ValueError as exc:
            raise ParseError(
                f"{self.tax_code!r} has an impossible birthdate ({raw.birthdate})",
                tax_code=self.tax_code,
            ) from exc
        return birthdate

    def _decode_birthplace(self, raw: RawGroups) -> PlaceRecord:
        code = raw.birthplace[0] + decode_chars(raw.birthplace[1:], self.tables)
        place = self.places.resolve_code(code)
        if place is None:
            logger.debug("Unknown place code %s in %r", code, self.tax_code)
            raise ParseError(f"no place found for code {code}", tax_code=self.tax_code)
        return place


def decode(
    tax_code: str | None,
    places: PlaceDirectory | None = None,
    tables: CodecTables = DEFAULT_TABLES,
    today: date | None = None,
) -> DecodedResult:
    """Decode a codice fiscale.

    Args:
        tax_code: The 16-character code; case and surrounding spaces are ignored.
        places: Place directory; defaults to the bundled reference data.
        tables: Codec tables; defaults to the standard ones.
        today: Reference date for century inference.

    Returns:
        DecodedResult with gender, birthdate, birthplace, omocodes and raw groups.

    Raises:
        ParseError: If the code cannot be decoded.
    """
    return Decoder(tax_code, places=places, tables=tables, today=today).decode()


def is_valid(
    tax_code: str | None,
    places: PlaceDirectory | None = None,
    tables: CodecTables = DEFAULT_TABLES,
) -> bool:
    """True iff ``tax_code`` decodes without a ParseError."""
    try:
        decode(tax_code, places=places, tables=tables)
    except ParseError:
        return False
    return True
