"""Pydantic schemas for the codice fiscale codec.

Pure data classes, all frozen. Used as inputs/outputs of ``Encoder`` and
``Decoder``.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from codice_fiscale.tables import SUPPRESSED_MARKER

# Already-a-date or text that still has to be parsed
BirthdateInput = date | str


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Gender(str, Enum):
    """Gender as encoded in the day field (+40 for females)."""

    MALE = "M"
    FEMALE = "F"


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------


class PlaceRecord(BaseModel):
    """A municipality or foreign country with its cadastral (Belfiore) code."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    code: str = Field(pattern=r"^[A-Z][0-9]{3}$")  # e.g. "F205"

    @property
    def is_suppressed(self) -> bool:
        """True for merged or abolished municipalities."""
        return "soppresso" in self.name

    @property
    def display_name(self) -> str:
        return self.name.replace(SUPPRESSED_MARKER, "")


# ---------------------------------------------------------------------------
# Encoder input
# ---------------------------------------------------------------------------


class PersonalData(BaseModel):
    """The five attributes a codice fiscale is computed from."""

    model_config = ConfigDict(frozen=True)

    surname: str = Field(min_length=1)
    name: str = Field(min_length=1)
    gender: Gender
    birthdate: date
    birthplace: str = Field(min_length=1)  # place name or Belfiore code


# ---------------------------------------------------------------------------
# Decoder output
# ---------------------------------------------------------------------------


class RawGroups(BaseModel):
    """Unparsed capture groups of a tax code."""

    model_config = ConfigDict(frozen=True)

    surname: str
    name: str
    birthdate: str
    birthdate_year: str
    birthdate_month: str
    birthdate_day: str
    birthplace: str
    cin: str


class DecodedResult(BaseModel):
    """Everything recoverable from a tax code.

    Surname and name letters are lossy and only available in ``raw``.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    gender: Gender
    birthdate: date
    birthplace: PlaceRecord          # soppresso marker already stripped
    omocodes: list[str]              # canonical code first
    raw: RawGroups
