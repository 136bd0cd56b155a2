"""Pydantic value types exchanged by the encoder and decoder."""

from codice_fiscale.schemas.tax_code import (
    BirthdateInput,
    DecodedResult,
    Gender,
    PersonalData,
    PlaceRecord,
    RawGroups,
)

__all__ = [
    "BirthdateInput",
    "DecodedResult",
    "Gender",
    "PersonalData",
    "PlaceRecord",
    "RawGroups",
]
