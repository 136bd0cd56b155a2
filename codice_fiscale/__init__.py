"""Italian Codice Fiscale codec: encode, decode, validate, omocodes."""

from codice_fiscale.checksum import compute_cin, has_valid_cin
from codice_fiscale.decoder import Decoder, decode, is_valid
from codice_fiscale.encoder import Encoder, encode
from codice_fiscale.errors import (
    AmbiguousBirthplaceError,
    CodiceFiscaleError,
    InvalidBirthdateError,
    MissingDataError,
    ParseError,
)
from codice_fiscale.omocodia import all_omocodes
from codice_fiscale.places import PlaceDirectory

__all__ = [
    "AmbiguousBirthplaceError",
    "CodiceFiscaleError",
    "Decoder",
    "Encoder",
    "InvalidBirthdateError",
    "MissingDataError",
    "ParseError",
    "PlaceDirectory",
    "all_omocodes",
    "compute_cin",
    "decode",
    "encode",
    "has_valid_cin",
    "is_valid",
]
