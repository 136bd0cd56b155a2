"""Exceptions raised by the codice fiscale codec.

Every error is terminal: the caller must fix the input. Nothing in the
package retries or recovers.
"""

from __future__ import annotations


class CodiceFiscaleError(Exception):
    """Base class for every codec error."""


class MissingDataError(CodiceFiscaleError):
    """Raised when a required attribute is absent or no place record matches."""


class AmbiguousBirthplaceError(MissingDataError):
    """Raised when a birthplace name matches records with different codes."""

    def __init__(self, message: str, codes: list[str]) -> None:
        super().__init__(message)
        self.codes = codes


class InvalidBirthdateError(CodiceFiscaleError):
    """Raised when the birthdate cannot be read as a calendar date."""


class ParseError(CodiceFiscaleError):
    """Raised when a string is not a well-formed codice fiscale."""

    def __init__(self, message: str, tax_code: str) -> None:
        super().__init__(message)
        self.tax_code = tax_code
