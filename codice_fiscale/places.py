"""Read-only directory of birthplaces (municipalities, then foreign countries).

Loads the Belfiore code tables from ``data/*.json`` once per process. Each
file has the shape ``{"places": [{"name": ..., "code": ...}, ...]}``.

The bundled files are a subset: provincial capitals, a few merged
(soppresso) municipalities and the most common foreign countries. Set
``MUNICIPALITIES_PATH`` / ``COUNTRIES_PATH`` to the complete ISTAT and
Agenzia delle Entrate tables, or inject a ``PlaceDirectory``, to cover every
birthplace.

Lookups walk the sources in order and stop at the first one that matches:
a foreign country is only considered when no municipality matches.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from codice_fiscale.config import settings
from codice_fiscale.errors import AmbiguousBirthplaceError, MissingDataError
from codice_fiscale.normalizer import slug
from codice_fiscale.schemas.tax_code import PlaceRecord

logger = logging.getLogger(__name__)

_CODE_SHAPE = re.compile(r"^[A-Za-z]\d{3}$")


def looks_like_code(text: str) -> bool:
    """True when ``text`` has the shape of a Belfiore code (letter + 3 digits)."""
    return bool(_CODE_SHAPE.match(text.strip()))


@dataclass(frozen=True)
class PlaceSource:
    """A named, ordered collection of place records."""

    name: str
    records: tuple[PlaceRecord, ...]

    def by_code(self, code: str) -> list[PlaceRecord]:
        code = code.upper()
        return [r for r in self.records if r.code == code]

    def by_name(self, name: str) -> list[PlaceRecord]:
        key = slug(name)
        return [r for r in self.records if slug(r.display_name) == key]


# ---------------------------------------------------------------------------
# Directory
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlaceDirectory:
    """Ordered lookup sources; the first source with a match wins."""

    sources: tuple[PlaceSource, ...]

    @classmethod
    def from_records(
        cls,
        municipalities: list[PlaceRecord] | tuple[PlaceRecord, ...],
        countries: list[PlaceRecord] | tuple[PlaceRecord, ...] = (),
    ) -> PlaceDirectory:
        """Build a directory from in-memory records (municipalities first)."""
        return cls(
            sources=(
                PlaceSource("municipalities", tuple(municipalities)),
                PlaceSource("countries", tuple(countries)),
            )
        )

    def find(self, birthplace: str) -> PlaceRecord:
        """Resolve a free-text birthplace (name or code) for encoding.

        Args:
            birthplace: Place name ("Milano", "Forlì") or Belfiore code ("F205").

        Returns:
            The matching PlaceRecord.

        Raises:
            MissingDataError: If no source has a matching record.
            AmbiguousBirthplaceError: If the name matches several distinct codes.
        """
        by_code = looks_like_code(birthplace)
        for source in self.sources:
            matches = source.by_code(birthplace.strip()) if by_code else source.by_name(birthplace)
            if matches:
                return _pick_for_encoding(birthplace, source, matches)
        logger.debug("No place record for %r", birthplace)
        raise MissingDataError(f"no code found for {birthplace}")

    def resolve_code(self, code: str) -> PlaceRecord | None:
        """Resolve a Belfiore code found in a tax code.

        Among records sharing the code, the first non-suppressed one wins;
        if every record is suppressed, the last one is taken. The soppresso
        marker is stripped from the returned name.
        """
        for source in self.sources:
            matches = source.by_code(code)
            if not matches:
                continue
            place = next((m for m in matches if not m.is_suppressed), matches[-1])
            return PlaceRecord(name=place.display_name, code=place.code)
        return None


def _pick_for_encoding(birthplace: str, source: PlaceSource, matches: list[PlaceRecord]) -> PlaceRecord:
    active = [m for m in matches if not m.is_suppressed]
    candidates = active or matches
    codes = sorted({m.code for m in candidates})
    if len(codes) > 1:
        logger.debug("Ambiguous birthplace %r in %s: %s", birthplace, source.name, codes)
        raise AmbiguousBirthplaceError(
            f"{birthplace} matches several {source.name}: {', '.join(codes)}",
            codes=codes,
        )
    return candidates[0]


# ---------------------------------------------------------------------------
# Reference data loader (cached)
# ---------------------------------------------------------------------------


def load_places(path: Path) -> tuple[PlaceRecord, ...]:
    """Load place records from a JSON reference file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    records = tuple(PlaceRecord.model_validate(item) for item in data.get("places", []))
    logger.debug("Loaded %d place records from %s", len(records), path)
    return records


@lru_cache(maxsize=1)
def default_directory() -> PlaceDirectory:
    """The process-wide directory built from the configured reference files."""
    return PlaceDirectory.from_records(
        load_places(settings.municipalities_path),
        load_places(settings.countries_path),
    )
