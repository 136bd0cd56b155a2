"""Codec configuration via pydantic-settings.

Values are read from environment variables or a ``.env`` file. The only
settings are the log level and the location of the place reference files.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_log_level(v: str) -> str:
    """Upper-case a log level name, rejecting unknown ones."""
    upper = v.upper()
    if upper not in LOG_LEVELS:
        msg = f"Invalid log level: {v}. Must be one of {set(LOG_LEVELS)}"
        raise ValueError(msg)
    return upper


class Settings(BaseSettings):
    """Root settings.

    Usage:
        settings = Settings()
        settings.municipalities_path
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO")
    municipalities_path: Path = Field(
        default=DATA_DIR / "municipalities.json",
        description=(
            "JSON file with the Italian municipalities, searched first. The bundled file "
            "only lists the provincial capitals and a few merged municipalities: point this "
            "at the full ISTAT list to encode people born elsewhere"
        ),
    )
    countries_path: Path = Field(
        default=DATA_DIR / "countries.json",
        description=(
            "JSON file with the foreign countries, searched as fallback. The bundled file "
            "is a subset of the Belfiore Z-codes"
        ),
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        return normalize_log_level(v)


# Module-level singleton: import this wherever settings are needed.
settings = Settings()
