"""Tests for settings and logging setup."""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog
from pydantic import ValidationError

from codice_fiscale.config import DATA_DIR, Settings
from codice_fiscale.log import configure_logging


class TestSettings:
    def test_defaults_point_to_bundled_data(self) -> None:
        settings = Settings()
        assert settings.municipalities_path == DATA_DIR / "municipalities.json"
        assert settings.countries_path == DATA_DIR / "countries.json"
        assert settings.municipalities_path.exists()
        assert settings.countries_path.exists()

    def test_log_level_normalized(self) -> None:
        assert Settings(log_level="warning").log_level == "WARNING"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(log_level="LOUD")

    def test_paths_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        custom = tmp_path / "comuni.json"
        monkeypatch.setenv("MUNICIPALITIES_PATH", str(custom))
        assert Settings().municipalities_path == custom


class TestLogging:
    def test_configure_logging(self) -> None:
        configure_logging("DEBUG")
        config = structlog.get_config()
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_configure_logging_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging("LOUD")

    def test_configure_logging_accepts_lowercase(self) -> None:
        configure_logging("info")
        assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger
