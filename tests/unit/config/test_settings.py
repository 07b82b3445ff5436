"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest

from lifecycle_store.config import Settings, setup_logging
from lifecycle_store.config.logging import LoggerMixin, get_module_logger


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, test_settings: Settings):
        assert test_settings.APPOINTMENT_ID_PREFIX == "consulta"
        assert test_settings.ID_START == 1
        assert test_settings.LOG_FILE is None
        assert test_settings.TIMESTAMP_FORMAT == "%d/%m/%Y %H:%M:%S"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("APPOINTMENT_ID_PREFIX", "appt")
        monkeypatch.setenv("id_start", "100")

        settings = Settings(_env_file=None)

        assert settings.APPOINTMENT_ID_PREFIX == "appt"
        assert settings.ID_START == 100

    def test_to_dict_and_repr(self, test_settings: Settings):
        assert test_settings.to_dict()["LOG_LEVEL"] == "DEBUG"
        assert repr(test_settings) == "Settings(log_level=DEBUG, debug=False)"

    def test_create_directories(self, tmp_path: Path):
        settings = Settings(_env_file=None, LOG_FILE=tmp_path / "logs" / "store.log")

        settings.create_directories()

        assert (tmp_path / "logs").is_dir()


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_with_file(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "store.log"
        settings = Settings(_env_file=None, LOG_LEVEL="WARNING", LOG_FILE=log_file)

        setup_logging(settings)
        logging.getLogger("lifecycle_store.test").warning("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_logger_mixin_names_logger_after_class(self):
        class Component(LoggerMixin):
            pass

        assert Component().logger is not None
        assert get_module_logger("store") is not None
