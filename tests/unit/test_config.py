"""Tests for settings and logging configuration."""

from loguru import logger

from rich_domain.config import get_config, get_logger, settings, setup_loguru_logger
from rich_domain.config.settings import Settings


class TestSettings:
    """Test settings loading."""

    def test_defaults(self):
        """Test default domain configuration."""
        config = Settings()

        assert config.domain.short_id_length == 16
        assert config.domain.track_history is True
        assert config.logging.console_level == "INFO"

    def test_flat_keys_are_nested(self):
        """Test flat keys land in their sections."""
        config = Settings(short_id_length=12, track_history=False, console_log_level="DEBUG")

        assert config.domain.short_id_length == 12
        assert config.domain.track_history is False
        assert config.logging.console_level == "DEBUG"

    def test_nested_env_vars(self, monkeypatch):
        """Test nested environment variables."""
        monkeypatch.setenv("DOMAIN__SHORT_ID_LENGTH", "20")
        monkeypatch.setenv("DOMAIN__TRACK_HISTORY", "false")

        config = Settings()

        assert config.domain.short_id_length == 20
        assert config.domain.track_history is False

    def test_get_config(self):
        """Test flat key access."""
        assert get_config("SHORT_ID_LENGTH") == settings.domain.short_id_length
        assert get_config("TRACK_HISTORY") == settings.domain.track_history
        assert get_config("MISSING", "fallback") == "fallback"


class TestLogging:
    """Test loguru setup."""

    def test_get_logger_binds_context(self):
        """Test module loggers carry their context."""
        records = []
        handler_id = logger.add(records.append, format="{message}")
        try:
            get_logger("tests.unit").info("hello")
        finally:
            logger.remove(handler_id)

        assert records[0].record["extra"]["module"] == "tests.unit"
        assert records[0].record["extra"]["service"] == "rich_domain"

    def test_setup_writes_log_file(self, monkeypatch, tmp_path):
        """Test setup adds a file sink at the configured path."""
        log_file = tmp_path / "logs" / "rich_domain.log"
        monkeypatch.setattr(settings.logging, "log_file", log_file)

        try:
            setup_loguru_logger(verbose=True)
            get_logger(__name__).info("written")
            logger.complete()
        finally:
            logger.remove()

        assert log_file.exists()
        assert "written" in log_file.read_text()
