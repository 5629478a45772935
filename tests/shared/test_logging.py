import logging
import logging.handlers

from shared.logging import configure_logging, log_level_for


class TestLogLevel:
    def test_level_follows_environment(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert log_level_for("production") == "INFO"
        assert log_level_for("development") == "DEBUG"
        assert log_level_for("test") == "WARNING"
        assert log_level_for("unknown") == "INFO"

    def test_log_level_variable_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        assert log_level_for("development") == "ERROR"


class TestConfigureLogging:
    def test_writes_rotating_files_when_log_dir_given(self, tmp_path):
        try:
            configure_logging(level="INFO", log_dir=str(tmp_path), force=True)

            handlers = logging.getLogger().handlers
            files = sorted(h.baseFilename for h in handlers if isinstance(h, logging.handlers.RotatingFileHandler))
            assert files == [str(tmp_path / "shopfront.log"), str(tmp_path / "shopfront_error.log")]
            assert logging.getLogger("protean").level == logging.WARNING
        finally:
            configure_logging(force=True)
