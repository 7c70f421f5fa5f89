"""Tests for settings and logging configuration."""

import io
import logging

import pytest
from catalog2model.config.logging import get_logger, resolve_level, setup_logging
from catalog2model.config.settings import Settings, load_env_file


def test_settings_defaults(monkeypatch):
    """Test default settings values."""
    monkeypatch.delenv("CATALOG2MODEL_PLURAL_SUFFIX", raising=False)
    monkeypatch.delenv("CATALOG2MODEL_KEEP_QUOTED_DEFAULTS", raising=False)
    settings = Settings()
    assert settings.plural_suffix == "s"
    assert settings.keep_quoted_defaults is False


def test_settings_from_environment(monkeypatch):
    """Test settings read prefixed, case-insensitive environment variables."""
    monkeypatch.setenv("CATALOG2MODEL_KEEP_QUOTED_DEFAULTS", "true")
    monkeypatch.setenv("catalog2model_plural_suffix", "_set")
    settings = Settings()
    assert settings.keep_quoted_defaults is True
    assert settings.plural_suffix == "_set"


def test_load_env_file_searches_parents(tmp_path, monkeypatch):
    """Test the nearest .env above the start directory is loaded."""
    # Recorded so the value loaded from .env is removed afterwards
    monkeypatch.setenv("CATALOG2MODEL_PLURAL_SUFFIX", "")
    monkeypatch.delenv("CATALOG2MODEL_PLURAL_SUFFIX")
    (tmp_path / ".env").write_text("CATALOG2MODEL_PLURAL_SUFFIX=_many\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert load_env_file(nested) == tmp_path / ".env"
    monkeypatch.chdir(nested)
    assert Settings().plural_suffix == "_many"


def test_settings_creates_log_dir(tmp_path):
    """Test the log file's directory is created."""
    settings = Settings(log_file=tmp_path / "logs" / "run.log")
    assert settings.log_file.name == "run.log"
    assert (tmp_path / "logs").is_dir()


def test_get_logger_prefixes_names():
    """Test loggers live under the package logger."""
    assert get_logger("catalog2model.x").name == "catalog2model.x"
    assert get_logger("other").name == "catalog2model.other"


def test_resolve_level():
    """Test level names are checked."""
    assert resolve_level("debug") == logging.DEBUG
    with pytest.raises(ValueError, match="Unknown log level"):
        resolve_level("chatty")


def test_setup_logging_stream_and_file(tmp_path):
    """Test console stream, level and file handler configuration."""
    stream = io.StringIO()
    log_file = tmp_path / "out.log"
    setup_logging(level="DEBUG", log_file=log_file, stream=stream)
    root = logging.getLogger("catalog2model")
    try:
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert root.propagate is False
        get_logger("test").debug("hello")
        for handler in root.handlers:
            handler.flush()
        assert "DEBUG catalog2model.test: hello" in stream.getvalue()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        setup_logging()


def test_console_logs_go_to_stderr(capsys):
    """Test log records stay off stdout."""
    setup_logging(level="INFO")
    get_logger("test").info("to the console")
    captured = capsys.readouterr()
    setup_logging()
    assert "to the console" in captured.err
    assert captured.out == ""
