"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from optionkit.config import InvalidSettingValueError, LoggingSettings
from optionkit.observability.logging import JsonLoggerFactory, get_logger


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_returns_a_logger(self) -> None:
        assert get_logger("test.module") is not None

    def test_returned_logger_has_info_method(self) -> None:
        assert callable(getattr(get_logger("test.module"), "info", None))

    def test_kwargs_bind_context(self) -> None:
        log = get_logger("test.module", service="svc", version="1.0")
        assert structlog.get_context(log) == {"service": "svc", "version": "1.0"}


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("test.json").info("option.checked", present=True)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "option.checked"
        assert payload["present"] is True
        assert payload["level"] == "info"
        assert payload["logger"] == "test.json"

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO, json=False)
        get_logger("test.console").info("option.checked")
        assert "option.checked" in capsys.readouterr().err

    def test_level_filters_records(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.ERROR)
        get_logger("test.filtered").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_configure_from_settings(self) -> None:
        JsonLoggerFactory.configure_from_settings(LoggingSettings(level="debug", json=False))
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTIONKIT_LOG_LEVEL", "error")
        JsonLoggerFactory.configure_from_settings()
        assert logging.getLogger().level == logging.ERROR

    def test_configure_from_env_invalid_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPTIONKIT_LOG_LEVEL", "loud")
        with pytest.raises(InvalidSettingValueError):
            JsonLoggerFactory.configure_from_settings()


# ---------------------------------------------------------------------------
# Public surface smoke test
# ---------------------------------------------------------------------------


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("optionkit.observability.logging")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} listed in __all__ but not found"
