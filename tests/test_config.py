"""Tests for settings and logger setup."""

import logging

import pytest
from pydantic import ValidationError

from functionals import PredicateMode, Settings, override_settings
from functionals import config
from functionals.logger import setup_logger


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("FUNCTIONALS_PREDICATE_MODE", "FUNCTIONALS_INDEX_BASE", "FUNCTIONALS_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.load()
        assert settings.predicate_mode is PredicateMode.STRICT
        assert settings.index_base == 0
        assert settings.log_level == "WARNING"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("FUNCTIONALS_PREDICATE_MODE", "TRUTHY")
        monkeypatch.setenv("FUNCTIONALS_INDEX_BASE", "1")
        monkeypatch.setenv("FUNCTIONALS_LOG_LEVEL", "debug")
        settings = Settings.load()
        assert settings.predicate_mode is PredicateMode.TRUTHY
        assert settings.index_base == 1
        assert settings.log_level == "DEBUG"

    def test_invalid_index_base(self):
        with pytest.raises(ValidationError):
            Settings(index_base=2)

    def test_override_restores(self):
        before = config.settings
        with override_settings(predicate_mode="truthy") as active:
            assert config.settings is active
            assert active.predicate_mode is PredicateMode.TRUTHY
        assert config.settings is before


class TestLogger:
    def test_configures_once(self):
        first = setup_logger("functionals.test", level="DEBUG")
        second = setup_logger("functionals.test", level="ERROR")
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG

    def test_package_logger_left_unconfigured(self):
        from functionals.logger import logger

        assert logger is logging.getLogger("functionals")
        assert logger.propagate is True
        assert logger.handlers == []

    def test_records_reach_caller_handlers(self, caplog):
        from functionals import map2

        caplog.set_level(logging.DEBUG, logger="functionals")
        map2([1, 2, 3, 4], [1, 2], lambda a, b: a + b)
        assert any(record.name.startswith("functionals") for record in caplog.records)
