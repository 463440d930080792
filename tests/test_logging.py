"""
Logging configuration tests.

Module loggers sit under the package logger, so the configured level and log
file apply to engine debug output (dispatch misses, cache activity).
"""

import logging

import pytest

from heroviz.config.schemas import EngineConfig
from heroviz.core import ROOT_LOGGER, configure_logging, get_logger
from heroviz.procedural.registry import dispatch
from heroviz.utils.config import load_engine_config


@pytest.fixture
def package_logger():
    """Restore the package logger's level and handlers after each test"""
    logger = logging.getLogger(ROOT_LOGGER)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def _registry_records(caplog):
    return [r for r in caplog.records if r.name == "heroviz.registry"]


class TestLoggerTree:
    def test_module_loggers_have_no_handlers(self, package_logger):
        child = get_logger("heroviz.registry")
        assert child.handlers == []
        assert child.parent is package_logger
        assert package_logger.handlers

    def test_handlers_attached_once(self, package_logger):
        count = len(package_logger.handlers)
        get_logger(ROOT_LOGGER)
        get_logger("heroviz.visual")
        assert len(package_logger.handlers) == count


class TestConfigureLogging:
    def test_debug_level_reaches_dispatch_misses(self, package_logger, caplog):
        configure_logging(EngineConfig(logging={"level": "DEBUG"}))
        assert dispatch("doesNotExist") is None
        records = _registry_records(caplog)
        assert records
        assert records[0].levelno == logging.DEBUG
        assert "doesNotExist" in records[0].getMessage()

    def test_info_level_hides_debug(self, package_logger, caplog):
        configure_logging(EngineConfig(logging={"level": "INFO"}))
        dispatch("doesNotExist")
        assert _registry_records(caplog) == []

    def test_env_level_applies_to_engine_modules(self, package_logger, monkeypatch):
        monkeypatch.setenv("HEROVIZ_LOG_LEVEL", "debug")
        configure_logging(load_engine_config())
        assert logging.getLogger("heroviz.descriptor_cache").getEffectiveLevel() == logging.DEBUG

    def test_log_file_receives_module_records(self, package_logger, tmp_path):
        log_file = tmp_path / "logs" / "heroviz.log"
        configure_logging(EngineConfig(logging={"level": "DEBUG", "log_file": str(log_file)}))
        dispatch("doesNotExist", "tile")
        for handler in package_logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "doesNotExist" in text
        assert '"step":"heroviz.registry"' in text
