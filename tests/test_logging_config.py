"""
Tests for categorized logging configuration
"""

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from postgallery.utils.logging_config import (
    DEFAULT_LOG_LEVELS,
    MODULE_TO_CATEGORY,
    LoggerCategory,
    LoggingManager,
)


@pytest.fixture
def restore_logging():
    """Drop handlers added by the test and restore logger levels."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    module_levels = {name: logging.getLogger(name).level for name in MODULE_TO_CATEGORY}
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for name, module_level in module_levels.items():
        logging.getLogger(name).setLevel(module_level)


class TestLoggingManager:
    """Tests for LoggingManager."""

    def test_creates_log_dir(self, tmp_path):
        log_dir = tmp_path / "nested" / "logs"

        LoggingManager(log_dir=log_dir)

        assert log_dir.is_dir()

    def test_defaults_without_overrides(self, tmp_path):
        manager = LoggingManager(log_dir=tmp_path)

        assert manager.get_all_levels() == DEFAULT_LOG_LEVELS

    def test_overrides_applied(self, tmp_path):
        manager = LoggingManager(log_dir=tmp_path, level_overrides={"api": "debug", "ui": "ERROR"})

        assert manager.get_category_level(LoggerCategory.API) == logging.DEBUG
        assert manager.get_category_level(LoggerCategory.UI) == logging.ERROR

    def test_invalid_overrides_ignored(self, tmp_path):
        manager = LoggingManager(log_dir=tmp_path, level_overrides={"api": "LOUD", "unknown": "DEBUG"})

        assert manager.get_category_level(LoggerCategory.API) == DEFAULT_LOG_LEVELS[LoggerCategory.API]
        assert "unknown" not in manager.get_all_levels()

    def test_setup_installs_handlers(self, tmp_path, restore_logging):
        manager = LoggingManager(log_dir=tmp_path)

        manager.setup_logging()

        root = logging.getLogger()
        assert any(isinstance(h, TimedRotatingFileHandler) for h in root.handlers)
        assert any(type(h) is logging.StreamHandler for h in root.handlers)
        assert logging.getLogger("postgallery.ui.gallery").level == logging.WARNING
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_setup_writes_log_file(self, tmp_path, restore_logging):
        manager = LoggingManager(log_dir=tmp_path)
        manager.setup_logging()

        logging.getLogger("postgallery.core.context").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello from test" in (tmp_path / "postgallery.log").read_text(encoding="utf-8")

    def test_set_category_level(self, tmp_path, restore_logging):
        manager = LoggingManager(log_dir=tmp_path)

        manager.set_category_level(LoggerCategory.BROWSER, logging.DEBUG)

        assert manager.get_category_level(LoggerCategory.BROWSER) == logging.DEBUG
        assert logging.getLogger("postgallery.ui.browser.browser_workers").level == logging.DEBUG
