"""
Centralized logging configuration with categorized loggers.

This module provides a flexible logging system with:
- Named categories for different subsystems
- Per-category log level control
- Levels overridable from settings.json ("log_levels")
"""
import logging
from typing import Dict, Optional
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler


# Logger categories for different subsystems
class LoggerCategory:
    """Named categories for application loggers"""
    CORE = "core"                  # Core services (config, context, managers)
    API = "api"                    # API clients
    UI = "ui"                      # UI components (widgets, dialogs)
    IMAGE_LOADING = "image"        # Image asset loading
    BROWSER = "browser"            # Main window, navigation and workers


# Default log levels for each category
DEFAULT_LOG_LEVELS = {
    LoggerCategory.CORE: logging.INFO,
    LoggerCategory.API: logging.INFO,
    LoggerCategory.UI: logging.WARNING,  # Reduce UI noise
    LoggerCategory.IMAGE_LOADING: logging.WARNING,  # Reduce image loading noise
    LoggerCategory.BROWSER: logging.INFO,
}


# Map module names to categories
MODULE_TO_CATEGORY = {
    # Core
    'postgallery.core': LoggerCategory.CORE,
    'postgallery.core.config': LoggerCategory.CORE,
    'postgallery.core.context': LoggerCategory.CORE,
    'postgallery.core.posts_manager': LoggerCategory.CORE,
    'postgallery.core.slots': LoggerCategory.CORE,

    # API
    'postgallery.core.api': LoggerCategory.API,
    'postgallery.core.api.base': LoggerCategory.API,
    'postgallery.core.api.placeholder': LoggerCategory.API,

    # UI
    'postgallery.ui': LoggerCategory.UI,
    'postgallery.ui.common': LoggerCategory.UI,
    'postgallery.ui.posts': LoggerCategory.UI,
    'postgallery.ui.gallery': LoggerCategory.UI,

    # Browser
    'postgallery.ui.browser': LoggerCategory.BROWSER,
    'postgallery.ui.browser.browser_window': LoggerCategory.BROWSER,
    'postgallery.ui.browser.browser_workers': LoggerCategory.BROWSER,

    # Image Loading
    'postgallery.ui.images': LoggerCategory.IMAGE_LOADING,
    'postgallery.ui.images.image_utils': LoggerCategory.IMAGE_LOADING,
}


class LoggingManager:
    """Manages application-wide logging configuration"""

    def __init__(self, log_dir: Optional[Path] = None, level_overrides: Optional[Dict[str, str]] = None):
        """
        Initialize logging manager.

        Args:
            log_dir: Directory for log files
            level_overrides: Category -> level name (e.g. {"api": "DEBUG"})
        """
        self.log_dir = log_dir or (Path.home() / ".postgallery" / "logs")
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._category_levels: Dict[str, int] = {}
        self._load_levels(level_overrides or {})

    def _load_levels(self, overrides: Dict[str, str]):
        """Merge configured level names over the defaults"""
        self._category_levels = DEFAULT_LOG_LEVELS.copy()
        for category, level_name in overrides.items():
            if category not in DEFAULT_LOG_LEVELS:
                continue
            level = logging.getLevelName(str(level_name).upper())
            if isinstance(level, int):
                self._category_levels[category] = level

    def get_category_level(self, category: str) -> int:
        """Get log level for a category"""
        return self._category_levels.get(category, logging.INFO)

    def set_category_level(self, category: str, level: int):
        """Set log level for a category"""
        self._category_levels[category] = level
        self._apply_category_level(category, level)

    def _apply_category_level(self, category: str, level: int):
        """Apply level to all loggers in a category"""
        for module_name, cat in MODULE_TO_CATEGORY.items():
            if cat == category:
                logging.getLogger(module_name).setLevel(level)

    def setup_logging(self, root_level: int = logging.INFO):
        """
        Setup application logging with categories.

        Args:
            root_level: Root logger level (default: INFO)
        """
        log_file = self.log_dir / "postgallery.log"

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # File handler with rotation
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)

        # Console handler
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(root_level)

        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)

        root_logger.addHandler(file_handler)
        root_logger.addHandler(stream_handler)

        for category, level in self._category_levels.items():
            self._apply_category_level(category, level)

        # Silence noisy third-party loggers
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('requests').setLevel(logging.WARNING)
        logging.getLogger('asyncio').setLevel(logging.WARNING)

    def get_all_levels(self) -> Dict[str, int]:
        """Get all category log levels"""
        return self._category_levels.copy()


# Global instance
_logging_manager: Optional[LoggingManager] = None


def get_logging_manager(log_dir: Optional[Path] = None, level_overrides: Optional[Dict[str, str]] = None) -> LoggingManager:
    """Get or create the global logging manager"""
    global _logging_manager
    if _logging_manager is None:
        _logging_manager = LoggingManager(log_dir=log_dir, level_overrides=level_overrides)
    return _logging_manager


def setup_logging(log_dir: Optional[Path] = None, level_overrides: Optional[Dict[str, str]] = None):
    """Setup application logging (convenience function)"""
    manager = get_logging_manager(log_dir, level_overrides)
    manager.setup_logging()
    return manager
