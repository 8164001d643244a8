"""
Main application entry point for Post Gallery
"""
import os
import sys

# Disable Qt's automatic DPI scaling for consistent pixel sizes across displays
os.environ["QT_SCALE_FACTOR"] = "1"

import logging
import asyncio
from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QtMsgType, qInstallMessageHandler
from PyQt6.QtGui import QColor, QPalette
import qasync

from postgallery import __version__
from postgallery.core.config import load_config
from postgallery.utils.file_utils import get_resource_path


# Qt message handler to suppress specific warnings
def qt_message_handler(mode, context, message):
    """Custom Qt message handler to filter out known harmless warnings."""
    if "QFont::setPointSize: Point size <= 0" in message:
        return

    if mode == QtMsgType.QtDebugMsg:
        logging.debug(f"Qt: {message}")
    elif mode == QtMsgType.QtInfoMsg:
        logging.info(f"Qt: {message}")
    elif mode == QtMsgType.QtWarningMsg:
        logging.warning(f"Qt: {message}")
    elif mode == QtMsgType.QtCriticalMsg:
        logging.error(f"Qt: {message}")
    elif mode == QtMsgType.QtFatalMsg:
        logging.critical(f"Qt: {message}")


def setup_logging(config):
    """Configure application logging"""
    from postgallery.utils.logging_config import setup_logging as setup_categorized_logging

    logging_manager = setup_categorized_logging(config.log_dir, config.log_levels)

    qInstallMessageHandler(qt_message_handler)

    logger = logging.getLogger(__name__)
    logger.info("="*50)
    logger.info("Post Gallery Starting")
    logger.info("="*50)

    return logging_manager


def apply_dark_palette(app: QApplication) -> None:
    """Set dark palette for system widgets"""
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor("#1e1e1e"))
    palette.setColor(QPalette.ColorRole.WindowText, QColor("#e0e0e0"))
    palette.setColor(QPalette.ColorRole.Base, QColor("#252525"))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor("#2a2a2a"))
    palette.setColor(QPalette.ColorRole.ToolTipBase, QColor("#2a2a2a"))
    palette.setColor(QPalette.ColorRole.ToolTipText, QColor("#e0e0e0"))
    palette.setColor(QPalette.ColorRole.Text, QColor("#e0e0e0"))
    palette.setColor(QPalette.ColorRole.Button, QColor("#353535"))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor("#e0e0e0"))
    palette.setColor(QPalette.ColorRole.Link, QColor("#f7673a"))
    palette.setColor(QPalette.ColorRole.Highlight, QColor("#f7673a"))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)


async def async_main(config):
    """Async main function with Qt event loop integration"""
    logger = logging.getLogger(__name__)

    try:
        from postgallery.core import CoreContext
        from postgallery.ui.browser import BrowserWindow
        from postgallery.utils.file_utils import apply_windows_dark_mode

        app = QApplication.instance()

        style_path = get_resource_path('resources', 'styles', 'dark_theme.qss')
        if style_path.exists():
            try:
                with open(style_path, 'r', encoding='utf-8') as f:
                    app.setStyleSheet(f.read())
                logger.info("Dark theme applied to application")
            except OSError as e:
                logger.error(f"Error loading application stylesheet: {e}")

        apply_dark_palette(app)

        logger.info("Initializing core context...")
        core = CoreContext(config=config)

        logger.info("Creating browser window...")
        main_window = BrowserWindow(core)
        apply_windows_dark_mode(main_window)
        main_window.show()

        logger.info("Application started successfully - main UI")

        # Keep reference to prevent garbage collection
        app._main_window = main_window
        app._core_context = core

    except Exception as e:
        logger.exception(f"Fatal error during startup: {e}")
        sys.exit(1)


def main():
    """Main application entry point"""
    config = load_config()
    setup_logging(config)
    logger = logging.getLogger(__name__)

    try:
        app = QApplication(sys.argv)
        app.setApplicationName("Post Gallery")
        app.setApplicationVersion(__version__)
        app.setOrganizationName("PostGallery")

        loop = qasync.QEventLoop(app)
        asyncio.set_event_loop(loop)

        logger.info("Starting application with asyncio event loop integration")

        with loop:
            loop.run_until_complete(async_main(config))
            loop.run_forever()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)
    finally:
        logger.info("Shutting down...")
        if 'app' in locals() and hasattr(app, '_core_context'):
            app._core_context.close()
        logger.info("Application closed")


if __name__ == "__main__":
    main()
