"""
Background worker threads for browser window operations.
"""
from PyQt6.QtCore import QThread, pyqtSignal
import logging

logger = logging.getLogger(__name__)


class PostsLoadWorker(QThread):
    """
    Background worker for loading posts from the API.

    Signals:
        loaded(posts): Emitted on success with a list of PostDTO
        failed(error): Emitted on failure
    """
    loaded = pyqtSignal(list)
    failed = pyqtSignal(str)

    def __init__(self, *, posts_manager, parent=None):
        super().__init__(parent)
        self._posts_manager = posts_manager
        self._cancelled = False

    def cancel(self) -> None:
        """Cancel the worker. Safe to call multiple times."""
        self._cancelled = True

    def run(self) -> None:
        """Execute the posts loading operation."""
        try:
            posts = self._posts_manager.get_posts()
            if self._cancelled:
                return
            self.loaded.emit(list(posts))
        except Exception as e:
            if not self._cancelled:
                self.failed.emit(str(e))
