from __future__ import annotations

import logging
from typing import Dict, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from postgallery.core.dto.post import PostDTO
from postgallery.core.posts_manager import group_posts_by_user

logger = logging.getLogger(__name__)


class PostsViewModel(QObject):
    """
    Observable post list shared by the post views.

    The fetch runs on a PostsLoadWorker; its result arrives on the UI thread
    and is published through posts_changed. Grouping is recomputed on every
    read from the current list.

    Signals:
        posts_changed(): Emitted after the post list is replaced
        loading_changed(bool): Emitted when a fetch starts or finishes
    """

    posts_changed = pyqtSignal()
    loading_changed = pyqtSignal(bool)

    def __init__(self, posts_manager, parent=None):
        super().__init__(parent)
        self._posts_manager = posts_manager
        self._posts: List[PostDTO] = []
        self._worker = None
        self._load_requested = False

    @property
    def posts(self) -> List[PostDTO]:
        return list(self._posts)

    @property
    def is_loading(self) -> bool:
        return self._worker is not None

    def grouped_posts(self) -> Dict[int, List[PostDTO]]:
        return group_posts_by_user(self._posts)

    def ensure_loaded(self) -> bool:
        """
        Start the fetch the first time it is requested.

        Returns True if a fetch was started by this call.
        """
        if self._load_requested:
            return False
        self._load_requested = True
        self._start_worker()
        return True

    def _start_worker(self) -> None:
        from postgallery.ui.browser.browser_workers import PostsLoadWorker

        logger.info("Loading posts...")
        worker = PostsLoadWorker(posts_manager=self._posts_manager, parent=self)
        worker.loaded.connect(self._on_posts_loaded)
        worker.failed.connect(self._on_posts_failed)
        worker.finished.connect(self._on_worker_finished)
        self._worker = worker
        self.loading_changed.emit(True)
        worker.start()

    def set_posts(self, posts: List[PostDTO]) -> None:
        self._posts = list(posts)
        self.posts_changed.emit()

    def _on_posts_loaded(self, posts: list) -> None:
        logger.info(f"Loaded {len(posts)} posts")
        self.set_posts(posts)

    def _on_posts_failed(self, error: str) -> None:
        # Post list stays as it was (empty on first load); nothing is shown to the user
        logger.warning(f"Failed to load posts: {error}")

    def _on_worker_finished(self) -> None:
        worker: Optional[QObject] = self._worker
        self._worker = None
        if worker is not None:
            worker.deleteLater()
        self.loading_changed.emit(False)

    def shutdown(self, timeout_ms: int = 5000) -> None:
        """
        Stop a pending fetch before the application exits.

        Waits up to timeout_ms for the worker; a thread still running after
        that is terminated so Qt never destroys a running QThread.
        """
        worker = self._worker
        if worker is None:
            return
        worker.cancel()
        if worker.isRunning():
            worker.wait(timeout_ms)
            if worker.isRunning():
                logger.warning("Force terminating posts worker during shutdown")
                worker.terminate()
                worker.wait(1500)
