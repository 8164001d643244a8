"""Browser window and related components."""

from .browser_window import BrowserWindow
from .browser_workers import PostsLoadWorker

__all__ = ['BrowserWindow', 'PostsLoadWorker']
