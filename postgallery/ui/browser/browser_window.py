"""
Main application window.

Navigation is a two-level stack: the grouped post list at the root and a
DualColumnView for the selected post. Each selection builds a fresh split
view; going back discards it together with its slot assignments.
"""
from typing import Optional
import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QStackedWidget
)
import qtawesome as qta

from postgallery.core.context import CoreContext
from postgallery.core.dto.post import PostDTO
from postgallery.ui.common.theme import Colors, Fonts, Spacing, Styles
from postgallery.ui.common.view_models import PostsViewModel
from postgallery.ui.gallery.dual_column import DualColumnView
from postgallery.ui.posts.post_list import GroupedPostListView

logger = logging.getLogger(__name__)

LIST_TITLE = "Posts"


class BrowserWindow(QMainWindow):
    """Top-level window hosting the post list and the split detail view."""

    def __init__(self, core: CoreContext, parent=None):
        super().__init__(parent)
        self.core = core
        self.setWindowTitle("Post Gallery")
        self.resize(1200, 800)

        self.view_model = PostsViewModel(core.posts, parent=self)
        self.detail_view: Optional[DualColumnView] = None

        self._setup_ui()

    def _setup_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Header (styled by QSS via objectName)
        header = QWidget()
        header.setObjectName("browserHeader")
        header.setFixedHeight(Spacing.HEADER_HEIGHT)
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(Spacing.XL, 0, Spacing.XL, 0)

        self.back_btn = QPushButton("Back")
        self.back_btn.setObjectName("backButton")
        self.back_btn.setIcon(qta.icon('fa5s.arrow-left', color=Colors.TEXT_PRIMARY))
        self.back_btn.clicked.connect(self.go_back)
        self.back_btn.setVisible(False)
        header_layout.addWidget(self.back_btn)

        self.title_label = QLabel(LIST_TITLE)
        self.title_label.setObjectName("navigationTitle")
        self.title_label.setStyleSheet(Styles.label(
            color=Colors.TEXT_PRIMARY,
            size=Fonts.SIZE_TITLE,
            weight=Fonts.WEIGHT_BOLD,
        ))
        header_layout.addWidget(self.title_label)
        header_layout.addStretch()

        layout.addWidget(header)

        self.stack = QStackedWidget()
        self.post_list = GroupedPostListView(self.view_model)
        self.post_list.post_selected.connect(self.open_post)
        self.stack.addWidget(self.post_list)
        layout.addWidget(self.stack, 1)

        self.setCentralWidget(central)

        back_shortcut = QShortcut(QKeySequence(Qt.Key.Key_Escape), self)
        back_shortcut.activated.connect(self.go_back)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def open_post(self, post: PostDTO) -> DualColumnView:
        """Push a split view for the given post."""
        self._discard_detail_view()

        logger.info(f"Opening post {post.id} (user {post.user_id})")
        view = DualColumnView(post, self.core.gallery)
        self.stack.addWidget(view)
        self.stack.setCurrentWidget(view)
        self.detail_view = view

        self.title_label.setText(post.title)
        self.back_btn.setVisible(True)
        return view

    def go_back(self) -> None:
        if self.detail_view is None:
            return
        self.stack.setCurrentWidget(self.post_list)
        self._discard_detail_view()
        self.title_label.setText(LIST_TITLE)
        self.back_btn.setVisible(False)

    def _discard_detail_view(self) -> None:
        view = self.detail_view
        self.detail_view = None
        if view is None:
            return
        view.dismiss_picker()
        self.stack.removeWidget(view)
        view.deleteLater()

    def closeEvent(self, event):
        self.view_model.shutdown()
        super().closeEvent(event)
