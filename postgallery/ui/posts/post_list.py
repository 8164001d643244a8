"""
Grouped post list: one collapsible section per author, posts listed by title.
"""
from typing import Dict, List, Optional
import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QTreeWidget, QTreeWidgetItem, QAbstractItemView

from postgallery.core.dto.post import PostDTO
from postgallery.ui.common.view_models import PostsViewModel

logger = logging.getLogger(__name__)

POST_ROLE = Qt.ItemDataRole.UserRole


def section_title(user_id: int) -> str:
    return f"User {user_id}"


class GroupedPostListView(QTreeWidget):
    """
    Tree of author sections, ascending by author id.

    Sections are rebuilt from the view model on every posts_changed.
    The first time the view is shown it asks the view model to load.

    Signals:
        post_selected(post): Emitted when a post entry is clicked
    """

    post_selected = pyqtSignal(object)

    def __init__(self, view_model: PostsViewModel, parent=None):
        super().__init__(parent)
        self.setObjectName("groupedPostList")
        self._view_model = view_model

        self.setHeaderHidden(True)
        self.setRootIsDecorated(True)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setUniformRowHeights(True)

        self.itemClicked.connect(self._on_item_clicked)
        self._view_model.posts_changed.connect(self.refresh)

        self.refresh()

    def showEvent(self, event):
        super().showEvent(event)
        self._view_model.ensure_loaded()

    def refresh(self) -> None:
        """Rebuild sections from the current post list."""
        self.setUpdatesEnabled(False)
        try:
            self.clear()
            grouped = self._view_model.grouped_posts()
            for user_id, posts in grouped.items():
                self._add_section(user_id, posts)
            self.expandAll()
        finally:
            self.setUpdatesEnabled(True)
        logger.debug(f"Post list rebuilt with {self.topLevelItemCount()} sections")

    def _add_section(self, user_id: int, posts: List[PostDTO]) -> QTreeWidgetItem:
        section = QTreeWidgetItem([section_title(user_id)])
        section.setFlags(Qt.ItemFlag.ItemIsEnabled)
        font = section.font(0)
        font.setBold(True)
        section.setFont(0, font)
        self.addTopLevelItem(section)

        for post in posts:
            entry = QTreeWidgetItem([post.title])
            entry.setData(0, POST_ROLE, post)
            entry.setToolTip(0, post.title)
            section.addChild(entry)
        return section

    def section_titles(self) -> List[str]:
        return [self.topLevelItem(i).text(0) for i in range(self.topLevelItemCount())]

    def sections(self) -> Dict[str, List[str]]:
        """Section title -> entry titles, in display order."""
        result: Dict[str, List[str]] = {}
        for i in range(self.topLevelItemCount()):
            section = self.topLevelItem(i)
            result[section.text(0)] = [section.child(j).text(0) for j in range(section.childCount())]
        return result

    def post_for_item(self, item: QTreeWidgetItem) -> Optional[PostDTO]:
        return item.data(0, POST_ROLE)

    def _on_item_clicked(self, item: QTreeWidgetItem, column: int = 0) -> None:
        post = self.post_for_item(item)
        if post is None:
            # Section header
            return
        self.post_selected.emit(post)
