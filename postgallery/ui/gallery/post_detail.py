"""
Read-only post detail pane: title and body in a vertical scroller.
"""
import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QScrollArea, QWidget, QVBoxLayout, QLabel

from postgallery.core.dto.post import PostDTO
from postgallery.ui.common.theme import Colors, Fonts, Spacing, Styles

logger = logging.getLogger(__name__)


class PostDetailView(QScrollArea):
    """Non-interactive rendering of a post's title and body."""

    def __init__(self, post: PostDTO, parent=None):
        super().__init__(parent)
        self.setObjectName("postDetailPane")
        self.post = post

        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setStyleSheet(Styles.pane(Colors.BG_DETAIL_PANE))

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)
        layout.setSpacing(Spacing.LG)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)

        self.title_label = QLabel(post.title)
        self.title_label.setObjectName("detailTitleLabel")
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(Styles.label(
            color=Colors.TEXT_PRIMARY,
            size=Fonts.SIZE_TITLE,
            weight=Fonts.WEIGHT_BOLD,
            padding=Spacing.LG,
        ))
        layout.addWidget(self.title_label)

        self.body_label = QLabel(post.body)
        self.body_label.setObjectName("detailBodyLabel")
        self.body_label.setWordWrap(True)
        self.body_label.setStyleSheet(Styles.label(
            color=Colors.TEXT_PRIMARY,
            size=Fonts.SIZE_LG,
            padding=Spacing.LG,
        ))
        layout.addWidget(self.body_label)
        layout.addStretch()

        self.setWidget(content)
