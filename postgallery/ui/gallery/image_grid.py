"""
Gallery pane: a scrollable column of image slots.

Used on the right half of the split view and, via ImageTile, by the
image picker dialog.
"""
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QScrollArea, QWidget, QVBoxLayout, QFrame, QLabel

from postgallery.ui.common.theme import Colors, Spacing, Styles
from postgallery.ui.images.image_utils import load_image_asset

logger = logging.getLogger(__name__)


class ImageTile(QFrame):
    """
    Fixed-size clickable square showing one catalog image.

    An image name without a bundled asset leaves the square empty but
    still clickable.

    Signals:
        clicked(image_name): Emitted on left click
    """

    clicked = pyqtSignal(str)

    def __init__(self, image_name: str, assets_dir: Path, size: int, parent=None):
        super().__init__(parent)
        self.setObjectName("imageTile")
        self.image_name = image_name
        self.setFixedSize(size, size)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(image_name)
        self.setStyleSheet(Styles.slot_frame())

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setStyleSheet("border: none;")
        layout.addWidget(self.image_label)

        pixmap = load_image_asset(image_name, assets_dir, size)
        if pixmap is not None:
            self.image_label.setPixmap(pixmap)

    @property
    def has_image(self) -> bool:
        pixmap = self.image_label.pixmap()
        return pixmap is not None and not pixmap.isNull()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.image_name)
            event.accept()
            return
        super().mousePressEvent(event)


class ImageSlotGrid(QScrollArea):
    """
    Scrollable (both axes) column of gallery slots sorted by slot index.

    Signals:
        slot_clicked(index, image_name): Emitted when a slot is tapped
    """

    slot_clicked = pyqtSignal(int, str)

    def __init__(self, assets_dir: Path, slot_size: int = 100, parent=None):
        super().__init__(parent)
        self.setObjectName("imageSlotGrid")
        self._assets_dir = assets_dir
        self._slot_size = slot_size
        self._slots: List[Tuple[int, str]] = []
        self.tiles: Dict[int, ImageTile] = {}
        # Stored zoom factor; nothing drives it interactively yet
        self.current_scale: float = 1.0

        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setStyleSheet(Styles.pane(Colors.BG_GALLERY_PANE))

        container = QWidget()
        container.setObjectName("imageSlotContainer")
        self._layout = QVBoxLayout(container)
        self._layout.setContentsMargins(Spacing.SLOT_PADDING, Spacing.SLOT_PADDING, Spacing.SLOT_PADDING, Spacing.SLOT_PADDING)
        self._layout.setSpacing(Spacing.SLOT_PADDING * 2)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignHCenter)
        self.setWidget(container)

    def set_slots(self, slots: List[Tuple[int, str]]) -> None:
        """Render slots; entries are (index, image_name) and re-sorted by index."""
        self._slots = sorted(slots, key=lambda s: s[0])
        self._rebuild()

    def set_scale(self, scale: float) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self.current_scale = scale
        self._rebuild()

    def tile_for(self, index: int) -> Optional[ImageTile]:
        return self.tiles.get(index)

    def _rebuild(self) -> None:
        self.setUpdatesEnabled(False)
        try:
            while self._layout.count():
                item = self._layout.takeAt(0)
                if item.widget():
                    item.widget().deleteLater()
            self.tiles = {}

            size = max(1, int(self._slot_size * self.current_scale))
            for index, image_name in self._slots:
                tile = ImageTile(image_name, self._assets_dir, size)
                tile.clicked.connect(lambda name, i=index: self.slot_clicked.emit(i, name))
                self._layout.addWidget(tile, 0, Qt.AlignmentFlag.AlignHCenter)
                self.tiles[index] = tile
        finally:
            self.setUpdatesEnabled(True)
