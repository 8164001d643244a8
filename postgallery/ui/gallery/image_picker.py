"""Modal dialog for choosing a catalog image for one gallery slot"""
from pathlib import Path
from typing import Dict, Sequence
import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (QDialog, QVBoxLayout, QHBoxLayout, QLabel,
                             QScrollArea, QFrame, QWidget, QPushButton)
import qtawesome as qta

from postgallery.ui.common.theme import Colors, Fonts, Spacing, Styles
from postgallery.ui.gallery.image_grid import ImageTile

logger = logging.getLogger(__name__)


class ImageSelectionDialog(QDialog):
    """
    Shows the image catalog in a horizontal scroller.

    Picking an image only reports (slot_index, image_name); the owner of the
    slot map applies it. The dialog stays open until dismissed.
    """
    image_selected = pyqtSignal(int, str)

    def __init__(
        self,
        slot_index: int,
        catalog: Sequence[str],
        assets_dir: Path,
        tile_size: int = 100,
        parent=None,
    ):
        super().__init__(parent)
        self.setObjectName("imageSelectionDialog")
        self.setWindowTitle("Select an Image")
        self.setModal(True)
        self.setMinimumSize(Spacing.DIALOG_MIN_WIDTH, Spacing.DIALOG_MIN_HEIGHT)

        self.slot_index = slot_index
        self.catalog = list(catalog)
        self.tiles: Dict[str, ImageTile] = {}

        self._setup_ui(assets_dir, tile_size)

    def _setup_ui(self, assets_dir: Path, tile_size: int):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)
        layout.setSpacing(Spacing.MD)

        header = QLabel("Select an Image")
        header.setObjectName("dialogHeaderLabel")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setStyleSheet(Styles.label(
            color=Colors.TEXT_PRIMARY,
            size=Fonts.SIZE_XXL,
            weight=Fonts.WEIGHT_SEMIBOLD,
            padding=Spacing.LG,
        ))
        layout.addWidget(header)

        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setStyleSheet(f"color: {Colors.BORDER_DEFAULT};")
        layout.addWidget(divider)

        scroll = QScrollArea()
        scroll.setObjectName("imageCatalogScroll")
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        scroll.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setFixedHeight(tile_size + Spacing.XXL * 2)

        strip = QWidget()
        strip_layout = QHBoxLayout(strip)
        strip_layout.setContentsMargins(Spacing.SM, Spacing.SM, Spacing.SM, Spacing.SM)
        strip_layout.setSpacing(Spacing.SM)

        for image_name in self.catalog:
            tile = ImageTile(image_name, assets_dir, tile_size)
            tile.clicked.connect(self._on_image_clicked)
            strip_layout.addWidget(tile)
            self.tiles[image_name] = tile
        strip_layout.addStretch()

        scroll.setWidget(strip)
        layout.addWidget(scroll)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch()
        self.close_btn = QPushButton("Close")
        self.close_btn.setObjectName("closeButton")
        self.close_btn.setIcon(qta.icon('fa5s.times', color=Colors.TEXT_PRIMARY))
        self.close_btn.setFixedHeight(Spacing.BUTTON_HEIGHT)
        self.close_btn.clicked.connect(self.reject)
        buttons_layout.addWidget(self.close_btn)
        layout.addLayout(buttons_layout)

    def pick(self, image_name: str) -> None:
        """Select a catalog image programmatically (same as clicking it)."""
        if image_name not in self.tiles:
            raise ValueError(f"Image not in catalog: {image_name}")
        self._on_image_clicked(image_name)

    def _on_image_clicked(self, image_name: str):
        logger.debug(f"Slot {self.slot_index}: picked {image_name!r}")
        self.image_selected.emit(self.slot_index, image_name)
