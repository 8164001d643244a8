"""
Split view for a single post: post detail on the left, image gallery on the right.

Owns the slot assignment map for its lifetime. The picker dialog only reports
choices; this view applies them and re-renders the gallery.
"""
from typing import Dict, Optional
import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QSizePolicy

from postgallery.core.config import GalleryConfig
from postgallery.core.dto.post import PostDTO
from postgallery.core.slots import SlotAssignmentMap, SlotSelection
from postgallery.ui.gallery.image_grid import ImageSlotGrid
from postgallery.ui.gallery.image_picker import ImageSelectionDialog
from postgallery.ui.gallery.post_detail import PostDetailView

logger = logging.getLogger(__name__)


class DualColumnView(QWidget):
    """
    Two equal halves: PostDetailView | ImageSlotGrid.

    Signals:
        slots_changed(assignments): Emitted with a snapshot after a slot changes
    """

    slots_changed = pyqtSignal(object)

    def __init__(self, post: PostDTO, gallery_config: Optional[GalleryConfig] = None, parent=None):
        super().__init__(parent)
        self.setObjectName("dualColumnView")
        self.post = post
        self.config = gallery_config or GalleryConfig()

        self.slot_map = SlotAssignmentMap(self.config.default_slots)
        self.selection = SlotSelection()
        self.picker: Optional[ImageSelectionDialog] = None

        self._setup_ui()
        self.gallery.set_slots(self.slot_map.items())

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.detail = PostDetailView(self.post)
        self.gallery = ImageSlotGrid(self.config.assets_dir, self.config.slot_size)
        self.gallery.slot_clicked.connect(self._on_slot_clicked)

        # Ignore size hints so the 1:1 stretch alone decides the widths
        for pane in (self.detail, self.gallery):
            policy = pane.sizePolicy()
            policy.setHorizontalPolicy(QSizePolicy.Policy.Ignored)
            pane.setSizePolicy(policy)
            layout.addWidget(pane, 1)

    @property
    def current_scale(self) -> float:
        return self.gallery.current_scale

    def assignments(self) -> Dict[int, str]:
        return self.slot_map.snapshot()

    # ------------------------------------------------------------------
    # Slot selection flow
    # ------------------------------------------------------------------

    def _on_slot_clicked(self, index: int, image_name: str) -> None:
        self.select_slot(index)

    def select_slot(self, index: int) -> ImageSelectionDialog:
        """Mark a slot active and open the picker for it."""
        image_name = self.slot_map.get(index)
        if image_name is None:
            raise KeyError(f"Unknown gallery slot: {index}")
        self.selection.select(index, image_name)
        logger.debug(f"Slot {index} active ({image_name!r})")
        return self._open_picker(index)

    def _open_picker(self, index: int) -> ImageSelectionDialog:
        if self.picker is not None:
            self.picker.image_selected.disconnect(self._apply_selection)
            self.picker.finished.disconnect(self._on_picker_finished)
            self.picker.close()
            self.picker.deleteLater()

        dialog = ImageSelectionDialog(
            index,
            self.config.image_catalog,
            self.config.assets_dir,
            tile_size=self.config.slot_size,
            parent=self,
        )
        dialog.image_selected.connect(self._apply_selection)
        dialog.finished.connect(self._on_picker_finished)
        self.picker = dialog
        dialog.open()
        return dialog

    def _apply_selection(self, index: int, image_name: str) -> None:
        if index != self.selection.index:
            logger.warning(f"Ignoring pick for inactive slot {index}")
            return
        self.slot_map.assign(index, image_name)
        self.selection.propose(image_name)
        self.gallery.set_slots(self.slot_map.items())
        self.slots_changed.emit(self.slot_map.snapshot())

    def _on_picker_finished(self, result: int) -> None:
        self.selection.clear()
        dialog = self.picker
        self.picker = None
        if dialog is not None:
            dialog.deleteLater()

    def dismiss_picker(self) -> None:
        """Close the picker if open; the slot map is left as it is."""
        if self.picker is not None:
            self.picker.reject()
