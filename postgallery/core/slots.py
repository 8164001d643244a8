"""
Gallery slot state.

SlotAssignmentMap holds which image name each gallery slot shows.
SlotSelection tracks the slot the user tapped while the picker is open.
Both are plain objects owned by a single split view; nothing here touches Qt.
"""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class SlotAssignmentMap:
    """Mapping of gallery slot index -> assigned image name."""

    def __init__(self, defaults: Mapping[int, str]):
        self._slots: Dict[int, str] = {int(index): str(name) for index, name in defaults.items()}

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, index: object) -> bool:
        return index in self._slots

    def get(self, index: int) -> Optional[str]:
        return self._slots.get(index)

    def indices(self) -> List[int]:
        return sorted(self._slots)

    def items(self) -> List[Tuple[int, str]]:
        """Slot entries sorted by index."""
        return [(index, self._slots[index]) for index in self.indices()]

    def assign(self, index: int, image_name: str) -> None:
        """
        Assign an image to an existing slot.

        The slot layout is fixed when the map is created, so unknown
        indices raise KeyError instead of growing the grid.
        """
        if index not in self._slots:
            raise KeyError(f"Unknown gallery slot: {index}")
        previous = self._slots[index]
        self._slots[index] = image_name
        logger.debug(f"Slot {index}: {previous!r} -> {image_name!r}")

    def snapshot(self) -> Dict[int, str]:
        return dict(self._slots)


class SlotSelection:
    """
    Transient selection routed between the grid and the picker dialog.

    States: no slot active -> (select) -> slot active -> (clear) -> no slot active.
    """

    DEFAULT_PROPOSED_NAME = "default"

    def __init__(self):
        self.index: Optional[int] = None
        self.proposed_name: str = self.DEFAULT_PROPOSED_NAME

    @property
    def is_active(self) -> bool:
        return self.index is not None

    def select(self, index: int, image_name: str) -> None:
        self.index = index
        self.proposed_name = image_name

    def propose(self, image_name: str) -> None:
        if not self.is_active:
            raise RuntimeError("No gallery slot is active")
        self.proposed_name = image_name

    def clear(self) -> None:
        self.index = None
