"""Post detail and image gallery components."""

from .dual_column import DualColumnView
from .image_grid import ImageSlotGrid, ImageTile
from .image_picker import ImageSelectionDialog
from .post_detail import PostDetailView

__all__ = ['DualColumnView', 'ImageSlotGrid', 'ImageTile', 'ImageSelectionDialog', 'PostDetailView']
