"""Image asset loading helpers."""

from .image_utils import find_image_asset, load_image_asset, scale_pixmap_to_fit

__all__ = [
    'find_image_asset',
    'load_image_asset',
    'scale_pixmap_to_fit',
]
