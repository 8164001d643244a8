"""
Image/Pixmap Utility Functions

Resolves catalog image names to bundled asset files and scales them for
gallery slots. A name without a matching asset resolves to None; callers
render nothing in that case.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QPixmap

logger = logging.getLogger(__name__)

# Checked in order for every image name
ASSET_EXTENSIONS = (".png", ".svg", ".jpg", ".jpeg")


def scale_pixmap_to_fit(
    pixmap: QPixmap,
    target_size: QSize | Tuple[int, int],
    smooth: bool = True,
) -> QPixmap:
    """
    Scale pixmap to fit within target size (maintains aspect ratio).

    Args:
        pixmap: Source pixmap to scale
        target_size: Maximum size (QSize or (width, height) tuple)
        smooth: Use smooth transformation (default: True)

    Returns:
        Scaled pixmap that fits within target_size
    """
    if isinstance(target_size, tuple):
        target_size = QSize(target_size[0], target_size[1])

    transform = (
        Qt.TransformationMode.SmoothTransformation
        if smooth
        else Qt.TransformationMode.FastTransformation
    )

    return pixmap.scaled(
        target_size,
        Qt.AspectRatioMode.KeepAspectRatio,
        transform,
    )


def find_image_asset(image_name: str, assets_dir: Path) -> Optional[Path]:
    """Return the asset file for an image name, or None if not bundled."""
    if not image_name:
        return None
    for ext in ASSET_EXTENSIONS:
        candidate = assets_dir / f"{image_name}{ext}"
        if candidate.is_file():
            return candidate
    return None


def load_image_asset(image_name: str, assets_dir: Path, size: int) -> Optional[QPixmap]:
    """
    Load a catalog image scaled to fit a size x size square.

    Returns None when the asset is missing or cannot be decoded.
    """
    path = find_image_asset(image_name, assets_dir)
    if path is None:
        logger.debug(f"No asset for image {image_name!r} in {assets_dir}")
        return None

    pixmap = QPixmap(str(path))
    if pixmap.isNull():
        logger.warning(f"Failed to decode image asset: {path}")
        return None

    return scale_pixmap_to_fit(pixmap, (size, size))
