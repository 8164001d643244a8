"""
Application configuration.

Provides a single source of truth for the post source endpoint, on-disk
locations, logging levels and the gallery's image catalog. Values come from
defaults, optionally overridden by ``~/.postgallery/settings.json``:

    {
        "api_base_url": "https://jsonplaceholder.typicode.com",
        "request_timeout": 30,
        "log_levels": {"api": "DEBUG"},
        "gallery": {
            "image_catalog": ["API Gateway", "EC2"],
            "default_slots": {"0": "API Gateway", "1": "EC2"},
            "slot_size": 120
        }
    }
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from postgallery.utils.file_utils import get_resource_path

logger = logging.getLogger(__name__)


DEFAULT_BASE_DIR = Path.home() / ".postgallery"
DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"

DEFAULT_IMAGE_CATALOG: Tuple[str, ...] = (
    "API Gateway",
    "EC2",
    "Service Holder",
    "Simple Storage Service",
)

DEFAULT_SLOTS: Dict[int, str] = {
    0: "API Gateway",
    1: "EC2",
    2: "Service Holder",
    3: "Simple Storage Service",
}


@dataclass(frozen=True)
class GalleryConfig:
    """Image catalog and slot defaults for the detail gallery."""

    image_catalog: Tuple[str, ...] = DEFAULT_IMAGE_CATALOG
    default_slots: Dict[int, str] = field(default_factory=lambda: dict(DEFAULT_SLOTS))
    slot_size: int = 100
    assets_dir: Path = field(default_factory=lambda: get_resource_path("resources", "images"))

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "GalleryConfig":
        defaults = cls()
        catalog = raw.get("image_catalog")
        slots = raw.get("default_slots")
        assets_dir = raw.get("assets_dir")
        if catalog is not None and not isinstance(catalog, (list, tuple)):
            raise TypeError(f"image_catalog must be a list of names, got {type(catalog).__name__}")
        return cls(
            image_catalog=tuple(str(name) for name in catalog) if catalog else defaults.image_catalog,
            default_slots=(
                {int(index): str(name) for index, name in slots.items()}
                if isinstance(slots, dict) and slots
                else defaults.default_slots
            ),
            slot_size=int(raw.get("slot_size") or defaults.slot_size),
            assets_dir=Path(assets_dir) if assets_dir else defaults.assets_dir,
        )


@dataclass
class AppConfig:
    """Top-level application settings."""

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: int = 30
    base_dir: Path = DEFAULT_BASE_DIR
    log_levels: Dict[str, str] = field(default_factory=dict)
    gallery: GalleryConfig = field(default_factory=GalleryConfig)

    @property
    def log_dir(self) -> Path:
        return self.base_dir / "logs"

    @property
    def settings_file(self) -> Path:
        return self.base_dir / "settings.json"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], base_dir: Optional[Path] = None) -> "AppConfig":
        defaults = cls()
        gallery_raw = raw.get("gallery")
        return cls(
            api_base_url=str(raw.get("api_base_url") or defaults.api_base_url),
            request_timeout=int(raw.get("request_timeout") or defaults.request_timeout),
            base_dir=base_dir or defaults.base_dir,
            log_levels={str(k): str(v) for k, v in (raw.get("log_levels") or {}).items()},
            gallery=GalleryConfig.from_dict(gallery_raw) if isinstance(gallery_raw, dict) else GalleryConfig(),
        )


def load_config(path: Optional[Path] = None, base_dir: Optional[Path] = None) -> AppConfig:
    """
    Load settings from JSON, falling back to defaults.

    A missing file is normal; an unreadable one is logged and ignored.
    """
    base_dir = base_dir or DEFAULT_BASE_DIR
    path = path or (base_dir / "settings.json")

    if not path.exists():
        logger.debug(f"No settings file at {path} - using defaults")
        return AppConfig(base_dir=base_dir)

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read settings file {path}: {e} - using defaults")
        return AppConfig(base_dir=base_dir)

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {path} is not a JSON object - using defaults")
        return AppConfig(base_dir=base_dir)

    try:
        config = AppConfig.from_dict(raw, base_dir=base_dir)
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Invalid value in settings file {path}: {e} - using defaults")
        return AppConfig(base_dir=base_dir)

    logger.info(f"Loaded settings from {path}")
    return config
