"""
Centralized theme configuration for the application.

This module provides a single source of truth for colors, fonts, spacing,
and styling used throughout the UI. Colors are synchronized with dark_theme.qss.

Usage:
    from postgallery.ui.common.theme import Colors, Fonts, Spacing, Styles

    label.setStyleSheet(Styles.label(color=Colors.TEXT_SECONDARY))
    icon = qta.icon('fa5s.arrow-left', color=Colors.TEXT_PRIMARY)
"""
from typing import Optional


class Colors:
    """
    Color palette for the application.

    Synchronized with resources/styles/dark_theme.qss palette:
      Backgrounds: #141414 (primary), #1b1b1b (secondary), #232323 (tertiary)
      Text:        #e6e6e6 (primary), #9ca3af (secondary), #6b7280 (muted)
      Accent:      #f7673a (primary action), #4a9eff (secondary)
    """

    ACCENT_PRIMARY = "#f7673a"
    ACCENT_SECONDARY = "#4a9eff"

    TEXT_PRIMARY = "#e6e6e6"     # Main text
    TEXT_SECONDARY = "#9ca3af"   # Muted/secondary text
    TEXT_MUTED = "#6b7280"       # Even more muted
    TEXT_WHITE = "#ffffff"

    BG_PRIMARY = "#141414"       # Main app background
    BG_SECONDARY = "#1b1b1b"     # Panels, headers
    BG_TERTIARY = "#232323"      # Cards, elevated surfaces
    BG_HOVER = "#2e2e2e"

    # Split view panes: grey tint for the post, blue tint for the gallery
    BG_DETAIL_PANE = "rgba(128, 128, 128, 0.2)"
    BG_GALLERY_PANE = "rgba(74, 158, 255, 0.2)"

    BORDER_DEEP = "#111111"
    BORDER_DEFAULT = "#2e2e2e"
    BORDER_LIGHT = "#3a3a3a"
    BORDER_ACCENT = ACCENT_PRIMARY


class Fonts:
    """Font sizes and weights matching dark_theme.qss."""

    FAMILY = '"Fira Sans", "Segoe UI", sans-serif'

    SIZE_SM = 12
    SIZE_MD = 13
    SIZE_LG = 14
    SIZE_XL = 15      # QSS base size
    SIZE_XXL = 16
    SIZE_TITLE = 24

    WEIGHT_NORMAL = 400
    WEIGHT_MEDIUM = 500
    WEIGHT_SEMIBOLD = 600
    WEIGHT_BOLD = 700


class Spacing:
    """Spacing and sizing constants."""

    NONE = 0
    XS = 4
    SM = 8
    MD = 12
    LG = 16
    XL = 20
    XXL = 24
    XXXL = 40

    RADIUS_SM = 4
    RADIUS_MD = 6
    RADIUS_LG = 8

    ICON_SM = 16
    ICON_MD = 20

    HEADER_HEIGHT = 56
    BUTTON_HEIGHT = 32

    # Gallery slot padding around each image
    SLOT_PADDING = 16

    DIALOG_MIN_WIDTH = 480
    DIALOG_MIN_HEIGHT = 200


class Styles:
    """
    Pre-built stylesheet snippets for dynamic/programmatic styling.

    Note: For widgets styled via QSS objectName, these may be overridden.
    """

    @staticmethod
    def label(
        color: str = Colors.TEXT_PRIMARY,
        size: int = Fonts.SIZE_MD,
        weight: int = Fonts.WEIGHT_NORMAL,
        padding: Optional[int] = None,
        bg: Optional[str] = None,
    ) -> str:
        """Generate label stylesheet with size validation."""
        safe_size = max(1, size) if size else Fonts.SIZE_MD
        style = f"color: {color}; font-size: {safe_size}px; font-weight: {weight};"
        if padding is not None:
            style += f" padding: {padding}px;"
        if bg is not None:
            style += f" background-color: {bg}; border-radius: {Spacing.RADIUS_MD}px;"
        return f"QLabel {{ {style} }}"

    @staticmethod
    def pane(bg: str) -> str:
        """Flat pane background for scroll areas in the split view."""
        return f"""
            QScrollArea {{
                background-color: {bg};
                border: none;
            }}
            QScrollArea > QWidget > QWidget {{
                background-color: transparent;
            }}
        """

    @staticmethod
    def slot_frame(active: bool = False) -> str:
        """Gallery slot / catalog thumbnail frame."""
        border = Colors.ACCENT_PRIMARY if active else Colors.BORDER_LIGHT
        return f"""
            QFrame {{
                background-color: transparent;
                border: 1px solid {border};
                border-radius: {Spacing.RADIUS_LG}px;
            }}
            QFrame:hover {{
                border-color: {Colors.ACCENT_PRIMARY};
            }}
        """
