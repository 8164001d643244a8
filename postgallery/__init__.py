"""Post Gallery: grouped post browser with a selectable image gallery."""

__version__ = "1.0.0"
