import sys
from pathlib import Path


def get_resource_path(*parts: str) -> Path:
    """
    Get the absolute path to a resource file, handling PyInstaller bundles.

    In development: returns path relative to project root
    In PyInstaller bundle: returns path inside _MEIPASS

    Args:
        *parts: Path components relative to project/bundle root
                e.g. get_resource_path('resources', 'images', 'EC2.svg')

    Returns:
        Absolute Path to the resource
    """
    if hasattr(sys, '_MEIPASS'):
        base = Path(sys._MEIPASS)
    else:
        # Development - use project root (parent of postgallery/)
        base = Path(__file__).parent.parent.parent

    return base.joinpath(*parts)


def apply_windows_dark_mode(widget):
    """
    Apply Windows dark mode to a widget's title bar (Windows 10 1809+ / Windows 11).

    Args:
        widget: A QWidget with a window handle (QMainWindow, QDialog, etc.)
    """
    if sys.platform != "win32":
        return

    import ctypes
    hwnd = int(widget.winId())
    dwmapi = ctypes.windll.dwmapi

    value = ctypes.c_int(1)  # 1 = dark mode
    # DWMWA_USE_IMMERSIVE_DARK_MODE is 20 on 20H1+, 19 on 1809-1909
    for attribute in (20, 19):
        result = dwmapi.DwmSetWindowAttribute(
            hwnd,
            attribute,
            ctypes.byref(value),
            ctypes.sizeof(value)
        )
        if result == 0:
            return
