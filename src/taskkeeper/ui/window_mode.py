# Rev 0.1.0

# ui/window_mode.py
from PySide6.QtCore import Qt, QRect
from PySide6.QtGui import QGuiApplication


def lock_dialog_fixed(win, *, width_ratio=0.45, height_ratio=0.5):
    """
    For modal dialogs: keep them *not* maximized, but non-resizable and sized
    as a fraction of the current screen.
    """
    screen = QGuiApplication.screenAt(win.frameGeometry().center()) or QGuiApplication.primaryScreen()
    if screen is None:
        return
    rect: QRect = screen.availableGeometry()
    w = int(rect.width() * width_ratio)
    h = int(rect.height() * height_ratio)
    win.setFixedSize(w, h)
    win.setWindowFlag(Qt.WindowMaximizeButtonHint, False)


def apply_direction(widget, rtl: bool) -> None:
    """Mirror the layout for right-to-left languages."""
    widget.setLayoutDirection(Qt.RightToLeft if rtl else Qt.LeftToRight)
