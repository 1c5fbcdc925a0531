# Rev 0.1.0
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QVBoxLayout, QLabel, QSizePolicy


class StatCard(QFrame):
    """Icon + caption + big number."""

    def __init__(self, icon: str, color: str, parent=None):
        super().__init__(parent)
        self.setObjectName("StatCard")
        self.setFrameShape(QFrame.StyledPanel)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        self.setStyleSheet(f"QFrame#StatCard {{ background: {color}; border-radius: 8px; }}")

        self._icon = QLabel(icon)
        self._icon.setStyleSheet("font-size: 22px;")
        self._caption = QLabel("")
        self._caption.setObjectName("StatCaption")
        self._value = QLabel("0")
        self._value.setObjectName("StatValue")
        self._value.setStyleSheet("font-size: 22px; font-weight: bold;")

        text = QVBoxLayout()
        text.setSpacing(2)
        text.addWidget(self._caption)
        text.addWidget(self._value)

        row = QHBoxLayout(self)
        row.setContentsMargins(12, 8, 12, 8)
        row.addWidget(self._icon, 0, Qt.AlignVCenter)
        row.addLayout(text, 1)

    def set_caption(self, caption: str) -> None:
        self._caption.setText(caption)

    def set_value(self, value: int) -> None:
        self._value.setText(str(value))
