# Rev 0.1.0
from __future__ import annotations
from typing import Optional

from PySide6.QtCore import QDate
from PySide6.QtWidgets import QDateEdit


class DueDateEdit(QDateEdit):
    """
    Optional date picker. The minimum date stands for "no due date" and is
    shown as special text; anything above it is a real ISO date.
    """

    def __init__(self, no_date_text: str = "—", parent=None):
        super().__init__(parent)
        self.setCalendarPopup(True)
        self.setDisplayFormat("yyyy-MM-dd")
        self.setSpecialValueText(no_date_text)
        self.set_floor(QDate.currentDate())
        self.clear_value()

    def set_floor(self, earliest: QDate) -> None:
        # one day below the earliest pickable date is the "no date" slot
        self.setMinimumDate(earliest.addDays(-1))

    def set_no_date_text(self, text: str) -> None:
        self.setSpecialValueText(text)

    def clear_value(self) -> None:
        self.setDate(self.minimumDate())

    def value(self) -> Optional[str]:
        if self.date() == self.minimumDate():
            return None
        return self.date().toString("yyyy-MM-dd")

    def set_value(self, iso: Optional[str]) -> None:
        if not iso:
            self.clear_value()
            return
        d = QDate.fromString(iso, "yyyy-MM-dd")
        if not d.isValid():
            self.clear_value()
            return
        if d <= self.minimumDate():
            self.set_floor(d)
        self.setDate(d)
