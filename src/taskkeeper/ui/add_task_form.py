# Rev 0.1.0
from __future__ import annotations
from typing import Any, Dict, List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QGridLayout, QHBoxLayout, QLabel, QLineEdit, QTextEdit,
    QComboBox, QPushButton, QSizePolicy,
)

from taskkeeper.models.types import PRIORITIES
from taskkeeper.ui.due_date_edit import DueDateEdit


class AddTaskForm(QWidget):
    """
    Emits:
      taskSubmitted(dict)   keys: title, notes, category, priority, due
      categoryCreated(str)
    """
    taskSubmitted = Signal(dict)
    categoryCreated = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._categories: List[str] = []

        self._lbl_title = QLabel()
        self._title = QLineEdit()
        self._title.returnPressed.connect(self._submit)

        self._lbl_category = QLabel()
        self._category = QComboBox()
        self._category.setEditable(True)
        self._category.setInsertPolicy(QComboBox.NoInsert)
        self._btn_save_cat = QPushButton("+")
        self._btn_save_cat.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self._btn_save_cat.clicked.connect(self._save_category)

        self._lbl_priority = QLabel()
        self._priority = QComboBox()

        self._lbl_due = QLabel()
        self._due = DueDateEdit()

        self._lbl_notes = QLabel()
        self._notes = QTextEdit()
        self._notes.setAcceptRichText(False)
        self._notes.setFixedHeight(56)

        self._btn_add = QPushButton()
        self._btn_add.setDefault(True)
        self._btn_add.clicked.connect(self._submit)
        self._btn_cancel = QPushButton()
        self._btn_cancel.clicked.connect(self.reset)

        cat_row = QHBoxLayout()
        cat_row.addWidget(self._category, 1)
        cat_row.addWidget(self._btn_save_cat)

        btn_row = QHBoxLayout()
        btn_row.addWidget(self._btn_add, 1)
        btn_row.addWidget(self._btn_cancel)

        grid = QGridLayout(self)
        grid.addWidget(self._lbl_title, 0, 0)
        grid.addWidget(self._lbl_category, 0, 1, 1, 2)
        grid.addWidget(self._title, 1, 0)
        grid.addLayout(cat_row, 1, 1, 1, 2)
        grid.addWidget(self._lbl_priority, 2, 0)
        grid.addWidget(self._lbl_due, 2, 1)
        grid.addWidget(self._priority, 3, 0)
        grid.addWidget(self._due, 3, 1)
        grid.addLayout(btn_row, 3, 2)
        grid.addWidget(self._lbl_notes, 4, 0, 1, 3)
        grid.addWidget(self._notes, 5, 0, 1, 3)

    # ---- Public API
    def retranslate(self, t: Dict[str, Any]) -> None:
        self._lbl_title.setText(t["taskTitle"])
        self._title.setPlaceholderText(t["taskTitle"])
        self._lbl_category.setText(t["category"])
        self._category.lineEdit().setPlaceholderText(t["category"])
        self._btn_save_cat.setToolTip(t["saveCat"])
        self._lbl_priority.setText(t["priority"])
        self._lbl_due.setText(t["due"])
        self._due.set_no_date_text(t["noDue"])
        self._lbl_notes.setText(t["notes"])
        self._notes.setPlaceholderText(t["notes"])
        self._btn_add.setText(t["addTask"])
        self._btn_cancel.setText(t["cancel"])

        current = self._priority.currentData() or "medium"
        self._priority.clear()
        for p in PRIORITIES:
            self._priority.addItem(t[p], p)
        self._priority.setCurrentIndex(max(0, self._priority.findData(current)))

    def set_categories(self, categories: List[str]) -> None:
        text = self._category.currentText()
        self._categories = list(categories)
        self._category.clear()
        self._category.addItems(self._categories)
        self._category.setEditText(text or (self._categories[0] if self._categories else ""))

    def reset(self) -> None:
        self._title.clear()
        self._notes.clear()
        self._category.setEditText(self._categories[0] if self._categories else "")
        self._priority.setCurrentIndex(max(0, self._priority.findData("medium")))
        self._due.clear_value()
        self._title.setFocus(Qt.OtherFocusReason)

    # ---- Internals
    def _submit(self) -> None:
        title = self._title.text().strip()
        if not title:
            self._title.setFocus(Qt.OtherFocusReason)
            return
        self.taskSubmitted.emit({
            "title": title,
            "notes": self._notes.toPlainText(),
            "category": self._category.currentText(),
            "priority": self._priority.currentData(),
            "due": self._due.value(),
        })
        self.reset()

    def _save_category(self) -> None:
        name = self._category.currentText().strip()
        if name:
            self.categoryCreated.emit(name)
