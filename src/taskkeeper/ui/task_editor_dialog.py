# src/taskkeeper/ui/task_editor_dialog.py
# Rev 0.1.0
from __future__ import annotations
from typing import Any, Dict, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QTextEdit,
    QDialogButtonBox, QComboBox, QWidget,
)

from taskkeeper.models.entities import Task
from taskkeeper.models.types import PRIORITIES
from taskkeeper.ui.due_date_edit import DueDateEdit
from taskkeeper.ui.window_mode import lock_dialog_fixed


class TaskEditorDialog(QDialog):
    """
    Edit an existing task. values() returns a dict of
      title, notes, category, priority, due
    ready to pass to TasksViewModel.update_task(**values).
    """

    def __init__(self, task: Task, t: Dict[str, Any], categories: List[str],
                 parent: QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle(t["edit"])

        self._title = QLineEdit(task.title)
        self._title.setPlaceholderText(t["taskTitle"])

        self._cmb_priority = QComboBox()
        for p in PRIORITIES:
            self._cmb_priority.addItem(t[p], p)
        ix = self._cmb_priority.findData(task.priority)
        if ix >= 0:
            self._cmb_priority.setCurrentIndex(ix)

        self._category = QComboBox()
        self._category.setEditable(True)
        self._category.setInsertPolicy(QComboBox.NoInsert)
        self._category.addItems(categories)
        self._category.setEditText(task.category or "")
        self._category.lineEdit().setPlaceholderText(t["category"])

        self._due = DueDateEdit(t["noDue"])
        self._due.set_value(task.due)

        self._notes = QTextEdit()
        self._notes.setAcceptRichText(False)
        self._notes.setPlainText(task.notes or "")
        self._notes.setPlaceholderText(t["notes"])

        form = QFormLayout()
        form.addRow(t["taskTitle"] + ":", self._title)
        form.addRow(t["priority"] + ":", self._cmb_priority)
        form.addRow(t["category"] + ":", self._category)
        form.addRow(t["due"] + ":", self._due)
        form.addRow(t["notes"] + ":", self._notes)

        btns = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        btns.button(QDialogButtonBox.Save).setText(t["save"])
        btns.button(QDialogButtonBox.Cancel).setText(t["cancel"])
        btns.accepted.connect(self.accept)
        btns.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(btns)

        lock_dialog_fixed(self)
        self._title.setFocus(Qt.OtherFocusReason)

    def values(self) -> Dict[str, Optional[str]]:
        return {
            "title": self._title.text().strip(),
            "notes": self._notes.toPlainText().strip(),
            "category": self._category.currentText().strip() or None,
            "priority": self._cmb_priority.currentData(),
            "due": self._due.value(),
        }
