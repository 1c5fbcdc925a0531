# src/taskkeeper/ui/tasks_view.py
# Rev 0.1.0 — scrollable task cards with badges + empty state
from __future__ import annotations
from typing import Any, Callable, Dict, List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QFrame,
    QSizePolicy, QCheckBox, QPushButton,
)

from taskkeeper.models.entities import Task

_PRIORITY_COLORS = {
    "high": ("#fee2e2", "#991b1b"),
    "medium": ("#fef3c7", "#92400e"),
    "low": ("#dcfce7", "#166534"),
}
_GREEN = ("#dcfce7", "#166534")
_RED = ("#fee2e2", "#991b1b")
_BLUE = ("#dbeafe", "#1e40af")
_GRAY = ("#f3f4f6", "#1f2937")


def _badge(text: str, colors: tuple[str, str]) -> QLabel:
    bg, fg = colors
    lbl = QLabel(text)
    lbl.setObjectName("TaskBadge")
    lbl.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
    lbl.setStyleSheet(f"QLabel#TaskBadge {{ background: {bg}; color: {fg}; border-radius: 6px; padding: 2px 6px; }}")
    return lbl


class TasksView(QWidget):
    toggleRequested = Signal(str)
    editRequested = Signal(str)
    deleteRequested = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._t: Dict[str, Any] = {}
        self._is_overdue: Callable[[Task], bool] = lambda _t: False

        self._list_layout = QVBoxLayout()
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(8)

        body = QWidget()
        body.setObjectName("TasksBody")
        body.setLayout(self._list_layout)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setFrameShape(QFrame.NoFrame)
        self._scroll.setWidget(body)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self._scroll, 1)

    # ---- Public API
    def set_labels(self, t: Dict[str, Any]) -> None:
        self._t = t

    def set_overdue_check(self, fn: Callable[[Task], bool]) -> None:
        self._is_overdue = fn

    def set_tasks(self, tasks: List[Task]) -> None:
        self._clear()
        if not tasks:
            self._list_layout.addWidget(self._empty_state())
            self._list_layout.addStretch(1)
            return
        for task in tasks:
            self._list_layout.addWidget(self._make_card(task))
        self._list_layout.addStretch(1)

    # ---- Internals
    def _clear(self) -> None:
        while (item := self._list_layout.takeAt(0)):
            w = item.widget()
            if w: w.deleteLater()

    def _empty_state(self) -> QWidget:
        box = QFrame()
        box.setObjectName("TasksEmpty")
        box.setFrameShape(QFrame.StyledPanel)
        lay = QVBoxLayout(box)
        lbl = QLabel(self._t.get("empty", ""))
        lbl.setAlignment(Qt.AlignCenter)
        lbl.setContentsMargins(0, 36, 0, 36)
        lay.addWidget(lbl)
        return box

    def _make_card(self, task: Task) -> QWidget:
        t = self._t
        card = QFrame()
        card.setObjectName("TaskCard")
        card.setFrameShape(QFrame.StyledPanel)
        card.setProperty("taskId", task.id)

        chk = QCheckBox()
        chk.setChecked(task.completed)
        chk.toggled.connect(lambda _on, tid=task.id: self.toggleRequested.emit(tid))

        # row 1: title + badges
        title = QLabel(task.title)
        title.setObjectName("TaskTitle")
        font = title.font()
        font.setBold(True)
        font.setStrikeOut(task.completed)
        title.setFont(font)
        if task.completed:
            title.setStyleSheet("color: #6b7280;")

        row1 = QHBoxLayout()
        row1.setSpacing(6)
        row1.addWidget(title)
        if task.category:
            row1.addWidget(_badge(task.category, _GRAY))
        row1.addWidget(_badge(t.get(task.priority, task.priority), _PRIORITY_COLORS.get(task.priority, _GRAY)))
        if task.due:
            status_colors = _GREEN if task.completed else _RED if self._is_overdue(task) else _BLUE
            row1.addWidget(_badge(f"{t.get('due', '')}: {task.due}", status_colors))
        if task.completed:
            row1.addWidget(_badge(t.get("doneBadge", ""), _GREEN))
        elif self._is_overdue(task):
            row1.addWidget(_badge(t.get("overdueBadge", ""), _RED))
        row1.addStretch(1)

        body = QVBoxLayout()
        body.setSpacing(6)
        body.addLayout(row1)

        if task.notes:
            notes = QLabel(task.notes)
            notes.setWordWrap(True)
            notes.setObjectName("TaskNotes")
            notes.setStyleSheet("color: #4b5563;")
            body.addWidget(notes)

        btn_edit = QPushButton(t.get("edit", ""))
        btn_edit.clicked.connect(lambda _=False, tid=task.id: self.editRequested.emit(tid))
        btn_del = QPushButton(t.get("del", ""))
        btn_del.setStyleSheet("color: #dc2626;")
        btn_del.clicked.connect(lambda _=False, tid=task.id: self.deleteRequested.emit(tid))
        actions = QHBoxLayout()
        actions.addStretch(1)
        actions.addWidget(btn_edit)
        actions.addWidget(btn_del)
        body.addLayout(actions)

        outer = QHBoxLayout(card)
        outer.setContentsMargins(12, 8, 12, 8)
        outer.addWidget(chk, 0, Qt.AlignTop)
        outer.addLayout(body, 1)
        return card
