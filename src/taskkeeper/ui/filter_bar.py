# Rev 0.1.0
from __future__ import annotations
from typing import Any, Dict, List

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLineEdit, QComboBox, QPushButton

from taskkeeper.models.types import ALL, PRIORITIES, SORT_KEYS, STATUSES
from taskkeeper.services.i18n import SORT_LABEL_KEYS


class FilterBar(QWidget):
    queryChanged = Signal(str)
    statusChanged = Signal(str)
    categoryChanged = Signal(str)
    priorityChanged = Signal(str)
    sortChanged = Signal(str)
    clearCompletedRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._categories: List[str] = []
        self._t: Dict[str, Any] = {}

        self._search = QLineEdit()
        self._search.setClearButtonEnabled(True)
        self._status = QComboBox()
        self._category = QComboBox()
        self._priority = QComboBox()
        self._sort = QComboBox()
        self._btn_clear = QPushButton()

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(self._search, 2)
        for w in (self._status, self._category, self._priority, self._sort):
            row.addWidget(w, 1)
        row.addWidget(self._btn_clear)

        self._search.textChanged.connect(self.queryChanged)
        self._status.currentIndexChanged.connect(lambda _: self._emit(self._status, self.statusChanged))
        self._category.currentIndexChanged.connect(lambda _: self._emit(self._category, self.categoryChanged))
        self._priority.currentIndexChanged.connect(lambda _: self._emit(self._priority, self.priorityChanged))
        self._sort.currentIndexChanged.connect(lambda _: self._emit(self._sort, self.sortChanged))
        self._btn_clear.clicked.connect(self.clearCompletedRequested)

    # ---- Public API
    def retranslate(self, t: Dict[str, Any]) -> None:
        self._t = t
        self._search.setPlaceholderText(t["search"])
        self._btn_clear.setText(t["clearDone"])
        self._refill(self._status, [(t[s], s) for s in STATUSES])
        self._refill(self._priority, [(t["anyPri"], ALL)] + [(t[p], p) for p in PRIORITIES])
        self._refill(self._sort, [(t[SORT_LABEL_KEYS[k]], k) for k in SORT_KEYS])
        self._refill_categories()

    def set_categories(self, categories: List[str]) -> None:
        self._categories = list(categories)
        self._refill_categories()

    # ---- Internals
    def _refill_categories(self) -> None:
        label = self._t.get("allCats", ALL)
        self._refill(self._category, [(label, ALL)] + [(c, c) for c in self._categories])

    @staticmethod
    def _refill(combo: QComboBox, items: list[tuple[str, str]]) -> None:
        # keep the selection; signals stay quiet while the items are rebuilt
        current = combo.currentData()
        combo.blockSignals(True)
        combo.clear()
        for text, data in items:
            combo.addItem(text, data)
        ix = combo.findData(current) if current is not None else -1
        combo.setCurrentIndex(ix if ix >= 0 else 0)
        combo.blockSignals(False)
        if combo.currentData() != current and current is not None:
            combo.currentIndexChanged.emit(combo.currentIndex())

    @staticmethod
    def _emit(combo: QComboBox, signal) -> None:
        data = combo.currentData()
        if data is not None:
            signal.emit(data)
