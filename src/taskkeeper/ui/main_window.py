# Rev 0.1.0
# taskkeeper — Main Window
# Header | Stat cards | Add form | Filters | Task cards | Footer

from __future__ import annotations
import logging
from pathlib import Path

from PySide6.QtCore import Qt, QSettings, QByteArray
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel,
    QGroupBox, QMessageBox, QFileDialog, QDialog, QApplication,
)

from taskkeeper.services.i18n import is_rtl
from taskkeeper.services.snapshot import SnapshotError, backup_filename
from taskkeeper.services.task_filters import TaskStats
from taskkeeper.ui.add_task_form import AddTaskForm
from taskkeeper.ui.filter_bar import FilterBar
from taskkeeper.ui.stat_card import StatCard
from taskkeeper.ui.task_editor_dialog import TaskEditorDialog
from taskkeeper.ui.tasks_view import TasksView
from taskkeeper.ui.window_mode import apply_direction
from taskkeeper.viewmodels.tasks_viewmodel import TasksViewModel

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, vm: TasksViewModel, *, width: int = 1100, height: int = 760, parent=None):
        super().__init__(parent)
        self._vm = vm
        self.resize(width, height)

        # ---- header ----
        self._lbl_title = QLabel()
        self._lbl_title.setStyleSheet("font-size: 20px; font-weight: bold;")
        self._lbl_subtitle = QLabel()
        self._lbl_subtitle.setStyleSheet("color: #4b5563;")
        self._btn_lang = QPushButton()
        self._btn_export = QPushButton()
        self._btn_import = QPushButton()

        titles = QVBoxLayout()
        titles.addWidget(self._lbl_title)
        titles.addWidget(self._lbl_subtitle)
        header = QHBoxLayout()
        header.addLayout(titles, 1)
        header.addWidget(self._btn_lang)
        header.addWidget(self._btn_export)
        header.addWidget(self._btn_import)

        # ---- stats ----
        self._cards = {
            "total": StatCard("📋", "#e0e7ff"),
            "active": StatCard("🔵", "#dbeafe"),
            "completed": StatCard("✅", "#dcfce7"),
            "overdue": StatCard("⏰", "#fee2e2"),
        }
        stats_row = QHBoxLayout()
        for card in self._cards.values():
            stats_row.addWidget(card)

        # ---- add form / filters / list ----
        self._form = AddTaskForm()
        self._box_form = QGroupBox()
        QVBoxLayout(self._box_form).addWidget(self._form)

        self._filters = FilterBar()
        self._tasks_view = TasksView()
        self._tasks_view.set_overdue_check(self._vm.is_overdue)

        self._lbl_footer = QLabel()
        self._lbl_footer.setAlignment(Qt.AlignCenter)
        self._lbl_footer.setStyleSheet("color: #4b5563;")

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(16, 12, 16, 12)
        v.setSpacing(12)
        v.addLayout(header)
        v.addLayout(stats_row)
        v.addWidget(self._box_form)
        v.addWidget(self._filters)
        v.addWidget(self._tasks_view, 1)
        v.addWidget(self._lbl_footer)
        self.setCentralWidget(central)

        # ---- wire widgets -> vm ----
        self._btn_lang.clicked.connect(self._vm.toggle_language)
        self._btn_export.clicked.connect(self._on_export_clicked)
        self._btn_import.clicked.connect(self._on_import_clicked)

        self._form.taskSubmitted.connect(self._on_task_submitted)
        self._form.categoryCreated.connect(self._vm.add_category)

        self._filters.queryChanged.connect(self._vm.set_query)
        self._filters.statusChanged.connect(self._vm.set_status)
        self._filters.categoryChanged.connect(self._vm.set_category_filter)
        self._filters.priorityChanged.connect(self._vm.set_priority_filter)
        self._filters.sortChanged.connect(self._vm.set_sort)
        self._filters.clearCompletedRequested.connect(self._vm.clear_completed)

        self._tasks_view.toggleRequested.connect(self._vm.toggle_completed)
        self._tasks_view.editRequested.connect(self._on_edit_requested)
        self._tasks_view.deleteRequested.connect(self._vm.delete_task)

        # ---- vm signals -> widgets ----
        self._vm.tasksChanged.connect(self._tasks_view.set_tasks)
        self._vm.statsChanged.connect(self._on_stats_changed)
        self._vm.categoriesChanged.connect(self._on_categories_changed)
        self._vm.languageChanged.connect(self._on_language_changed)

        self._on_categories_changed(self._vm.categories)
        self._on_language_changed(self._vm.lang)
        self._restore_geometry()

    # -------------------- vm -> ui --------------------

    def _on_language_changed(self, lang: str) -> None:
        t = self._vm.labels
        rtl = is_rtl(lang)
        apply_direction(self, rtl)
        app = QApplication.instance()
        if app is not None:
            apply_direction(app, rtl)

        self.setWindowTitle(t["title"])
        self._lbl_title.setText(t["title"])
        self._lbl_subtitle.setText(t["subtitle"])
        self._btn_lang.setText(t["lang"])
        self._btn_export.setText(t["export"])
        self._btn_import.setText(t["import"])
        self._box_form.setTitle(t["addTask"])
        self._lbl_footer.setText(t["footer"])
        for key, card in self._cards.items():
            card.set_caption(t["stats"][key])

        self._form.retranslate(t)
        self._filters.retranslate(t)
        self._tasks_view.set_labels(t)
        self._vm.reload()

    def _on_stats_changed(self, stats: TaskStats) -> None:
        self._cards["total"].set_value(stats.total)
        self._cards["active"].set_value(stats.active)
        self._cards["completed"].set_value(stats.completed)
        self._cards["overdue"].set_value(stats.overdue)

    def _on_categories_changed(self, categories: list) -> None:
        self._form.set_categories(categories)
        self._filters.set_categories(categories)

    # -------------------- actions --------------------

    def _on_task_submitted(self, values: dict) -> None:
        self._vm.add_task(
            values.get("title", ""),
            notes=values.get("notes"),
            category=values.get("category"),
            priority=values.get("priority"),
            due=values.get("due"),
        )

    def _on_edit_requested(self, task_id: str) -> None:
        task = self._vm.get_task(task_id)
        if task is None:
            return
        dlg = TaskEditorDialog(task, self._vm.labels, self._vm.categories, self)
        if dlg.exec() != int(QDialog.DialogCode.Accepted):
            return
        self._vm.update_task(task_id, **dlg.values())

    def _on_export_clicked(self) -> None:
        suggested = str(Path.home() / backup_filename())
        path, _ = QFileDialog.getSaveFileName(self, self._vm.labels["export"], suggested, "JSON (*.json)")
        if not path:
            return
        try:
            self._vm.export_to(path)
        except OSError as e:
            log.exception("Export failed")
            QMessageBox.warning(self, self._vm.labels["export"], str(e))

    def _on_import_clicked(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, self._vm.labels["import"], str(Path.home()), "JSON (*.json)")
        if not path:
            return
        try:
            self._vm.import_from(path)
        except (SnapshotError, OSError) as e:
            log.warning("Import of %s failed: %s", path, e)
            QMessageBox.warning(self, self._vm.labels["import"], self._vm.labels["importError"])

    # -------------------- lifecycle (persist geometry) --------------------

    def _restore_geometry(self) -> None:
        s = QSettings("taskkeeper", "ui")
        geo = s.value("main_window_geometry")
        if isinstance(geo, QByteArray) and not geo.isEmpty():
            self.restoreGeometry(geo)

    def closeEvent(self, ev):
        s = QSettings("taskkeeper", "ui")
        s.setValue("main_window_geometry", self.saveGeometry())
        super().closeEvent(ev)
