# Rev 0.1.0 — single in-memory list, written through to the store on every change
from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from taskkeeper.models.entities import Meta, Task, new_task_id, utc_now_iso
from taskkeeper.models.types import DEFAULT_LANG, DEFAULT_PRIORITY, PRIORITY_RANK
from taskkeeper.repositories.task_store import TaskStore
from taskkeeper.services import i18n
from taskkeeper.services.snapshot import (
    ImportedSnapshot, SnapshotError, build_snapshot, dumps_snapshot, merge_categories, parse_snapshot,
)
from taskkeeper.services.task_filters import (
    TaskStats, TaskView, compute_stats, is_overdue, today_iso, visible_tasks,
)

log = logging.getLogger(__name__)

_EDITABLE = ("title", "notes", "category", "priority", "due", "completed")


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class TasksViewModel(QObject):
    tasksChanged = Signal(list)         # visible (filtered + sorted) tasks
    statsChanged = Signal(object)       # TaskStats
    categoriesChanged = Signal(list)
    languageChanged = Signal(str)

    def __init__(self, store: TaskStore, *, default_lang: str = DEFAULT_LANG,
                 today: Callable[[], str] = today_iso):
        super().__init__()
        self._store = store
        self._today = today
        self._lang = store.load_lang(i18n.normalize_lang(default_lang))
        self._tasks: List[Task] = store.load_tasks()
        self._meta: Meta = store.load_meta(self._lang)
        self._view = TaskView()
        # first start fixes the language-dependent defaults in the store
        self._store.save_lang(self._lang)
        self._store.save_meta(self._meta)
        log.info("Loaded %d tasks, %d categories, lang=%s", len(self._tasks), len(self._meta.categories), self._lang)

    # ---- read side
    @property
    def lang(self) -> str:
        return self._lang

    @property
    def labels(self) -> Dict[str, Any]:
        return i18n.labels(self._lang)

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def categories(self) -> List[str]:
        return list(self._meta.categories)

    @property
    def view(self) -> TaskView:
        return self._view

    def get_task(self, task_id: str) -> Optional[Task]:
        return next((t for t in self._tasks if t.id == task_id), None)

    def visible_tasks(self) -> List[Task]:
        return visible_tasks(self._tasks, self._view, self._today())

    def stats(self) -> TaskStats:
        return compute_stats(self._tasks, self._today())

    def is_overdue(self, task: Task) -> bool:
        return is_overdue(task, self._today())

    def reload(self) -> None:
        self.tasksChanged.emit(self.visible_tasks())
        self.statsChanged.emit(self.stats())

    # ---- filters
    def set_view(self, **changes: Any) -> None:
        self._view = replace(self._view, **changes)
        self.tasksChanged.emit(self.visible_tasks())

    def set_query(self, query: str) -> None:
        self.set_view(query=query)

    def set_status(self, status: str) -> None:
        self.set_view(status=status)

    def set_category_filter(self, category: str) -> None:
        self.set_view(category=category)

    def set_priority_filter(self, priority: str) -> None:
        self.set_view(priority=priority)

    def set_sort(self, sort: str) -> None:
        self.set_view(sort=sort)

    # ---- commands
    def add_task(self, title: str, *, notes: Optional[str] = None, category: Optional[str] = None,
                 priority: Optional[str] = None, due: Optional[str] = None) -> Task:
        now = utc_now_iso()
        task = Task(
            id=new_task_id(),
            title=(title or "").strip() or self.labels["newTask"],
            notes=_clean(notes),
            category=_clean(category),
            priority=priority if priority in PRIORITY_RANK else DEFAULT_PRIORITY,
            due=due or None,
            completed=False,
            created_at=now,
            updated_at=now,
        )
        self._tasks.insert(0, task)
        self._commit_tasks()
        log.info("Added task %s", task.id)
        return task

    def update_task(self, task_id: str, **changes: Any) -> Optional[Task]:
        unknown = set(changes) - set(_EDITABLE)
        if unknown:
            raise TypeError(f"not editable: {', '.join(sorted(unknown))}")
        for i, cur in enumerate(self._tasks):
            if cur.id != task_id:
                continue
            if "title" in changes:
                changes["title"] = (changes["title"] or "").strip() or cur.title
            for key in ("notes", "category"):
                if key in changes:
                    changes[key] = _clean(changes[key])
            if "due" in changes:
                changes["due"] = changes["due"] or None
            if "priority" in changes and changes["priority"] not in PRIORITY_RANK:
                changes["priority"] = cur.priority
            updated = cur.with_changes(**changes, updated_at=utc_now_iso())
            self._tasks[i] = updated
            self._commit_tasks()
            return updated
        log.debug("update_task: no task %s", task_id)
        return None

    def toggle_completed(self, task_id: str) -> Optional[Task]:
        cur = self.get_task(task_id)
        if cur is None:
            return None
        return self.update_task(task_id, completed=not cur.completed)

    def delete_task(self, task_id: str) -> bool:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) == before:
            return False
        self._commit_tasks()
        log.info("Deleted task %s", task_id)
        return True

    def clear_completed(self) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        if removed:
            self._commit_tasks()
            log.info("Cleared %d completed tasks", removed)
        return removed

    def add_category(self, name: str) -> bool:
        name = (name or "").strip()
        if not name or name in self._meta.categories:
            return False
        self._set_categories(merge_categories(self._meta.categories, [name]))
        return True

    # ---- language
    def set_language(self, lang: str) -> None:
        lang = i18n.normalize_lang(lang)
        if lang == self._lang:
            return
        self._lang = lang
        self._store.save_lang(lang)
        self.languageChanged.emit(lang)

    def toggle_language(self) -> str:
        self.set_language(i18n.other_lang(self._lang))
        return self._lang

    # ---- import / export
    def snapshot_text(self) -> str:
        return dumps_snapshot(build_snapshot(self._tasks, self._meta))

    def export_to(self, path: Path | str) -> Path:
        path = Path(path)
        path.write_text(self.snapshot_text(), encoding="utf-8")
        log.info("Exported %d tasks to %s", len(self._tasks), path)
        return path

    def import_text(self, text: str) -> ImportedSnapshot:
        """Apply a snapshot. Raises SnapshotError before touching state if malformed."""
        snap = parse_snapshot(text)
        if snap.tasks is not None:
            self._tasks = list(snap.tasks)
            self._commit_tasks()
        if snap.categories:
            self._set_categories(merge_categories(self._meta.categories, snap.categories))
        log.info("Imported snapshot: tasks=%s categories=%s",
                 None if snap.tasks is None else len(snap.tasks),
                 None if snap.categories is None else len(snap.categories))
        return snap

    def import_from(self, path: Path | str) -> ImportedSnapshot:
        try:
            text = Path(path).read_bytes().decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise SnapshotError(f"not UTF-8 text: {e}") from e
        return self.import_text(text)

    # ---- internals
    def _commit_tasks(self) -> None:
        self._store.save_tasks(self._tasks)
        self.reload()

    def _set_categories(self, categories: List[str]) -> None:
        self._meta = Meta(categories=categories, extra=dict(self._meta.extra))
        self._store.save_meta(self._meta)
        self.categoriesChanged.emit(list(categories))
