# tests/test_tasks_viewmodel.py
from __future__ import annotations

import json
import time
from pathlib import Path

import pytest

from taskkeeper.models.entities import DEFAULT_CATEGORIES
from taskkeeper.repositories.task_store import STORAGE_KEY, STORAGE_LANG, STORAGE_META_KEY, TaskStore
from taskkeeper.services.snapshot import SnapshotError
from taskkeeper.services.task_filters import TaskStats
from taskkeeper.viewmodels.tasks_viewmodel import TasksViewModel

TODAY = "2025-06-15"


def _reopen(store: TaskStore) -> TasksViewModel:
    return TasksViewModel(store, default_lang="en", today=lambda: TODAY)


# --- add ----------------------------------------------------------------------

def test_add_task_defaults_and_front_insertion(vm: TasksViewModel):
    first = vm.add_task("  First  ", notes="  ", category=" Work ")
    second = vm.add_task("Second", priority="high", due="2025-07-01")
    assert [t.id for t in vm.tasks] == [second.id, first.id]
    assert first.title == "First"
    assert first.notes is None
    assert first.category == "Work"
    assert first.priority == "medium"
    assert first.completed is False
    assert first.created_at == first.updated_at
    assert second.due == "2025-07-01"


@pytest.mark.parametrize("lang,expected", [("en", "New Task"), ("ar", "مهمة جديدة")])
def test_blank_title_gets_localized_default(vm: TasksViewModel, lang, expected):
    vm.set_language(lang)
    assert vm.add_task("   ").title == expected


def test_ids_are_unique(vm: TasksViewModel):
    ids = {vm.add_task(f"t{i}").id for i in range(20)}
    assert len(ids) == 20


def test_every_change_is_persisted(vm: TasksViewModel, store: TaskStore):
    task = vm.add_task("Persist me")
    assert [t.id for t in _reopen(store).tasks] == [task.id]
    vm.delete_task(task.id)
    assert _reopen(store).tasks == []


# --- update / toggle ------------------------------------------------------------

def test_toggle_flips_only_completed_and_bumps_timestamp(vm: TasksViewModel):
    task = vm.add_task("Toggle", notes="n", category="Work", priority="low", due="2025-06-20")
    time.sleep(0.002)
    toggled = vm.toggle_completed(task.id)
    assert toggled.completed is True
    assert toggled.updated_at > task.updated_at
    for field in ("id", "title", "notes", "category", "priority", "due", "created_at"):
        assert getattr(toggled, field) == getattr(task, field)
    assert vm.toggle_completed(task.id).completed is False


def test_update_task_merges_and_cleans(vm: TasksViewModel):
    task = vm.add_task("Old", notes="keep", category="Work")
    updated = vm.update_task(task.id, title=" New ", category="  ", due="", priority="high")
    assert updated.title == "New"
    assert updated.category is None
    assert updated.due is None
    assert updated.priority == "high"
    assert updated.notes == "keep"
    assert vm.get_task(task.id) == updated


def test_update_with_blank_title_keeps_previous(vm: TasksViewModel):
    task = vm.add_task("Named")
    assert vm.update_task(task.id, title="   ").title == "Named"


def test_update_rejects_non_editable_fields(vm: TasksViewModel):
    task = vm.add_task("x")
    with pytest.raises(TypeError):
        vm.update_task(task.id, id="other")


def test_unknown_id_is_a_no_op(vm: TasksViewModel):
    vm.add_task("x")
    assert vm.update_task("missing", title="y") is None
    assert vm.toggle_completed("missing") is None
    assert vm.delete_task("missing") is False
    assert len(vm.tasks) == 1


def test_clear_completed(vm: TasksViewModel):
    a = vm.add_task("a")
    b = vm.add_task("b")
    vm.toggle_completed(a.id)
    assert vm.clear_completed() == 1
    assert [t.id for t in vm.tasks] == [b.id]
    assert vm.clear_completed() == 0


# --- filters / signals ----------------------------------------------------------

def test_visible_tasks_and_stats_signals(vm: TasksViewModel):
    seen_lists, seen_stats = [], []
    vm.tasksChanged.connect(seen_lists.append)
    vm.statsChanged.connect(seen_stats.append)

    late = vm.add_task("late", due="2025-06-01", category="Work")
    vm.add_task("later", category="Home")

    assert isinstance(seen_stats[-1], TaskStats)
    assert seen_stats[-1] == TaskStats(total=2, active=2, completed=0, overdue=1)

    vm.set_status("overdue")
    assert [t.id for t in seen_lists[-1]] == [late.id]

    vm.set_status("all")
    vm.set_category_filter("Home")
    vm.set_query("LATER")
    assert [t.title for t in vm.visible_tasks()] == ["later"]


def test_sort_through_view(vm: TasksViewModel):
    vm.add_task("low", priority="low")
    time.sleep(0.002)   # distinct createdAt millis
    vm.add_task("high", priority="high")
    vm.set_sort("created-asc")
    assert [t.title for t in vm.visible_tasks()] == ["low", "high"]
    vm.set_sort("priority")
    assert [t.title for t in vm.visible_tasks()] == ["high", "low"]


# --- categories / language --------------------------------------------------------

def test_add_category(vm: TasksViewModel):
    emitted = []
    vm.categoriesChanged.connect(emitted.append)
    assert vm.categories == DEFAULT_CATEGORIES["en"]
    assert vm.add_category("  Gym ") is True
    assert vm.add_category("Gym") is False
    assert vm.add_category("   ") is False
    assert vm.categories == DEFAULT_CATEGORIES["en"] + ["Gym"]
    assert emitted == [DEFAULT_CATEGORIES["en"] + ["Gym"]]


def test_language_toggle_is_persisted(vm: TasksViewModel, store: TaskStore, kv):
    changes = []
    vm.languageChanged.connect(changes.append)
    assert vm.lang == "en"
    assert vm.toggle_language() == "ar"
    assert vm.labels["export"] == "تصدير البيانات"
    assert changes == ["ar"]
    assert kv.get(STORAGE_LANG) == "ar"
    assert _reopen(store).lang == "ar"


def test_first_start_categories_follow_language(qapp, store: TaskStore):
    vm = TasksViewModel(store, default_lang="ar", today=lambda: TODAY)
    assert vm.categories == DEFAULT_CATEGORIES["ar"]


# --- import / export --------------------------------------------------------------

def test_export_import_round_trip(vm: TasksViewModel, store: TaskStore, tmp_path: Path):
    vm.add_task("one", notes="n", category="Work", priority="high", due="2025-06-30")
    done = vm.add_task("two")
    vm.toggle_completed(done.id)
    original = vm.tasks

    path = vm.export_to(tmp_path / "backup.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"tasks", "meta", "version", "exportedAt"}

    vm.clear_completed()
    vm.add_task("noise")
    vm.import_from(path)
    assert vm.tasks == original
    assert _reopen(store).tasks == original


def test_import_replaces_tasks_and_merges_categories(vm: TasksViewModel, tmp_path: Path):
    vm.add_task("local")
    src = tmp_path / "in.json"
    src.write_text(json.dumps({
        "tasks": [{"id": "i1", "title": "imported"}],
        "meta": {"categories": ["Personal", "Errands"]},
    }), encoding="utf-8")
    vm.import_from(src)
    assert [t.title for t in vm.tasks] == ["imported"]
    assert vm.categories == ["Work", "Personal", "Projects", "Errands"]


def test_malformed_import_leaves_state_untouched(vm: TasksViewModel, kv, tmp_path: Path):
    task = vm.add_task("safe")
    before = kv.get(STORAGE_KEY)
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")
    with pytest.raises(SnapshotError):
        vm.import_from(bad)
    binary = tmp_path / "bin.json"
    binary.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(SnapshotError):
        vm.import_from(binary)
    assert [t.id for t in vm.tasks] == [task.id]
    assert kv.get(STORAGE_KEY) == before


# --- first start ------------------------------------------------------------------

def test_first_start_defaults_survive_language_switch(qapp, store: TaskStore, kv):
    vm = TasksViewModel(store, default_lang="ar", today=lambda: TODAY)
    assert json.loads(kv.get(STORAGE_META_KEY)) == {"categories": DEFAULT_CATEGORIES["ar"]}
    assert kv.get(STORAGE_LANG) == "ar"

    vm.toggle_language()
    reopened = _reopen(store)
    assert reopened.lang == "en"
    assert reopened.categories == DEFAULT_CATEGORIES["ar"]


def test_stored_meta_is_not_overwritten_on_start(qapp, store: TaskStore, kv):
    kv.set(STORAGE_META_KEY, json.dumps({"categories": ["Mine"], "theme": "dark"}))
    vm = _reopen(store)
    assert vm.categories == ["Mine"]
    assert json.loads(kv.get(STORAGE_META_KEY)) == {"theme": "dark", "categories": ["Mine"]}
