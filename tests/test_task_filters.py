# tests/test_task_filters.py
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from taskkeeper.models.entities import Task
from taskkeeper.services import task_filters
from taskkeeper.services.task_filters import (
    TaskView,
    compute_stats,
    filter_tasks,
    is_overdue,
    sort_tasks,
    visible_tasks,
)

TODAY = "2025-06-15"


def _task(tid: str, **kw) -> Task:
    kw.setdefault("title", f"Task {tid}")
    kw.setdefault("created_at", f"2025-06-0{tid}T10:00:00.000Z")
    kw.setdefault("updated_at", kw["created_at"])
    return Task(id=tid, **kw)


@pytest.fixture()
def tasks() -> list[Task]:
    return [
        _task("1", title="Write report", category="Work", priority="high", due="2025-06-10"),
        _task("2", title="Buy milk", category="Personal", priority="low", completed=True, due="2025-06-01"),
        _task("3", title="Plan sprint", notes="Review the report draft", category="Work", priority="medium"),
        _task("4", title="Gym", category="Personal", priority="high", due="2025-07-01"),
    ]


def _ids(items) -> list[str]:
    return [t.id for t in items]


# --- overdue ------------------------------------------------------------------

@pytest.mark.parametrize(
    "due,completed,expected",
    [
        ("2025-06-14", False, True),
        ("2025-06-15", False, False),   # due today is not overdue
        ("2025-06-16", False, False),
        ("2025-06-14", True, False),    # completed never overdue
        (None, False, False),
    ],
)
def test_is_overdue(due, completed, expected):
    assert is_overdue(_task("1", due=due, completed=completed), TODAY) is expected


# --- filtering ----------------------------------------------------------------

@pytest.mark.parametrize(
    "status,expected",
    [
        ("all", ["1", "2", "3", "4"]),
        ("active", ["1", "3", "4"]),
        ("completed", ["2"]),
        ("overdue", ["1"]),
    ],
)
def test_filter_by_status(tasks, status, expected):
    assert _ids(filter_tasks(tasks, status=status, today=TODAY)) == expected


def test_filter_by_category_and_priority(tasks):
    assert _ids(filter_tasks(tasks, category="Work", today=TODAY)) == ["1", "3"]
    assert _ids(filter_tasks(tasks, priority="high", today=TODAY)) == ["1", "4"]


def test_search_matches_title_notes_and_category_case_insensitive(tasks):
    assert _ids(filter_tasks(tasks, query="REPORT", today=TODAY)) == ["1", "3"]
    assert _ids(filter_tasks(tasks, query="personal", today=TODAY)) == ["2", "4"]


def test_blank_query_is_ignored(tasks):
    assert _ids(filter_tasks(tasks, query="   ", today=TODAY)) == ["1", "2", "3", "4"]


def test_filters_compose_conjunctively(tasks):
    got = filter_tasks(tasks, status="active", category="Personal", priority="high", query="gym", today=TODAY)
    assert _ids(got) == ["4"]
    got = filter_tasks(tasks, status="completed", category="Work", today=TODAY)
    assert got == []


def test_filter_does_not_mutate_input(tasks):
    before = list(tasks)
    filter_tasks(tasks, status="active", today=TODAY)
    assert tasks == before


# --- sorting ------------------------------------------------------------------

def test_sort_by_created(tasks):
    assert _ids(sort_tasks(tasks, "created-asc")) == ["1", "2", "3", "4"]
    assert _ids(sort_tasks(tasks, "created-desc")) == ["4", "3", "2", "1"]


def test_sort_by_due_puts_missing_dates_last(tasks):
    assert _ids(sort_tasks(tasks, "due-asc")) == ["2", "1", "4", "3"]


def test_sort_by_priority_is_stable(tasks):
    assert _ids(sort_tasks(tasks, "priority")) == ["1", "4", "3", "2"]


def test_unknown_sort_keeps_order(tasks):
    assert _ids(sort_tasks(tasks, "bogus")) == ["1", "2", "3", "4"]


def test_visible_tasks_filters_then_sorts(tasks):
    view = TaskView(status="active", sort="priority")
    assert _ids(visible_tasks(tasks, view, TODAY)) == ["1", "4", "3"]


# --- stats --------------------------------------------------------------------

def test_compute_stats(tasks):
    s = compute_stats(tasks, TODAY)
    assert (s.total, s.active, s.completed, s.overdue) == (4, 3, 1, 1)


def test_compute_stats_empty():
    s = compute_stats([], TODAY)
    assert (s.total, s.active, s.completed, s.overdue) == (0, 0, 0, 0)


# --- today --------------------------------------------------------------------

def test_today_follows_utc_calendar_day(monkeypatch):
    class _LateEvening(datetime):
        @classmethod
        def now(cls, tz=None):
            # 23:30 at UTC-5 is already the next day in UTC
            local = datetime(2025, 6, 14, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
            return local.astimezone(tz) if tz else local.replace(tzinfo=None)

    monkeypatch.setattr(task_filters, "datetime", _LateEvening)
    assert task_filters.utc_today() == date(2025, 6, 15)
    assert task_filters.today_iso() == "2025-06-15"
    assert task_filters.today_iso(date(2025, 1, 2)) == "2025-01-02"
