# Rev 0.1.0

"""Derived task views (Rev 0.1.0)
- Filter by status / category / priority / search text (all conjunctive)
- Sort by creation time, due date or priority
- Aggregate counters for the stat cards
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Iterable, List, Optional

from taskkeeper.models.entities import Task
from taskkeeper.models.types import ALL, PRIORITY_RANK

NO_DUE_SENTINEL = "9999-99-99"


@dataclass(frozen=True)
class TaskView:
    """Current filter/sort selection of the task list."""
    query: str = ""
    status: str = ALL
    category: str = ALL
    priority: str = ALL
    sort: str = "created-desc"


@dataclass(frozen=True)
class TaskStats:
    total: int = 0
    active: int = 0
    completed: int = 0
    overdue: int = 0


def utc_today() -> date:
    # overdue and backup names follow the UTC calendar day
    return datetime.now(timezone.utc).date()


def today_iso(today: Optional[date] = None) -> str:
    return (today or utc_today()).isoformat()


def is_overdue(task: Task, today: str) -> bool:
    return (not task.completed) and bool(task.due) and task.due < today


def _matches_query(task: Task, q: str) -> bool:
    return (
        q in task.title.lower()
        or q in (task.notes or "").lower()
        or q in (task.category or "").lower()
    )


def filter_tasks(
    tasks: Iterable[Task],
    *,
    status: str = ALL,
    category: str = ALL,
    priority: str = ALL,
    query: str = "",
    today: str,
) -> List[Task]:
    result = list(tasks)

    if status == "active":
        result = [t for t in result if not t.completed]
    elif status == "completed":
        result = [t for t in result if t.completed]
    elif status == "overdue":
        result = [t for t in result if is_overdue(t, today)]

    if category != ALL:
        result = [t for t in result if t.category == category]

    if priority != ALL:
        result = [t for t in result if t.priority == priority]

    q = (query or "").strip().lower()
    if q:
        result = [t for t in result if _matches_query(t, q)]

    return result


def sort_tasks(tasks: Iterable[Task], sort: str) -> List[Task]:
    result = list(tasks)
    if sort == "created-asc":
        result.sort(key=lambda t: t.created_at)
    elif sort == "created-desc":
        result.sort(key=lambda t: t.created_at, reverse=True)
    elif sort == "due-asc":
        result.sort(key=lambda t: t.due or NO_DUE_SENTINEL)
    elif sort == "priority":
        result.sort(key=lambda t: PRIORITY_RANK.get(t.priority, PRIORITY_RANK["medium"]))
    return result


def visible_tasks(tasks: Iterable[Task], view: TaskView, today: str) -> List[Task]:
    filtered = filter_tasks(
        tasks,
        status=view.status,
        category=view.category,
        priority=view.priority,
        query=view.query,
        today=today,
    )
    return sort_tasks(filtered, view.sort)


def compute_stats(tasks: Iterable[Task], today: str) -> TaskStats:
    items = list(tasks)
    done = sum(1 for t in items if t.completed)
    return TaskStats(
        total=len(items),
        active=len(items) - done,
        completed=done,
        overdue=sum(1 for t in items if is_overdue(t, today)),
    )
