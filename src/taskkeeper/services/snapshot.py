# Rev 0.1.0
"""JSON backup snapshot: {tasks, meta, version, exportedAt}."""
from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from taskkeeper.models.entities import Meta, Task, utc_now_iso
from taskkeeper.services.task_filters import utc_today

log = logging.getLogger(__name__)

SNAPSHOT_VERSION = 2


class SnapshotError(ValueError):
    """Import file is not a usable snapshot."""


@dataclass
class ImportedSnapshot:
    tasks: Optional[List[Task]]          # None: leave current list untouched
    categories: Optional[List[str]]      # None: nothing to merge
    version: Any = None


def build_snapshot(tasks: Iterable[Task], meta: Meta, now: Optional[str] = None) -> Dict[str, Any]:
    return {
        "tasks": [t.to_dict() for t in tasks],
        "meta": meta.to_dict(),
        "version": SNAPSHOT_VERSION,
        "exportedAt": now or utc_now_iso(),
    }


def dumps_snapshot(snapshot: Dict[str, Any]) -> str:
    return json.dumps(snapshot, indent=2, ensure_ascii=False)


def backup_filename(today: Optional[date] = None) -> str:
    return f"tasks-backup-{(today or utc_today()).isoformat()}.json"


def parse_snapshot(text: str) -> ImportedSnapshot:
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SnapshotError("snapshot must be a JSON object")

    tasks: Optional[List[Task]] = None
    raw_tasks = data.get("tasks")
    if isinstance(raw_tasks, list):
        tasks = []
        ids: set[str] = set()
        for i, raw in enumerate(raw_tasks):
            try:
                task = Task.from_dict(raw)
            except ValueError as e:
                raise SnapshotError(f"tasks[{i}]: {e}") from e
            # ids stay unique within the list; first occurrence wins
            if task.id in ids:
                log.warning("Dropping duplicate task id %s at tasks[%d]", task.id, i)
                continue
            ids.add(task.id)
            tasks.append(task)

    categories: Optional[List[str]] = None
    meta = data.get("meta")
    if isinstance(meta, dict) and isinstance(meta.get("categories"), list):
        categories = [str(c) for c in meta["categories"]]

    log.debug(
        "Parsed snapshot version=%s tasks=%s categories=%s",
        data.get("version"),
        None if tasks is None else len(tasks),
        None if categories is None else len(categories),
    )
    return ImportedSnapshot(tasks=tasks, categories=categories, version=data.get("version"))


def merge_categories(existing: Iterable[str], incoming: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for c in list(existing) + list(incoming):
        if c in seen:
            continue
        seen.add(c); out.append(c)
    return out
