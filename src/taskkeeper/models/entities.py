# Rev 0.1.0
"""Task and metadata records, shaped like the persisted JSON (camelCase timestamps)."""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from taskkeeper.models.types import DEFAULT_PRIORITY, PRIORITY_RANK

DEFAULT_CATEGORIES: Dict[str, List[str]] = {
    "ar": ["عمل", "شخصي", "مشاريع"],
    "en": ["Work", "Personal", "Projects"],
}


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_task_id() -> str:
    return uuid.uuid4().hex


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    s = str(value)
    return s if s else None


@dataclass
class Task:
    id: str
    title: str
    notes: Optional[str] = None
    category: Optional[str] = None
    priority: str = DEFAULT_PRIORITY
    due: Optional[str] = None          # YYYY-MM-DD
    completed: bool = False
    created_at: str = field(default_factory=utc_now_iso)
    updated_at: str = field(default_factory=utc_now_iso)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id, "title": self.title}
        if self.notes is not None:
            out["notes"] = self.notes
        if self.category is not None:
            out["category"] = self.category
        out["priority"] = self.priority
        if self.due is not None:
            out["due"] = self.due
        out["completed"] = self.completed
        out["createdAt"] = self.created_at
        out["updatedAt"] = self.updated_at
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """
        Build a Task from a persisted/imported record.
        Raises ValueError when the record has no usable id.
        """
        if not isinstance(data, dict):
            raise ValueError(f"task record must be an object, got {type(data).__name__}")
        tid = _opt_str(data.get("id"))
        if tid is None:
            raise ValueError("task record has no id")
        priority = data.get("priority")
        if priority not in PRIORITY_RANK:
            priority = DEFAULT_PRIORITY
        now = utc_now_iso()
        created = _opt_str(data.get("createdAt")) or now
        return cls(
            id=tid,
            title=str(data.get("title") or ""),
            notes=_opt_str(data.get("notes")),
            category=_opt_str(data.get("category")),
            priority=priority,
            due=_opt_str(data.get("due")),
            completed=data.get("completed") is True,
            created_at=created,
            updated_at=_opt_str(data.get("updatedAt")) or created,
        )

    def with_changes(self, **changes: Any) -> "Task":
        return replace(self, **changes)


@dataclass
class Meta:
    categories: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)  # unknown keys, kept verbatim

    def to_dict(self) -> Dict[str, Any]:
        return {**self.extra, "categories": list(self.categories)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Meta":
        if not isinstance(data, dict):
            raise ValueError("meta must be an object")
        cats = data.get("categories")
        if not isinstance(cats, list):
            raise ValueError("meta.categories must be a list")
        extra = {k: v for k, v in data.items() if k != "categories"}
        return cls(categories=[str(c) for c in cats], extra=extra)

    @classmethod
    def default_for(cls, lang: str) -> "Meta":
        return cls(categories=list(DEFAULT_CATEGORIES.get(lang, DEFAULT_CATEGORIES["ar"])))
