# taskkeeper type definitions
# Rev 0.1.0

from __future__ import annotations
from typing import Literal

Priority = Literal["low", "medium", "high"]
Status = Literal["all", "active", "completed", "overdue"]
SortKey = Literal["created-desc", "created-asc", "due-asc", "priority"]
Lang = Literal["ar", "en"]

PRIORITIES: tuple[str, ...] = ("high", "medium", "low")
STATUSES: tuple[str, ...] = ("all", "active", "completed", "overdue")
SORT_KEYS: tuple[str, ...] = ("created-desc", "created-asc", "due-asc", "priority")
LANGS: tuple[str, ...] = ("ar", "en")

# Lower rank sorts first
PRIORITY_RANK: dict[str, int] = {"high": 0, "medium": 1, "low": 2}

DEFAULT_PRIORITY = "medium"
DEFAULT_LANG = "ar"
ALL = "all"
