# Rev 0.1.0
"""
Typed access to the three persisted entries:
  tmc_tasks_v2  JSON array of task records
  tmc_meta_v2   JSON object of categories/metadata
  tmc_lang_v2   language preference string

Reads never raise: anything missing or malformed falls back to the default.
"""
from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Iterable, List, Optional

from taskkeeper.models.entities import Meta, Task
from taskkeeper.models.types import DEFAULT_LANG, LANGS
from taskkeeper.repositories.sqlite_kv_repository import SQLiteKeyValueRepository

log = logging.getLogger(__name__)

STORAGE_KEY = "tmc_tasks_v2"
STORAGE_META_KEY = "tmc_meta_v2"
STORAGE_LANG = "tmc_lang_v2"


class TaskStore:
    def __init__(self, kv: SQLiteKeyValueRepository):
        self._kv = kv

    # ---- raw helpers
    def _read_json(self, key: str) -> Any:
        try:
            raw = self._kv.get(key)
        except sqlite3.Error as e:
            log.warning("Read of %s failed, using default: %s", key, e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            log.warning("Stored %s is not valid JSON, using default: %s", key, e)
            return None

    def _write_json(self, key: str, value: Any) -> None:
        self._kv.set(key, json.dumps(value, ensure_ascii=False))

    # ---- tasks
    def load_tasks(self) -> List[Task]:
        data = self._read_json(STORAGE_KEY)
        if not isinstance(data, list):
            if data is not None:
                log.warning("Stored %s is not a list, using empty task list", STORAGE_KEY)
            return []
        tasks: List[Task] = []
        seen: set[str] = set()
        for raw in data:
            try:
                t = Task.from_dict(raw)
            except ValueError as e:
                log.debug("Skipping stored task record: %s", e)
                continue
            if t.id in seen:
                continue
            seen.add(t.id)
            tasks.append(t)
        return tasks

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        items = [t.to_dict() for t in tasks]
        self._write_json(STORAGE_KEY, items)
        log.debug("Saved %d tasks", len(items))

    # ---- meta
    def load_meta(self, default_lang: str = DEFAULT_LANG) -> Meta:
        data = self._read_json(STORAGE_META_KEY)
        if data is None:
            return Meta.default_for(default_lang)
        try:
            return Meta.from_dict(data)
        except ValueError as e:
            log.warning("Stored %s unusable, using defaults: %s", STORAGE_META_KEY, e)
            return Meta.default_for(default_lang)

    def save_meta(self, meta: Meta) -> None:
        self._write_json(STORAGE_META_KEY, meta.to_dict())

    # ---- language (stored as a bare string)
    def load_lang(self, default: str = DEFAULT_LANG) -> str:
        try:
            raw: Optional[str] = self._kv.get(STORAGE_LANG)
        except sqlite3.Error as e:
            log.warning("Read of %s failed, using default: %s", STORAGE_LANG, e)
            return default
        return raw if raw in LANGS else default

    def save_lang(self, lang: str) -> None:
        self._kv.set(STORAGE_LANG, lang)
