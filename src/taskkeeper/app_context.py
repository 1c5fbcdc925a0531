# taskkeeper application context
# Rev 0.1.0

from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from taskkeeper.repositories.db import Database
from taskkeeper.repositories.sqlite_kv_repository import SQLiteKeyValueRepository
from taskkeeper.repositories.task_store import TaskStore


@dataclass
class AppContext:
    """Central container for shared app resources."""
    db: Database
    kv: SQLiteKeyValueRepository
    store: TaskStore

    @classmethod
    def create(cls, db_path: Optional[Path] = None) -> "AppContext":
        """Open DB, apply migrations, wire repositories."""
        log = logging.getLogger(__name__)
        db = Database(db_path)
        db.run_migrations()
        kv = SQLiteKeyValueRepository(db)
        log.info("AppContext initialized with DB=%s", db.path)
        return cls(db=db, kv=kv, store=TaskStore(kv))

    def close(self) -> None:
        self.db.close()
