# Rev 0.1.0

"""Pytest fixtures for taskkeeper (Rev 0.1.0)"""
from __future__ import annotations
import pytest
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from taskkeeper.repositories.db import Database
from taskkeeper.repositories.sqlite_kv_repository import SQLiteKeyValueRepository
from taskkeeper.repositories.task_store import TaskStore
from taskkeeper.viewmodels.tasks_viewmodel import TasksViewModel

TODAY = "2025-06-15"


@pytest.fixture(autouse=True)
def _isolated_xdg(tmp_path: Path, monkeypatch):
    for var in ("XDG_DATA_HOME", "XDG_STATE_HOME", "XDG_CONFIG_HOME"):
        monkeypatch.setenv(var, str(tmp_path / "xdg" / var.lower()))
    monkeypatch.delenv("TASKKEEPER_DB", raising=False)


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture()
def db(tmp_path: Path):
    database = Database(path=tmp_path / "test.db")
    try:
        database.run_migrations()
        yield database
    finally:
        database.close()


@pytest.fixture()
def kv(db: Database) -> SQLiteKeyValueRepository:
    return SQLiteKeyValueRepository(db)


@pytest.fixture()
def store(kv: SQLiteKeyValueRepository) -> TaskStore:
    return TaskStore(kv)


@pytest.fixture()
def vm(qapp, store: TaskStore) -> TasksViewModel:
    return TasksViewModel(store, default_lang="en", today=lambda: TODAY)
