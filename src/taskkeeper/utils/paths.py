# Rev 0.1.0

"""Paths and XDG helpers (Rev 0.1.0)
- Uses XDG Base Directory spec for data/state/config
- DB lives under $XDG_DATA_HOME/taskkeeper unless TASKKEEPER_DB is set
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "taskkeeper"


def xdg_data_home() -> Path:
    return Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def xdg_state_home() -> Path:
    return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))


def xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def data_dir() -> Path:
    return xdg_data_home() / APP_NAME


def logs_dir() -> Path:
    return xdg_state_home() / APP_NAME / "logs"


def config_dir() -> Path:
    return xdg_config_home() / APP_NAME


# Packaged SQL migrations
MIGRATIONS_DIR = (Path(__file__).resolve().parents[1] / "migrations").resolve()


def default_db_path() -> Path:
    env = os.environ.get("TASKKEEPER_DB")
    return Path(env).expanduser() if env else data_dir() / "taskkeeper.db"

