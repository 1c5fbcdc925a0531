# src/taskkeeper/utils/config.py
# Rev 0.1.0
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from taskkeeper.utils.paths import config_dir

log = logging.getLogger(__name__)

SETTINGS_NAME = "settings.json"

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 1100,
        "height": 760,
    },
    "default_language": "ar",
}


def settings_file() -> Path:
    return config_dir() / SETTINGS_NAME


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    if path.exists():
        try:
            return {**_DEFAULTS, **json.loads(path.read_text(encoding="utf-8"))}
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable settings %s: %s", path, e)
            return dict(_DEFAULTS)
    return dict(_DEFAULTS)


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
