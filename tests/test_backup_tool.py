# tests/test_backup_tool.py
# End-to-end runs of the taskkeeper-backup command against a temp DB

from __future__ import annotations

import json
from pathlib import Path

from taskkeeper.models.entities import DEFAULT_CATEGORIES
from taskkeeper.tools.backup import main
from taskkeeper.utils.config import save_settings


def _snapshot(path: Path, tasks: list[dict], categories: list[str]) -> Path:
    path.write_text(json.dumps({"tasks": tasks, "meta": {"categories": categories}, "version": 2}),
                    encoding="utf-8")
    return path


def test_import_then_stats_then_export(qapp, tmp_path: Path, capsys):
    db = tmp_path / "cli.db"
    src = _snapshot(tmp_path / "in.json", [
        {"id": "1", "title": "open", "due": "2000-01-01"},
        {"id": "2", "title": "done", "completed": True},
    ], ["Work"])

    assert main(["--db", str(db), "import", str(src)]) == 0
    assert "Imported tasks: 2" in capsys.readouterr().out

    assert main(["--db", str(db), "stats"]) == 0
    assert "total=2 active=1 completed=1 overdue=1" in capsys.readouterr().out

    out = tmp_path / "out.json"
    assert main(["--db", str(db), "export", "--out", str(out)]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [t["id"] for t in data["tasks"]] == ["1", "2"]
    assert data["version"] == 2
    assert "Work" in data["meta"]["categories"]


def test_malformed_import_exit_code(qapp, tmp_path: Path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")
    assert main(["--db", str(tmp_path / "cli.db"), "import", str(bad)]) == 2
    assert "bad.json" in capsys.readouterr().err


def test_missing_import_file_exit_code(qapp, tmp_path: Path):
    assert main(["--db", str(tmp_path / "cli.db"), "import", str(tmp_path / "nope.json")]) == 1


def test_db_path_from_env(qapp, tmp_path: Path, monkeypatch, capsys):
    db = tmp_path / "env.db"
    monkeypatch.setenv("TASKKEEPER_DB", str(db))
    assert main(["stats"]) == 0
    assert db.exists()


def test_fresh_db_uses_configured_default_language(qapp, tmp_path: Path):
    save_settings({"default_language": "en"})
    out = tmp_path / "fresh.json"
    assert main(["--db", str(tmp_path / "fresh.db"), "export", "--out", str(out)]) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["meta"]["categories"] == DEFAULT_CATEGORIES["en"]
