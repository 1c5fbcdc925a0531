# File: src/taskkeeper/tools/backup.py
# Usage examples:
#   taskkeeper-backup export
#   taskkeeper-backup export --out ~/tasks.json
#   taskkeeper-backup import ~/tasks-backup-2025-10-14.json
#   taskkeeper-backup stats --db /path/to/taskkeeper.db
#
# Notes:
# - DB path defaults to env TASKKEEPER_DB or the XDG data dir
# - import replaces the task list and merges categories, same as the UI
# - exit codes: 0 ok, 1 I/O error, 2 malformed import file

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from taskkeeper.app_context import AppContext
from taskkeeper.services.snapshot import SnapshotError, backup_filename
from taskkeeper.utils.config import load_settings
from taskkeeper.viewmodels.tasks_viewmodel import TasksViewModel

log = logging.getLogger(__name__)


def cmd_export(vm: TasksViewModel, out: Optional[Path]) -> int:
    path = vm.export_to(out or Path.cwd() / backup_filename())
    print(f"✓ Exported {len(vm.tasks)} tasks to {path}")
    return 0


def cmd_import(vm: TasksViewModel, src: Path) -> int:
    try:
        snap = vm.import_from(src)
    except SnapshotError as e:
        print(f"❌ {src}: {e}", file=sys.stderr)
        return 2
    count = "unchanged" if snap.tasks is None else str(len(snap.tasks))
    print(f"✓ Imported tasks: {count}; categories: {len(vm.categories)}")
    return 0


def cmd_stats(vm: TasksViewModel) -> int:
    s = vm.stats()
    print(f"total={s.total} active={s.active} completed={s.completed} overdue={s.overdue}")
    return 0


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="taskkeeper-backup", description="Export/import taskkeeper data")
    p.add_argument("--db", type=Path, default=None, help="Path to SQLite DB (default: $TASKKEEPER_DB or XDG data dir)")
    sub = p.add_subparsers(dest="cmd", required=True)

    s_export = sub.add_parser("export", help="Write a JSON snapshot")
    s_export.add_argument("--out", type=Path, default=None, help="Output file (default: ./tasks-backup-<date>.json)")

    s_import = sub.add_parser("import", help="Replace tasks from a JSON snapshot and merge categories")
    s_import.add_argument("path", type=Path)

    sub.add_parser("stats", help="Print task counters")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    ns = parse_args(sys.argv[1:] if argv is None else argv)
    ctx = AppContext.create(ns.db)
    try:
        settings = load_settings()
        vm = TasksViewModel(ctx.store, default_lang=settings.get("default_language", "ar"))
        if ns.cmd == "export":
            return cmd_export(vm, ns.out)
        if ns.cmd == "import":
            return cmd_import(vm, ns.path)
        if ns.cmd == "stats":
            return cmd_stats(vm)
        return 1
    except OSError as e:
        log.error("%s failed: %s", ns.cmd, e)
        print(f"❌ {e}", file=sys.stderr)
        return 1
    finally:
        ctx.close()


if __name__ == "__main__":
    raise SystemExit(main())
