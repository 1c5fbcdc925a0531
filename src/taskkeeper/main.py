# Rev 0.1.0

# src/taskkeeper/main.py
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QGuiApplication, QFont
from PySide6.QtCore import Qt, QCoreApplication
from PySide6.QtWidgets import QApplication

from taskkeeper.app_context import AppContext
from taskkeeper.ui.main_window import MainWindow
from taskkeeper.utils.config import load_settings
from taskkeeper.utils.logging_setup import setup_logging
from taskkeeper.viewmodels.tasks_viewmodel import TasksViewModel


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="taskkeeper", description="Personal task manager")
    p.add_argument("--db", type=Path, default=None, help="Path to SQLite DB (default: $TASKKEEPER_DB or XDG data dir)")
    p.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    ns = parse_args(sys.argv[1:] if argv is None else argv)

    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv[:1])
    QCoreApplication.setOrganizationName("taskkeeper")
    QCoreApplication.setApplicationName("taskkeeper")

    logfile = setup_logging("DEBUG" if ns.debug else None)
    print(f"[logging] Writing to: {logfile}")

    settings = load_settings()
    ctx = AppContext.create(ns.db)
    vm = TasksViewModel(ctx.store, default_lang=settings.get("default_language", "ar"))

    size = settings.get("main_window", {})
    win = MainWindow(vm, width=int(size.get("width", 1100)), height=int(size.get("height", 760)))
    win.show()

    app.setProperty("mainWindow", win)
    app.setFont(QFont("Sans Serif", 10))

    try:
        return app.exec()
    finally:
        ctx.close()


if __name__ == "__main__":
    sys.exit(main())
