# tests/test_config_and_i18n.py
from __future__ import annotations

import pytest

from taskkeeper.services import i18n
from taskkeeper.utils import paths
from taskkeeper.utils.config import load_settings, save_settings, settings_file


# --- settings -----------------------------------------------------------------

def test_settings_default_when_missing():
    s = load_settings()
    assert s["default_language"] == "ar"
    assert s["main_window"]["width"] == 1100


def test_settings_round_trip_merges_over_defaults():
    save_settings({"default_language": "en"})
    s = load_settings()
    assert s["default_language"] == "en"
    assert "main_window" in s
    assert settings_file().parent == paths.config_dir()


def test_unreadable_settings_fall_back():
    settings_file().parent.mkdir(parents=True, exist_ok=True)
    settings_file().write_text("{nope", encoding="utf-8")
    assert load_settings()["default_language"] == "ar"


def test_db_path_env_override(tmp_path, monkeypatch):
    assert paths.default_db_path() == paths.data_dir() / "taskkeeper.db"
    monkeypatch.setenv("TASKKEEPER_DB", str(tmp_path / "x.db"))
    assert paths.default_db_path() == tmp_path / "x.db"


# --- labels -------------------------------------------------------------------

def test_label_tables_have_same_keys():
    ar, en = i18n.LABELS["ar"], i18n.LABELS["en"]
    assert set(ar) == set(en)
    assert set(ar["stats"]) == set(en["stats"]) == {"total", "active", "completed", "overdue"}


@pytest.mark.parametrize("lang,rtl,other", [("ar", True, "en"), ("en", False, "ar"), ("fr", True, "en"), (None, True, "en")])
def test_direction_and_toggle(lang, rtl, other):
    assert i18n.is_rtl(lang) is rtl
    assert i18n.other_lang(lang) == other


def test_unknown_language_uses_arabic_labels():
    assert i18n.labels("xx") is i18n.LABELS["ar"]
    assert i18n.labels("en")["high"] == "Urgent"
