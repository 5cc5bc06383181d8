# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the configuration manager.
"""

import json
from pathlib import Path

import pytest

from config import app_config
from config.app_config import APP_DIR_NAME, ConfigManager


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(app_config.Path, "home", lambda: tmp_path)
    return tmp_path


def _write_user_config(home: Path, data: dict) -> Path:
    user_config_dir = home / APP_DIR_NAME
    user_config_dir.mkdir(exist_ok=True)
    user_config_file = user_config_dir / "app_config.json"
    user_config_file.write_text(json.dumps(data), encoding="utf-8")
    return user_config_file


def test_defaults_load_without_user_config(home):
    manager = ConfigManager()

    assert manager.get("date_picker.show_today") is True
    assert manager.get("date_picker.years_back") == 50
    assert manager.get("date_picker.missing", "fallback") == "fallback"


def test_user_config_is_deep_merged(home):
    _write_user_config(home, {"date_picker": {"min": "2020-01-01", "years_back": 80}})

    manager = ConfigManager()

    assert manager.get("date_picker.min") == "2020-01-01"
    assert manager.get("date_picker.years_back") == 80
    assert manager.get("date_picker.years_ahead") == 10


@pytest.mark.parametrize(
    "picker_config, error",
    [
        ({"show_today": "yes"}, TypeError),
        ({"years_back": -1}, ValueError),
        ({"years_ahead": True}, ValueError),
        ({"year_row_height": 4}, ValueError),
        ({"min": "2023-02-29"}, ValueError),
        ({"min": "2024-02-01", "max": "2024-01-01"}, ValueError),
    ],
)
def test_invalid_date_picker_config_is_rejected(home, picker_config, error):
    _write_user_config(home, {"date_picker": picker_config})

    with pytest.raises(error):
        ConfigManager()


def test_save_persists_and_reload_reads_back(home):
    manager = ConfigManager()
    manager.set("date_picker.placeholder", "Pick a day")
    manager.save()

    saved = json.loads((home / APP_DIR_NAME / "app_config.json").read_text(encoding="utf-8"))
    assert saved["date_picker"]["placeholder"] == "Pick a day"

    manager.set("date_picker.placeholder", "changed in memory")
    manager.reload()
    assert manager.get("date_picker.placeholder") == "Pick a day"


def test_save_validates_before_writing(home):
    manager = ConfigManager()
    manager.set("date_picker.max", "not a date")

    with pytest.raises(ValueError):
        manager.save()

    assert not (home / APP_DIR_NAME / "app_config.json").exists()


def test_defaults_are_immutable(home):
    defaults = ConfigManager().get_defaults()

    with pytest.raises(TypeError):
        defaults["date_picker"]["min"] = "2024-01-01"


def test_default_config_version_matches_package_version():
    from config.__version__ import get_version

    assert app_config.get_default_config_version() == get_version()


def test_theme_defaults_to_light_and_rejects_unknown_names(home):
    assert ConfigManager().get("ui.theme") == "light"

    _write_user_config(home, {"ui": {"theme": "sepia"}})
    with pytest.raises(ValueError):
        ConfigManager()
