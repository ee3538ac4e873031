"""
Settings tests: CutSettings mapping construction and env/file-driven AppSettings.
"""

import pytest
from pydantic import ValidationError

from ripsaw.config import AppSettings, CutSettings


def test_empty_mapping_uses_default_blade_width():
    assert CutSettings.from_mapping({}).blade_width_inches == 0.125
    assert CutSettings.from_mapping(None).blade_width_inches == 0.125


def test_blade_width_parsed_from_string():
    settings = CutSettings.from_mapping({"blade_width_inches": ".334"})
    assert settings.blade_width_inches == 0.334


def test_unknown_keys_ignored():
    settings = CutSettings.from_mapping({"blade_width_inches": "0.1", "color": "red"})
    assert settings.blade_width_inches == 0.1


def test_malformed_blade_width_raises():
    with pytest.raises(ValidationError):
        CutSettings.from_mapping({"blade_width_inches": "wide"})


def test_cut_settings_are_frozen():
    settings = CutSettings()
    with pytest.raises(ValidationError):
        settings.blade_width_inches = 0.5


def test_app_settings_read_env(monkeypatch):
    monkeypatch.setenv("RIPSAW_BLADE_WIDTH_INCHES", "0.0625")
    monkeypatch.setenv("RIPSAW_DEFAULT_NOMINAL", "true")
    app_settings = AppSettings(_env_file=None)
    assert app_settings.BLADE_WIDTH_INCHES == 0.0625
    assert app_settings.DEFAULT_NOMINAL is True
    assert app_settings.cut_settings().blade_width_inches == 0.0625


def test_app_settings_read_config_file(monkeypatch, tmp_path):
    """ripsaw-config.toml fills in values the environment doesn't set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RIPSAW_BLADE_WIDTH_INCHES", raising=False)
    monkeypatch.delenv("RIPSAW_SHOP_NAME", raising=False)
    (tmp_path / "ripsaw-config.toml").write_text(
        'BLADE_WIDTH_INCHES = 0.09375\nSHOP_NAME = "Garage"\nLOG_LEVEL = "WARNING"\n'
    )
    monkeypatch.setenv("RIPSAW_LOG_LEVEL", "DEBUG")

    app_settings = AppSettings(_env_file=None)
    assert app_settings.BLADE_WIDTH_INCHES == 0.09375
    assert app_settings.SHOP_NAME == "Garage"
    # Environment wins over the config file
    assert app_settings.LOG_LEVEL == "DEBUG"


def test_app_settings_without_config_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RIPSAW_BLADE_WIDTH_INCHES", raising=False)
    assert AppSettings(_env_file=None).BLADE_WIDTH_INCHES == 0.125
