import json
from pathlib import Path

import pytest

from linechart.app.config_store import (
    CONFIG_VERSION,
    DEFAULT_FILENAME,
    ChartConfig,
    apply_env_overrides,
    load_config,
    save_config,
)
from linechart.charting.types import ChartForm


def test_load_returns_defaults_when_missing(tmp_path: Path):
    cfg = load_config(tmp_path)
    assert cfg.version == CONFIG_VERSION
    assert cfg.color_scheme == "system"
    assert cfg.haptics_enabled is True
    assert cfg.form is ChartForm.MEDIUM
    assert cfg.value_specifier == "%.0f"


def test_save_and_reload_round_trip(tmp_path: Path):
    cfg = ChartConfig(color_scheme="dark", haptics_enabled=False, default_form="large", value_specifier="%.2f")
    path = save_config(cfg, tmp_path)
    assert path.name == DEFAULT_FILENAME
    assert not path.with_suffix(".json.tmp").exists()
    loaded = load_config(tmp_path)
    assert loaded.to_dict() == cfg.to_dict()
    assert loaded.form is ChartForm.LARGE


def test_corrupt_file_graceful_fallback(tmp_path: Path, caplog):
    (tmp_path / DEFAULT_FILENAME).write_text("not json", encoding="utf-8")
    with caplog.at_level("WARNING"):
        cfg = load_config(tmp_path)
    assert cfg == ChartConfig()
    assert "Unreadable chart config" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        {"color_scheme": "sepia"},
        {"default_form": "giant"},
        {"value_specifier": "%s %s"},
        {"haptics_enabled": "maybe"},
        {"reduced_motion": 1},
        ["not", "a", "mapping"],
    ],
)
def test_invalid_values_fall_back_to_defaults(tmp_path: Path, payload):
    (tmp_path / DEFAULT_FILENAME).write_text(json.dumps(payload), encoding="utf-8")
    assert load_config(tmp_path) == ChartConfig()


def test_string_booleans_are_parsed(tmp_path: Path):
    payload = {"haptics_enabled": "false", "reduced_motion": "Yes"}
    (tmp_path / DEFAULT_FILENAME).write_text(json.dumps(payload), encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg.haptics_enabled is False
    assert cfg.reduced_motion is True


def test_version_mismatch_resets(tmp_path: Path):
    data = ChartConfig(color_scheme="dark").to_dict()
    data["version"] = CONFIG_VERSION + 10
    (tmp_path / DEFAULT_FILENAME).write_text(json.dumps(data), encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg.color_scheme == "system"


def test_env_overrides():
    env = {
        "LINECHART_COLOR_SCHEME": "Dark",
        "LINECHART_HAPTICS": "off",
        "LINECHART_REDUCED_MOTION": "1",
    }
    cfg = apply_env_overrides(ChartConfig(), env)
    assert cfg.color_scheme == "dark"
    assert cfg.haptics_enabled is False
    assert cfg.reduced_motion is True


def test_invalid_env_values_ignored(caplog):
    env = {"LINECHART_COLOR_SCHEME": "neon", "LINECHART_HAPTICS": "maybe"}
    with caplog.at_level("WARNING"):
        cfg = apply_env_overrides(ChartConfig(), env)
    assert cfg == ChartConfig()
    assert "LINECHART_HAPTICS" in caplog.text


def test_env_overrides_read_process_environment(monkeypatch):
    monkeypatch.setenv("LINECHART_HAPTICS", "no")
    assert apply_env_overrides(ChartConfig()).haptics_enabled is False
