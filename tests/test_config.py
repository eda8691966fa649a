import logging

import pytest

import config as config_module
from config import load_config
from core.logging_config import setup_logging

ENV_VARS = ("PITCHSIGN_HISTORY_SIZE", "PITCHSIGN_SEED", "PITCHSIGN_AUDIO")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.setattr(config_module, "PROJECT_ROOT", tmp_path)


def test_missing_file_uses_defaults(tmp_path):
    config = load_config(str(tmp_path / "nope.yaml"))
    assert config["session"] == {"history_size": 10, "seed": None}
    assert config["audio"] == {"enabled": True}
    assert "catalog" not in config


def test_yaml_values_are_loaded(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "session:\n"
        "  history_size: 4\n"
        "  seed: 99\n"
        "audio:\n"
        "  enabled: false\n"
        "presets:\n"
        "  - name: Pair\n"
        "    pitches: [Sinker, Slider]\n"
    )
    config = load_config(str(path))
    assert config["session"] == {"history_size": 4, "seed": 99}
    assert config["audio"]["enabled"] is False
    assert config["presets"][0]["pitches"] == ["Sinker", "Slider"]


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text("session:\n  history_size: 4\n")
    monkeypatch.setenv("PITCHSIGN_HISTORY_SIZE", "6")
    monkeypatch.setenv("PITCHSIGN_SEED", "3")
    monkeypatch.setenv("PITCHSIGN_AUDIO", "off")
    config = load_config(str(path))
    assert config["session"] == {"history_size": 6, "seed": 3}
    assert config["audio"]["enabled"] is False


def test_bad_audio_flag_is_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("PITCHSIGN_AUDIO", "maybe")
    with pytest.raises(ValueError):
        load_config(str(tmp_path / "nope.yaml"))


def test_bad_history_size_is_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("PITCHSIGN_HISTORY_SIZE", "0")
    with pytest.raises(ValueError):
        load_config(str(tmp_path / "nope.yaml"))


def test_shipped_settings_file_loads():
    config = load_config(str(config_module.CONFIG_DIR / "default_settings.yaml"))
    assert config["session"]["history_size"] == 10
    assert config["audio"]["enabled"] is True


def test_setup_logging_configures_namespace():
    logger = setup_logging("debug")
    assert logger.name == "pitchsign"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False
    setup_logging("warning")
    assert len(logger.handlers) == 1
