import os
import logging
from pathlib import Path

import yaml
from dotenv import load_dotenv

log = logging.getLogger("pitchsign.config")

# Project root is one level up from src/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_seed(default):
    raw = os.environ.get("PITCHSIGN_SEED")
    if raw is None or not raw.strip():
        return default
    return int(raw)


def load_config(config_path: str = None) -> dict:
    """Load configuration from YAML file with .env overrides."""
    load_dotenv(PROJECT_ROOT / ".env")

    yaml_path = Path(config_path) if config_path else CONFIG_DIR / "default_settings.yaml"
    if not yaml_path.exists():
        log.warning("Config file not found: %s, using defaults", yaml_path)
        config = {}
    else:
        with open(yaml_path) as f:
            config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {yaml_path} must contain a mapping")

    # Environment variable overrides
    session = config.setdefault("session", {}) or {}
    config["session"] = session
    session["history_size"] = int(
        os.environ.get("PITCHSIGN_HISTORY_SIZE", session.get("history_size", 10))
    )
    if session["history_size"] < 1:
        raise ValueError(f"history_size must be at least 1, got {session['history_size']}")
    seed = _env_seed(session.get("seed"))
    session["seed"] = int(seed) if seed is not None else None

    audio = config.setdefault("audio", {}) or {}
    config["audio"] = audio
    audio["enabled"] = _env_bool("PITCHSIGN_AUDIO", bool(audio.get("enabled", True)))

    log.info(
        "Config loaded: history %d, seed %s, audio %s, %s catalog, %s presets",
        session["history_size"],
        session["seed"],
        "on" if audio["enabled"] else "off",
        "custom" if config.get("catalog") else "default",
        "custom" if config.get("presets") is not None else "default",
    )
    return config
