"""
Configuration

Game settings with built-in defaults, optionally overridden from a YAML
file. Only keys that match a GameConfig field are read; anything else in
the file is ignored.
"""

import logging
import os
from dataclasses import dataclass, fields, replace

import yaml

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "plantings.yaml"


@dataclass
class GameConfig:
    save_file: str = "planTings_game_state.txt"
    log_file: str = "plantings.log"
    log_level: str = "WARNING"
    # Cosmetic pacing only; 0 disables it
    pause_seconds: float = 2.0
    type_delay: float = 0.05
    clear_screen: bool = True

    def fast(self) -> "GameConfig":
        """Same settings with every pacing effect switched off."""
        return replace(self, pause_seconds=0.0, type_delay=0.0, clear_screen=False)


def load_config(path=None) -> GameConfig:
    """
    Load settings from `path` (or plantings.yaml in the working directory).

    A missing default file is not an error; a missing explicit file is.
    """
    explicit = path is not None
    path = path or DEFAULT_CONFIG_PATH
    if not os.path.exists(path):
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        return GameConfig()

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(raw).__name__}")

    known = {fld.name for fld in fields(GameConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        log.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
    return GameConfig(**{k: v for k, v in raw.items() if k in known})
