import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_relations.yml"
CONFIG_ENV_VAR = "GEDCOM_RELATIONS_CONFIG"

DEFAULT_DISPLAY = {
    "default_person_pattern": None,
    "unnamed_label": "Unnamed relative",
}


class GRConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.display = {**DEFAULT_DISPLAY, **(data.get("display", {}) or {})}
        self.debug = data.get("debug", False)


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'GRConfig':
    path = path or config_path()
    if not path.exists():
        # An installed package has no project-level config directory.
        return GRConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GRConfig(data)

_config_cache = None

def get_config() -> 'GRConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next ``get_config()`` re-reads the file."""
    global _config_cache
    _config_cache = None
