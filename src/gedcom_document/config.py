import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_document.yml"
CONFIG_ENV_VAR = "GEDCOM_DOCUMENT_CONFIG"


class GPConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.parser = data.get("parser", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def strict(self) -> bool:
        return bool(self.parser.get("strict", False))

    @property
    def encoding(self) -> str:
        return str(self.parser.get("encoding", "utf-8-sig"))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'GPConfig':
    path = config_path()
    if not path.exists():
        # Installed without the project tree: run on defaults.
        return GPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GPConfig(data)

_config_cache = None

def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads it."""
    global _config_cache
    _config_cache = None
