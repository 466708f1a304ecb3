import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "person_match.yml"
CONFIG_ENV_VAR = "PERSON_MATCH_CONFIG"


class PMConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.matching = data.get("matching", {}) or {}
        self.evaluation = data.get("evaluation", {}) or {}
        self.debug = bool(data.get("debug", False))


def _resolve_config_path() -> tuple[Path, bool]:
    """Return the config path and whether it was explicitly requested."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override), True
    return CONFIG_PATH, False


def load_config(path: Path | None = None) -> 'PMConfig':
    explicit = path is not None
    if path is None:
        path, explicit = _resolve_config_path()

    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Installed without the project tree: run on built-in defaults.
        return PMConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return PMConfig(data)


_config_cache = None


def get_config() -> 'PMConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
