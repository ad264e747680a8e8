"""Centralized settings loader for the application.

Infrastructure-level module: must not import from facades/, services/,
repositories/ or logging_config.py to avoid circular imports.
"""

import tomllib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path("settings.toml")

_cached_settings: dict[Path, dict] = {}


def _load_settings(settings_path: Path = SETTINGS_PATH) -> dict:
    """Load and cache settings from the TOML file."""
    settings_path = Path(settings_path)
    if settings_path in _cached_settings:
        return _cached_settings[settings_path]
    try:
        with open(settings_path, "rb") as f:
            settings = tomllib.load(f)
    except Exception as e:
        logger.error("Failed to load settings from %s: %s", settings_path, e)
        raise
    _cached_settings[settings_path] = settings
    return settings


def clear_settings_cache() -> None:
    """Forget cached settings so the next read goes back to disk."""
    _cached_settings.clear()


class SettingsService:
    """Read-only accessor for application settings.

    Settings are cached at module level after the first read.
    """

    def __init__(self, settings_path: str | Path = SETTINGS_PATH):
        self.settings = _load_settings(Path(settings_path))

    @property
    def settings_dict(self) -> dict:
        return self.settings

    @property
    def log_level(self) -> str:
        return self.settings.get("env", {}).get("log_level", "INFO")

    @property
    def region_name(self) -> str:
        return self.settings.get("region", {}).get("name", "Region")

    @property
    def data_file(self) -> str | None:
        return self.settings.get("region", {}).get("data_file")

    @property
    def altitude_ranges(self) -> list[str]:
        return list(self.settings.get("region", {}).get("altitude_ranges", []))
