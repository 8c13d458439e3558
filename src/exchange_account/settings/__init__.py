"""Загрузка настроек приложения из config.toml."""

from .loader import (
    DEFAULT_SETTINGS_PATH,
    SETTINGS_PATH_ENV,
    SettingsError,
    load_settings,
    resolve_settings_path,
    settings_from_mapping,
)

__all__ = [
    "DEFAULT_SETTINGS_PATH",
    "SETTINGS_PATH_ENV",
    "SettingsError",
    "load_settings",
    "resolve_settings_path",
    "settings_from_mapping",
]
