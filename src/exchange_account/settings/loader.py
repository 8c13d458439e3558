"""Settings Loader — загрузка config.toml в модель Settings.

Порядок:
1. Чтение TOML (tomllib)
2. Проверка формы документа по JSON Schema контракту settings
3. Разбор exchange_id через IdentifierParser в выбранном режиме
4. Сборка immutable Settings

Ошибки разбора Identifier (IdentifierParseError) пробрасываются без изменений,
ошибки уровня файла оборачиваются в SettingsError.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Final, Mapping, Optional, Union

from jsonschema import ValidationError

from exchange_account.core.contracts import validate_settings
from exchange_account.core.domain import Settings
from exchange_account.parser import IdentifierMode, IdentifierParseError, IdentifierParser

logger = logging.getLogger(__name__)

SETTINGS_PATH_ENV: Final[str] = "EXCHANGE_ACCOUNT_CONFIG"
DEFAULT_SETTINGS_PATH: Final[Path] = Path("config.toml")


class SettingsError(Exception):
    """Файл настроек отсутствует, не является TOML или нарушает контракт."""
    pass


def resolve_settings_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Путь к config.toml: аргумент, затем $EXCHANGE_ACCOUNT_CONFIG, затем ./config.toml."""
    if path is not None:
        return Path(path).expanduser()

    env_value = os.getenv(SETTINGS_PATH_ENV)
    if env_value:
        return Path(env_value).expanduser()

    return DEFAULT_SETTINGS_PATH


def settings_from_mapping(
    data: Mapping[str, Any],
    mode: IdentifierMode = IdentifierMode.PATTERN_SPLIT,
) -> Settings:
    """
    Сборка Settings из уже декодированного документа.

    Args:
        data: Содержимое config.toml
        mode: Режим кодирования exchange_id

    Returns:
        Settings

    Raises:
        SettingsError: Документ нарушает settings контракт
        IdentifierParseError: exchange_id не разбирается в выбранном режиме
    """
    try:
        validate_settings(dict(data))
    except ValidationError as exc:
        raise SettingsError(f"Settings contract violation: {exc.message}") from exc

    parser = IdentifierParser(mode)
    try:
        identifier = parser.parse(data["exchange_id"])
    except IdentifierParseError as exc:
        logger.warning("Failed to parse exchange_id (%s): %s", parser.mode.value, exc)
        raise

    return Settings(test=data["test"], exchange_id=identifier)


def load_settings(
    path: Optional[Union[str, Path]] = None,
    mode: IdentifierMode = IdentifierMode.PATTERN_SPLIT,
) -> Settings:
    """
    Загрузка Settings из TOML-файла.

    Args:
        path: Путь к файлу (см. resolve_settings_path)
        mode: Режим кодирования exchange_id

    Raises:
        SettingsError: Файл не найден, не читается, не UTF-8, не TOML или нарушает контракт
        IdentifierParseError: exchange_id не разбирается в выбранном режиме
    """
    settings_path = resolve_settings_path(path)

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as exc:
        raise SettingsError(f"Settings file not found: {settings_path}") from exc
    except OSError as exc:
        raise SettingsError(f"Cannot read settings at {settings_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SettingsError(f"Settings at {settings_path} are not valid UTF-8: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise SettingsError(f"Failed to parse settings at {settings_path}: {exc}") from exc

    settings = settings_from_mapping(data, mode)
    logger.info("Loaded settings from %s: exchange_id=%s", settings_path, settings.exchange_id)
    return settings
