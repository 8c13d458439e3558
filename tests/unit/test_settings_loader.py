"""Тесты для загрузки настроек из config.toml.

Coverage:
- все три режима кодирования exchange_id в TOML
- выбор пути: аргумент, переменная окружения, значение по умолчанию
- SettingsError для отсутствующего или нечитаемого файла, не-UTF-8, битого TOML и нарушения контракта
- проброс IdentifierParseError без обёртки
"""

from pathlib import Path

import pytest

from exchange_account.core.domain import Identifier, Settings
from exchange_account.parser import (
    FormatError,
    IdentifierMode,
    NumericRangeError,
    UnknownFieldError,
)
from exchange_account.settings import (
    DEFAULT_SETTINGS_PATH,
    SETTINGS_PATH_ENV,
    SettingsError,
    load_settings,
    resolve_settings_path,
    settings_from_mapping,
)

BINANCE_1 = Identifier(exchange_id="binance", account_number=1)


@pytest.fixture
def write_config(tmp_path: Path):
    """Фабрика config.toml во временном каталоге."""

    def _write(content: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =============================================================================
# LOAD SETTINGS
# =============================================================================


class TestLoadSettings:
    """Тесты load_settings."""

    def test_pattern_split_table(self, write_config):
        path = write_config('test = 1\n\n[exchange_id]\nexchange_id = "binance1"\n')
        settings = load_settings(path)
        assert settings == Settings(test=1, exchange_id=BINANCE_1)

    def test_pattern_split_plain_string(self, write_config):
        path = write_config('test = 1\nexchange_id = "binance1"\n')
        assert load_settings(path, IdentifierMode.PATTERN_SPLIT).exchange_id == BINANCE_1

    def test_delimiter_split(self, write_config):
        path = write_config('test = 1\nexchange_id = "binance#1"\n')
        assert load_settings(path, IdentifierMode.DELIMITER_SPLIT).exchange_id == BINANCE_1

    def test_structured_fields(self, write_config):
        path = write_config(
            'test = 1\n\n[exchange_id]\nexchange_id = "binance"\naccount_number = 1\n'
        )
        assert load_settings(path, IdentifierMode.STRUCTURED_FIELDS).exchange_id == BINANCE_1

    def test_structured_fields_unknown_key(self, write_config):
        path = write_config(
            'test = 1\n\n[exchange_id]\nexchange_id = "binance"\naccount_number = 1\nfoo = 2\n'
        )
        with pytest.raises(UnknownFieldError):
            load_settings(path, IdentifierMode.STRUCTURED_FIELDS)

    def test_parse_error_propagates(self, write_config):
        path = write_config('test = 1\nexchange_id = "binance999"\n')
        with pytest.raises(NumericRangeError):
            load_settings(path)

    def test_format_error_propagates(self, write_config):
        path = write_config('test = 1\nexchange_id = "binance"\n')
        with pytest.raises(FormatError):
            load_settings(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="not found"):
            load_settings(tmp_path / "absent.toml")

    def test_directory_path(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="Cannot read settings"):
            load_settings(tmp_path)

    def test_non_utf8_file(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_bytes(b"test = 1\n\xff\xfe = 2\n")
        with pytest.raises(SettingsError, match="not valid UTF-8"):
            load_settings(path)

    def test_invalid_toml(self, write_config):
        path = write_config("test = \n")
        with pytest.raises(SettingsError, match="Failed to parse settings"):
            load_settings(path)

    def test_contract_violation(self, write_config):
        path = write_config('exchange_id = "binance1"\n')
        with pytest.raises(SettingsError, match="contract violation"):
            load_settings(path)


# =============================================================================
# SETTINGS FROM MAPPING
# =============================================================================


class TestSettingsFromMapping:
    """Тесты settings_from_mapping (граница с уже декодированным документом)."""

    def test_valid_mapping(self):
        settings = settings_from_mapping({"test": 5, "exchange_id": "okx2"})
        assert settings.test == 5
        assert settings.exchange_id == Identifier(exchange_id="okx", account_number=2)

    def test_wrong_type_for_test(self):
        with pytest.raises(SettingsError):
            settings_from_mapping({"test": "one", "exchange_id": "binance1"})

    def test_wrong_type_for_exchange_id(self):
        with pytest.raises(SettingsError):
            settings_from_mapping({"test": 1, "exchange_id": 1})


# =============================================================================
# PATH RESOLUTION
# =============================================================================


class TestResolveSettingsPath:
    """Тесты выбора пути к config.toml."""

    def test_explicit_path_wins(self, monkeypatch):
        monkeypatch.setenv(SETTINGS_PATH_ENV, "/etc/other.toml")
        assert resolve_settings_path("custom.toml") == Path("custom.toml")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(SETTINGS_PATH_ENV, "/etc/exchange.toml")
        assert resolve_settings_path() == Path("/etc/exchange.toml")

    def test_default(self, monkeypatch):
        monkeypatch.delenv(SETTINGS_PATH_ENV, raising=False)
        assert resolve_settings_path() == DEFAULT_SETTINGS_PATH

    def test_env_used_by_load(self, monkeypatch, write_config):
        path = write_config('test = 3\nexchange_id = "binance1"\n')
        monkeypatch.setenv(SETTINGS_PATH_ENV, str(path))
        assert load_settings().test == 3
