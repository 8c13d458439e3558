"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
"""

import pytest
from jsonschema import ValidationError

from exchange_account.core.contracts import (
    SchemaLoader,
    SettingsValidator,
    validate_settings,
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_load_settings_schema(self):
        schema = SchemaLoader().load_schema("settings")
        assert schema["title"] == "Settings"
        assert set(schema["required"]) == {"test", "exchange_id"}

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("settings") is loader.load_schema("settings")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("market_state")

    def test_missing_schema_dir(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# SETTINGS CONTRACT
# =============================================================================


class TestSettingsContract:
    """Тесты settings контракта."""

    @pytest.mark.parametrize(
        "data",
        [
            {"test": 1, "exchange_id": "binance1"},
            {"test": 1, "exchange_id": {"exchange_id": "binance1"}},
            {"test": 1, "exchange_id": {"exchange_id": "binance", "account_number": 1}},
            {"test": -4, "exchange_id": "binance#1", "extra": "ignored"},
        ],
    )
    def test_valid(self, data):
        validate_settings(data)
        SettingsValidator().validate(data)

    def test_missing_required(self):
        with pytest.raises(ValidationError, match="'test' is a required property"):
            validate_settings({"exchange_id": "binance1"})

    @pytest.mark.parametrize(
        "data",
        [
            {"test": "1", "exchange_id": "binance1"},
            {"test": 1, "exchange_id": 1},
            {"test": 1, "exchange_id": ["binance", 1]},
        ],
    )
    def test_wrong_types(self, data):
        with pytest.raises(ValidationError, match="is not of type"):
            SettingsValidator().validate(data)
