"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигурации.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SettingsValidator,
    validate_settings,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SettingsValidator",
    # Functions
    "validate_settings",
]
