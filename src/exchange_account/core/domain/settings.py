"""
Settings — Модель настроек приложения

Immutable Pydantic модель, собираемая загрузчиком настроек
(src/exchange_account/settings) из TOML-файла.
"""

from pydantic import BaseModel, Field

from .identifier import Identifier


class Settings(BaseModel):
    """Настройки, прочитанные из config.toml."""

    test: int = Field(..., description="Произвольный целочисленный параметр")
    exchange_id: Identifier = Field(..., description="Идентификатор аккаунта на бирже")

    model_config = {"frozen": True}
