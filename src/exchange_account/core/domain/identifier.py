"""
Identifier — Составной идентификатор аккаунта на бирже

Пара (exchange_id, account_number):
- exchange_id: метка биржи / источника аккаунта (например, 'binance')
- account_number: небольшое беззнаковое число, различающее аккаунты одной биржи

Immutable Pydantic модель. Экземпляры создаются парсером
(src/exchange_account/parser) ровно один раз при загрузке конфигурации.
"""

from typing import Any, Dict, Final

from pydantic import BaseModel, Field


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальный account_number для текстовых режимов (беззнаковый 8-битный)
ACCOUNT_NUMBER_MAX: Final[int] = 255

# Разделитель для delimiter-split формата
ACCOUNT_DELIMITER: Final[str] = "#"

# Имена полей structured-fields формата (порядок важен для сообщений об ошибках)
FIELD_EXCHANGE_ID: Final[str] = "exchange_id"
FIELD_ACCOUNT_NUMBER: Final[str] = "account_number"
IDENTIFIER_FIELDS: Final[tuple[str, ...]] = (FIELD_EXCHANGE_ID, FIELD_ACCOUNT_NUMBER)


# =============================================================================
# IDENTIFIER MODEL
# =============================================================================


class Identifier(BaseModel):
    """
    Идентификатор аккаунта на бирже.

    Immutable модель (frozen=True): равенство и hash определяются обоими полями,
    поэтому Identifier можно использовать как ключ dict.
    """

    exchange_id: str = Field(..., min_length=1, description="Идентификатор биржи (например, 'binance')")
    account_number: int = Field(..., ge=0, description="Номер аккаунта на бирже")

    model_config = {"frozen": True}

    @classmethod
    def default(cls) -> "Identifier":
        """Идентификатор по умолчанию: test/0."""
        return DEFAULT_IDENTIFIER

    # -------------------------------------------------------------------------
    # Канонические текстовые формы
    # -------------------------------------------------------------------------

    def to_pattern_text(self) -> str:
        """
        Форма для pattern-split режима: буквы + цифры без разделителя.

        Returns:
            Строка вида 'binance1'
        """
        return f"{self.exchange_id}{self.account_number}"

    def to_delimited_text(self) -> str:
        """
        Форма для delimiter-split режима.

        Returns:
            Строка вида 'binance#1'
        """
        return f"{self.exchange_id}{ACCOUNT_DELIMITER}{self.account_number}"

    def to_fields(self) -> Dict[str, Any]:
        """Форма для structured-fields режима (dict с двумя ключами)."""
        return {
            FIELD_EXCHANGE_ID: self.exchange_id,
            FIELD_ACCOUNT_NUMBER: self.account_number,
        }

    def __str__(self) -> str:
        return self.to_delimited_text()


DEFAULT_IDENTIFIER: Final[Identifier] = Identifier(exchange_id="test", account_number=0)
