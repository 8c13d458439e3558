"""Identifier Parser — разбор Identifier из значения конфигурации.

Три режима кодирования (IdentifierMode):
- PATTERN_SPLIT: одна строка '<буквы><цифры>', например 'binance1'
- DELIMITER_SPLIT: одна строка '<exchange_id>#<account_number>', например 'binance#1'
- STRUCTURED_FIELDS: запись с ключами exchange_id и account_number

Текстовые режимы принимают также обёртку {exchange_id: '<текст>'} — именно
так значение приходит из таблицы [exchange_id] в config.toml.

Гарантии:
- Парсер — чистая функция входа, без состояния и без повторов
- Результат — полностью валидный Identifier либо ровно одна IdentifierParseError
"""

import logging
import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Dict, Final, Iterator, Optional, Tuple

from exchange_account.core.domain.identifier import (
    ACCOUNT_DELIMITER,
    ACCOUNT_NUMBER_MAX,
    FIELD_ACCOUNT_NUMBER,
    FIELD_EXCHANGE_ID,
    IDENTIFIER_FIELDS,
    Identifier,
)
from exchange_account.parser.errors import (
    DuplicateFieldError,
    FormatError,
    MissingFieldError,
    NumericRangeError,
    UnknownFieldError,
)

logger = logging.getLogger(__name__)


class IdentifierMode(str, Enum):
    """Режим кодирования Identifier во входном значении."""

    PATTERN_SPLIT = "pattern_split"
    DELIMITER_SPLIT = "delimiter_split"
    STRUCTURED_FIELDS = "structured_fields"


# Лимит account_number по режимам (None — без верхней границы)
ACCOUNT_NUMBER_LIMITS: Final[Dict[IdentifierMode, Optional[int]]] = {
    IdentifierMode.PATTERN_SPLIT: ACCOUNT_NUMBER_MAX,
    IdentifierMode.DELIMITER_SPLIT: ACCOUNT_NUMBER_MAX,
    IdentifierMode.STRUCTURED_FIELDS: None,
}

# Применяются только через fullmatch
_PATTERN_SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"([A-Za-z]+)([0-9]+)")
_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

_MISSING: Final[object] = object()


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _iter_pairs(raw: Any) -> Iterator[Tuple[Any, Any]]:
    """
    Поток пар (ключ, значение) из mapping или итерируемого набора пар.

    Mapping не может содержать повторов ключа, поэтому для проверки
    DuplicateFieldError вход можно передать как список пар.
    """
    if isinstance(raw, Mapping):
        yield from raw.items()
        return

    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        raise FormatError(
            f"Invalid format: expected a record with fields {list(IDENTIFIER_FIELDS)}, "
            f"got {type(raw).__name__}"
        )

    for item in raw:
        if not isinstance(item, tuple) or len(item) != 2:
            raise FormatError(f"Invalid format: expected (key, value) pair, got {item!r}")
        yield item


def _parse_account_number(text: str, limit: Optional[int]) -> int:
    """
    Разбор текстового account_number.

    Args:
        text: Строка ASCII-цифр
        limit: Верхняя граница (включительно) или None

    Returns:
        account_number

    Raises:
        NumericRangeError: Не цифры или выход за limit
    """
    if not _DIGITS_RE.fullmatch(text):
        raise NumericRangeError(f"Can't parse exchange account number: {text!r} is not an unsigned integer")

    # Длина проверяется до int(): строки длиннее sys.get_int_max_str_digits() не конвертируются
    if limit is not None and len(text.lstrip("0")) > len(str(limit)):
        raise NumericRangeError(f"Can't parse exchange account number: value exceeds maximum {limit}")

    try:
        value = int(text.lstrip("0") or "0")
    except ValueError as exc:
        raise NumericRangeError(
            f"Can't parse exchange account number: {len(text)}-digit value is too long"
        ) from exc

    if limit is not None and value > limit:
        raise NumericRangeError(
            f"Can't parse exchange account number: {value} exceeds maximum {limit}"
        )
    return value


def _coerce_account_number(value: Any, limit: Optional[int]) -> int:
    """account_number из structured-fields записи: int или строка цифр."""
    # bool — подкласс int, но номером аккаунта не является
    if isinstance(value, bool):
        raise NumericRangeError(f"Can't parse exchange account number: {value!r}")

    if isinstance(value, int):
        if value < 0:
            raise NumericRangeError(f"Can't parse exchange account number: {value} is negative")
        if limit is not None and value > limit:
            raise NumericRangeError(
                f"Can't parse exchange account number: value exceeds maximum {limit}"
            )
        return value

    if isinstance(value, str):
        return _parse_account_number(value, limit)

    raise NumericRangeError(
        f"Can't parse exchange account number: expected integer, got {type(value).__name__}"
    )


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise FormatError(f"Invalid format: `{field}` must be a string, got {type(value).__name__}")
    return value


def _unwrap_text(raw: Any) -> str:
    """
    Текст идентификатора из строки или обёртки {exchange_id: '<текст>'}.

    Raises:
        DuplicateFieldError: exchange_id встречается повторно
        UnknownFieldError: ключ, отличный от exchange_id
        MissingFieldError: exchange_id отсутствует
        FormatError: значение не строка
    """
    if isinstance(raw, str):
        return raw

    whole_field: Any = _MISSING
    for key, value in _iter_pairs(raw):
        if key != FIELD_EXCHANGE_ID:
            raise UnknownFieldError(str(key), (FIELD_EXCHANGE_ID,))
        if whole_field is not _MISSING:
            raise DuplicateFieldError(FIELD_EXCHANGE_ID)
        whole_field = value

    if whole_field is _MISSING:
        raise MissingFieldError(FIELD_EXCHANGE_ID)

    return _require_text(whole_field, FIELD_EXCHANGE_ID)


# =============================================================================
# РЕЖИМЫ РАЗБОРА
# =============================================================================


def parse_pattern_split(raw: Any, limit: Optional[int] = ACCOUNT_NUMBER_MAX) -> Identifier:
    """
    Pattern-split: '<буквы><цифры>' целиком, например 'binance1'.

    Args:
        raw: Строка или обёртка {exchange_id: строка}
        limit: Верхняя граница account_number

    Returns:
        Identifier

    Raises:
        FormatError: Строка не соответствует ^[A-Za-z]+[0-9]+$
        NumericRangeError: Цифровая часть больше limit
    """
    text = _unwrap_text(raw)

    match = _PATTERN_SPLIT_RE.fullmatch(text)
    if match is None:
        raise FormatError(f"Invalid format: {text!r} is not <letters><digits>")

    exchange_id, digits = match.groups()
    return Identifier(
        exchange_id=exchange_id,
        account_number=_parse_account_number(digits, limit),
    )


def parse_delimiter_split(raw: Any, limit: Optional[int] = ACCOUNT_NUMBER_MAX) -> Identifier:
    """
    Delimiter-split: '<exchange_id>#<account_number>', например 'binance#1'.

    exchange_id берётся как есть (без проверки алфавита), но не может быть пустым.
    Более одного '#' — FormatError (лишние части не отбрасываются молча).

    Raises:
        FormatError: Нет '#', больше одного '#', пустой exchange_id
        NumericRangeError: Вторая часть не число или больше limit
    """
    text = _unwrap_text(raw)

    parts = text.split(ACCOUNT_DELIMITER)
    if len(parts) < 2:
        raise FormatError(f"Invalid format: {text!r} has no {ACCOUNT_DELIMITER!r} delimiter")
    if len(parts) > 2:
        raise FormatError(
            f"Invalid format: {text!r} has more than one {ACCOUNT_DELIMITER!r} delimiter"
        )

    exchange_id, number = parts
    if not exchange_id:
        raise FormatError(f"Invalid format: {text!r} has empty exchange id")

    return Identifier(
        exchange_id=exchange_id,
        account_number=_parse_account_number(number, limit),
    )


def parse_structured_fields(raw: Any, limit: Optional[int] = None) -> Identifier:
    """
    Structured-fields: запись с ключами exchange_id и account_number.

    Ключи накапливаются по мере поступления; повтор ключа обнаруживается сразу,
    полнота проверяется после исчерпания потока.

    Args:
        raw: Mapping или итерируемый набор пар (ключ, значение)
        limit: Верхняя граница account_number (по умолчанию без ограничения)

    Raises:
        DuplicateFieldError: Ключ встретился повторно
        UnknownFieldError: Ключ вне (exchange_id, account_number)
        MissingFieldError: Ключ отсутствует
        FormatError: exchange_id не непустая строка
        NumericRangeError: account_number не беззнаковое целое
    """
    exchange_id: Any = _MISSING
    account_number: Any = _MISSING

    for key, value in _iter_pairs(raw):
        if key == FIELD_EXCHANGE_ID:
            if exchange_id is not _MISSING:
                raise DuplicateFieldError(FIELD_EXCHANGE_ID)
            exchange_id = value
        elif key == FIELD_ACCOUNT_NUMBER:
            if account_number is not _MISSING:
                raise DuplicateFieldError(FIELD_ACCOUNT_NUMBER)
            account_number = value
        else:
            raise UnknownFieldError(str(key), IDENTIFIER_FIELDS)

    if exchange_id is _MISSING:
        raise MissingFieldError(FIELD_EXCHANGE_ID)
    if account_number is _MISSING:
        raise MissingFieldError(FIELD_ACCOUNT_NUMBER)

    exchange_id = _require_text(exchange_id, FIELD_EXCHANGE_ID)
    if not exchange_id:
        raise FormatError("Invalid format: `exchange_id` must not be empty")

    return Identifier(
        exchange_id=exchange_id,
        account_number=_coerce_account_number(account_number, limit),
    )


_MODE_HANDLERS: Final = {
    IdentifierMode.PATTERN_SPLIT: parse_pattern_split,
    IdentifierMode.DELIMITER_SPLIT: parse_delimiter_split,
    IdentifierMode.STRUCTURED_FIELDS: parse_structured_fields,
}


# =============================================================================
# PARSER
# =============================================================================


class IdentifierParser:
    """Парсер Identifier с режимом, выбранным при создании.

    Stateless: один экземпляр можно использовать для любого числа входов,
    в том числе из разных потоков.
    """

    def __init__(self, mode: IdentifierMode = IdentifierMode.PATTERN_SPLIT):
        """
        Args:
            mode: режим кодирования (IdentifierMode или его строковое значение)
        """
        self.mode = IdentifierMode(mode)
        self.account_number_limit = ACCOUNT_NUMBER_LIMITS[self.mode]
        self._handler = _MODE_HANDLERS[self.mode]

    def parse(self, raw: Any) -> Identifier:
        """Разбор значения конфигурации в Identifier.

        Raises:
            IdentifierParseError: любая ошибка разбора (см. parser.errors)
        """
        identifier = self._handler(raw, self.account_number_limit)
        logger.debug("Parsed %s identifier: %r", self.mode.value, identifier)
        return identifier

    def __repr__(self) -> str:
        return f"IdentifierParser(mode={self.mode.value!r})"
