"""Ошибки разбора Identifier.

Каждая ошибка парсера — подкласс IdentifierParseError (ValueError).
Парсер либо возвращает валидный Identifier, либо выбрасывает ровно одну из них.
"""

from typing import Sequence


class IdentifierParseError(ValueError):
    """Базовая ошибка разбора Identifier."""
    pass


class FormatError(IdentifierParseError):
    """Текст не соответствует ожидаемой форме для активного режима."""
    pass


class NumericRangeError(IdentifierParseError):
    """Числовая часть не парсится как беззнаковое целое или выходит за диапазон."""
    pass


class MissingFieldError(IdentifierParseError):
    """Обязательное поле отсутствует во входной записи."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"missing field `{field}`")


class DuplicateFieldError(IdentifierParseError):
    """Поле передано более одного раза."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"duplicate field `{field}`")


class UnknownFieldError(IdentifierParseError):
    """Поле вне набора распознаваемых ключей."""

    def __init__(self, field: str, expected: Sequence[str]):
        self.field = field
        self.expected = tuple(expected)
        expected_str = " or ".join(f"`{name}`" for name in self.expected)
        super().__init__(f"unknown field `{field}`, expected {expected_str}")
