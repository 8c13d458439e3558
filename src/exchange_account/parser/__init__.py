"""Identifier Parser — разбор составного идентификатора аккаунта из конфигурации.

Режимы:
- pattern_split ('binance1')
- delimiter_split ('binance#1')
- structured_fields ({exchange_id: 'binance', account_number: 1})
"""

from .errors import (
    DuplicateFieldError,
    FormatError,
    IdentifierParseError,
    MissingFieldError,
    NumericRangeError,
    UnknownFieldError,
)
from .identifier_parser import (
    ACCOUNT_NUMBER_LIMITS,
    IdentifierMode,
    IdentifierParser,
    parse_delimiter_split,
    parse_pattern_split,
    parse_structured_fields,
)

__all__ = [
    # Parser
    "ACCOUNT_NUMBER_LIMITS",
    "IdentifierMode",
    "IdentifierParser",
    "parse_delimiter_split",
    "parse_pattern_split",
    "parse_structured_fields",
    # Errors
    "IdentifierParseError",
    "FormatError",
    "NumericRangeError",
    "MissingFieldError",
    "DuplicateFieldError",
    "UnknownFieldError",
]
