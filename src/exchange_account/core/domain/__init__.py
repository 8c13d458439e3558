"""
Domain models and value objects.

Contains the exchange account Identifier and the Settings model built around it.
"""

from exchange_account.core.domain.identifier import (
    ACCOUNT_DELIMITER,
    ACCOUNT_NUMBER_MAX,
    DEFAULT_IDENTIFIER,
    FIELD_ACCOUNT_NUMBER,
    FIELD_EXCHANGE_ID,
    IDENTIFIER_FIELDS,
    Identifier,
)
from exchange_account.core.domain.settings import Settings

__all__ = [
    # Identifier module
    "ACCOUNT_DELIMITER",
    "ACCOUNT_NUMBER_MAX",
    "DEFAULT_IDENTIFIER",
    "FIELD_ACCOUNT_NUMBER",
    "FIELD_EXCHANGE_ID",
    "IDENTIFIER_FIELDS",
    "Identifier",
    # Settings model
    "Settings",
]
