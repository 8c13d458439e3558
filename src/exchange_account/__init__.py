"""
exchange_account — составной идентификатор аккаунта на бирже из конфигурации.
"""

from exchange_account.core.domain import DEFAULT_IDENTIFIER, Identifier, Settings
from exchange_account.parser import IdentifierMode, IdentifierParser

__all__ = [
    "DEFAULT_IDENTIFIER",
    "Identifier",
    "IdentifierMode",
    "IdentifierParser",
    "Settings",
]
