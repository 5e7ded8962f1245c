"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .catalog_repository import CategoriesRepositoryPort, TagsRepositoryPort
from .database import DatabaseEnginePort
from .identity import IdentityPort
from .owners_repository import CurrenciesRepositoryPort, OwnersRepositoryPort
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "CategoriesRepositoryPort",
    "TagsRepositoryPort",
    "DatabaseEnginePort",
    "IdentityPort",
    "CurrenciesRepositoryPort",
    "OwnersRepositoryPort",
    "TransactionsRepositoryPort",
]
