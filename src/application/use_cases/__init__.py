"""Application use cases package."""

from .ownership_guard import OwnershipGuard
from .manage_owners import (
    AddCurrencyUseCase,
    ListCurrenciesUseCase,
    RegisterOwnerUseCase,
    SetOwnerActiveUseCase,
)
from .manage_accounts import (
    CreateAccountUseCase,
    GetAccountBalanceUseCase,
    GetAccountDetailUseCase,
    ListAccountsUseCase,
    UpdateAccountUseCase,
)
from .manage_catalog import (
    CreateCategoryUseCase,
    CreateTagUseCase,
    ListCategoriesUseCase,
    ListTagsUseCase,
    UpdateCategoryUseCase,
    UpdateTagUseCase,
)
from .create_transaction import CreateTransactionUseCase
from .change_transaction_state import (
    CancelTransactionUseCase,
    ConfirmTransactionUseCase,
)
from .update_transaction import UpdateTransactionUseCase
from .list_transactions import ListTransactionsUseCase
from .get_summary import GetSummaryUseCase

__all__ = [
    "OwnershipGuard",
    "AddCurrencyUseCase",
    "ListCurrenciesUseCase",
    "RegisterOwnerUseCase",
    "SetOwnerActiveUseCase",
    "CreateAccountUseCase",
    "GetAccountBalanceUseCase",
    "GetAccountDetailUseCase",
    "ListAccountsUseCase",
    "UpdateAccountUseCase",
    "CreateCategoryUseCase",
    "CreateTagUseCase",
    "ListCategoriesUseCase",
    "ListTagsUseCase",
    "UpdateCategoryUseCase",
    "UpdateTagUseCase",
    "CreateTransactionUseCase",
    "CancelTransactionUseCase",
    "ConfirmTransactionUseCase",
    "UpdateTransactionUseCase",
    "ListTransactionsUseCase",
    "GetSummaryUseCase",
]
