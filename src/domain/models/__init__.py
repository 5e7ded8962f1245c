"""Domain models package."""

from .accounts import Account, AccountPatch, AccountType, new_account
from .catalog import Category, CategoryPatch, Tag, TagPatch
from .finance import (
    AccountDetail,
    AccountSummary,
    CategoryTotal,
    LedgerSummary,
)
from .owners import Currency, Owner, Role, new_owner
from .transactions import (
    Transaction,
    TransactionCandidate,
    TransactionPatch,
    TransactionState,
    TransactionType,
    new_transaction,
)

__all__ = [
    "Account",
    "AccountPatch",
    "AccountType",
    "new_account",
    "Category",
    "CategoryPatch",
    "Tag",
    "TagPatch",
    "AccountDetail",
    "AccountSummary",
    "CategoryTotal",
    "LedgerSummary",
    "Currency",
    "Owner",
    "Role",
    "new_owner",
    "Transaction",
    "TransactionCandidate",
    "TransactionPatch",
    "TransactionState",
    "TransactionType",
    "new_transaction",
]
