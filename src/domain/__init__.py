"""Domain package for ledger rules and core models."""

from .constants import DEFAULT_CURRENCY_CODE, DEFAULT_TOP_CATEGORIES
from .errors import LedgerError
from .models import (
    Account,
    AccountType,
    Category,
    Currency,
    LedgerSummary,
    Owner,
    Tag,
    Transaction,
    TransactionState,
    TransactionType,
)
from .policies import DEFAULT_POLICY, LedgerPolicy
from .services import (
    compute_balance,
    compute_summary,
    validate_candidate,
)

__all__ = [
    "Account",
    "AccountType",
    "Category",
    "Currency",
    "LedgerSummary",
    "Owner",
    "Tag",
    "Transaction",
    "TransactionState",
    "TransactionType",
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_TOP_CATEGORIES",
    "LedgerError",
    "LedgerPolicy",
    "DEFAULT_POLICY",
    "compute_balance",
    "compute_summary",
    "validate_candidate",
]
