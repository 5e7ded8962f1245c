"""Domain models for derived ledger figures."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.accounts import Account
from src.domain.models.transactions import Transaction


@dataclass(frozen=True)
class AccountSummary:
    """Account together with its derived current balance."""

    account: Account
    balance: Decimal

    @property
    def id(self) -> int | None:
        return self.account.id

    @property
    def name(self) -> str:
        return self.account.name

    @property
    def currency_code(self) -> str:
        return self.account.currency_code


@dataclass(frozen=True)
class AccountDetail:
    """Account summary with its most recent transactions."""

    summary: AccountSummary
    transactions: list[Transaction]


@dataclass(frozen=True)
class CategoryTotal:
    """Confirmed expense total for one category."""

    category_id: int
    category_name: str
    total: Decimal


@dataclass(frozen=True)
class LedgerSummary:
    """Period totals for an owner.

    Attributes:
        owner_id: Owner the figures belong to.
        start_date: First day of the period, inclusive.
        end_date: Last day of the period, inclusive.
        total_income: Sum of confirmed incomes.
        total_expense: Sum of confirmed expenses.
        top_categories: Expense totals by category, largest first.
    """

    owner_id: int
    start_date: date
    end_date: date
    total_income: Decimal
    total_expense: Decimal
    top_categories: list[CategoryTotal]

    @property
    def net(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


__all__ = [
    "AccountSummary",
    "AccountDetail",
    "CategoryTotal",
    "LedgerSummary",
]
