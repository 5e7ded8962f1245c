"""Domain models for ledger accounts."""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum


class AccountType(str, Enum):
    """Kind of place where money is held."""

    CASH = "CASH"
    BANK = "BANK"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Account:
    """Account exclusively owned by one owner.

    The current balance is never part of the record; it is derived from the
    initial balance and the confirmed transactions touching the account.
    """

    id: int | None
    owner_id: int
    name: str
    account_type: AccountType
    currency_code: str
    initial_balance: Decimal
    active: bool = True
    created_at: datetime | None = None

    def rename(self, name: str) -> "Account":
        return replace(self, name=name)

    def change_type(self, account_type: AccountType) -> "Account":
        return replace(self, account_type=account_type)

    def change_currency(self, currency_code: str) -> "Account":
        return replace(self, currency_code=currency_code)

    def deactivate(self) -> "Account":
        return replace(self, active=False)

    def activate(self) -> "Account":
        return replace(self, active=True)


@dataclass(frozen=True)
class AccountPatch:
    """Optional changes for an account; ``None`` leaves a field untouched."""

    name: str | None = None
    account_type: AccountType | str | None = None
    currency_code: str | None = None
    active: bool | None = None


def new_account(
    owner_id: int,
    name: str,
    account_type: AccountType,
    currency_code: str,
    initial_balance: Decimal,
    *,
    now: datetime | None = None,
) -> Account:
    """Build an active account ready to be persisted."""
    return Account(
        id=None,
        owner_id=owner_id,
        name=name,
        account_type=account_type,
        currency_code=currency_code,
        initial_balance=initial_balance,
        active=True,
        created_at=now or datetime.now(),
    )


__all__ = [
    "AccountType",
    "Account",
    "AccountPatch",
    "new_account",
]
