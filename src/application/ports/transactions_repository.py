"""Port for the transaction log."""

from datetime import date
from typing import Protocol

from src.domain.models.transactions import Transaction


class TransactionsRepositoryPort(Protocol):
    """Port exposing the append-mostly transaction log."""

    def add(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction with its tag links."""

    def get(self, owner_id: int, transaction_id: int) -> Transaction | None:
        """Return the owner's transaction or None."""

    def save(self, transaction: Transaction) -> Transaction:
        """Persist state, editable fields, and tag links."""

    def fetch_for_account(self, account_id: int) -> list[Transaction]:
        """Return every transaction where the account is source or destination."""

    def fetch_in_period(
        self,
        owner_id: int,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        """Return the owner's transactions with operation date in the period."""

    def list_recent(
        self,
        owner_id: int,
        *,
        start_date: date | None = None,
        end_date: date | None = None,
        account_id: int | None = None,
        limit: int,
    ) -> list[Transaction]:
        """Return transactions by operation date desc, then id desc."""


__all__ = ["TransactionsRepositoryPort"]
