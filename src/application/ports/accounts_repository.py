"""Port for owner-scoped ledger accounts."""

from typing import Protocol

from src.domain.models.accounts import Account


class AccountsRepositoryPort(Protocol):
    """Port exposing read and write access to accounts.

    Every lookup is filtered by owner so a foreign id behaves like a
    missing one.
    """

    def add(self, account: Account) -> Account:
        """Persist a new account and return it with its id."""

    def get(self, owner_id: int, account_id: int) -> Account | None:
        """Return the owner's account or None."""

    def save(self, account: Account) -> Account:
        """Persist changes to an existing account."""

    def list_by_owner(
        self,
        owner_id: int,
        active_only: bool = False,
    ) -> list[Account]:
        """Return the owner's accounts ordered by name."""

    def exists_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Return True when the owner already has an account with this name."""


__all__ = ["AccountsRepositoryPort"]
