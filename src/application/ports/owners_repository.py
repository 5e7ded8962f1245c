"""Ports for owners and reference currencies."""

from typing import Protocol

from src.domain.models.owners import Currency, Owner


class OwnersRepositoryPort(Protocol):
    """Port exposing owner records."""

    def add(self, owner: Owner) -> Owner:
        """Persist a new owner and return it with its id."""

    def get(self, owner_id: int) -> Owner | None:
        """Return the owner or None."""

    def get_by_email(self, email: str) -> Owner | None:
        """Return the owner registered with the normalized email."""

    def save(self, owner: Owner) -> Owner:
        """Persist changes to an existing owner."""


class CurrenciesRepositoryPort(Protocol):
    """Port exposing currency reference data."""

    def add(self, currency: Currency) -> Currency:
        """Persist a new currency."""

    def get(self, code: str) -> Currency | None:
        """Return the currency for a code or None."""

    def list_all(self) -> list[Currency]:
        """Return every currency ordered by code."""


__all__ = ["OwnersRepositoryPort", "CurrenciesRepositoryPort"]
