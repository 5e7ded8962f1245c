"""Configurable ledger rules."""

from dataclasses import dataclass

from src.domain.models.transactions import TransactionState

_CREATION_STATES = (TransactionState.PENDING, TransactionState.CONFIRMED)


@dataclass(frozen=True)
class LedgerPolicy:
    """Rules that are deployment choices rather than invariants.

    Attributes:
        create_state: State new transactions land in. PENDING supports an
            approval step; CONFIRMED makes creation count immediately.
    """

    create_state: TransactionState = TransactionState.CONFIRMED

    def __post_init__(self) -> None:
        if self.create_state not in _CREATION_STATES:
            raise ValueError(
                f"Transactions cannot be created as {self.create_state}"
            )


DEFAULT_POLICY = LedgerPolicy()


__all__ = ["LedgerPolicy", "DEFAULT_POLICY"]
