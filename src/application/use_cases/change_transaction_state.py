"""Use cases moving a transaction through its lifecycle."""

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.domain.models import Transaction
from src.domain.services.state_machine import cancel, confirm
from src.infrastructure.logging.logger import get_app_logger


class ConfirmTransactionUseCase:
    """Confirm a pending transaction so it counts in aggregations."""

    def __init__(
        self,
        guard: OwnershipGuard,
        transactions: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._transactions = transactions
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: int, transaction_id: int) -> Transaction:
        """Confirm; already confirmed transactions are returned as is.

        Raises:
            NotFoundError: Unknown or foreign transaction.
            IllegalTransitionError: Transaction is canceled.
        """
        self._guard.require_active_owner(owner_id)
        current = self._guard.require_transaction(owner_id, transaction_id)
        updated = confirm(current)
        if updated is current:
            return current
        saved = self._transactions.save(updated)
        self._logger.info(f"Confirmed transaction id={transaction_id}")
        return saved


class CancelTransactionUseCase:
    """Cancel a transaction; canceled is terminal."""

    def __init__(
        self,
        guard: OwnershipGuard,
        transactions: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._transactions = transactions
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: int, transaction_id: int) -> Transaction:
        self._guard.require_active_owner(owner_id)
        current = self._guard.require_transaction(owner_id, transaction_id)
        updated = cancel(current)
        if updated is current:
            return current
        saved = self._transactions.save(updated)
        self._logger.info(f"Canceled transaction id={transaction_id}")
        return saved


__all__ = ["ConfirmTransactionUseCase", "CancelTransactionUseCase"]
