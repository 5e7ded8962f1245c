"""Use case editing the mutable fields of a transaction."""

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.domain.models import Transaction, TransactionPatch
from src.domain.services.state_machine import apply_edit, ensure_editable
from src.domain.services.validation import validate_edit
from src.infrastructure.logging.logger import get_app_logger


class UpdateTransactionUseCase:
    """Edit description, operation date, category, or tags.

    Edits follow last-writer-wins; there is no version check.
    """

    def __init__(
        self,
        guard: OwnershipGuard,
        transactions: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._transactions = transactions
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: int,
        transaction_id: int,
        patch: TransactionPatch,
    ) -> Transaction:
        """Apply the patch to a transaction that is not canceled.

        Raises:
            NotFoundError: Unknown transaction, category, or tag.
            ImmutableError: Transaction is canceled.
            InvalidStructureError: Transfer given a category or tags.
            InactiveReferenceError: New category is inactive.
            InvalidInputError: Blank description.
        """
        self._guard.require_active_owner(owner_id)
        current = self._guard.require_transaction(owner_id, transaction_id)
        ensure_editable(current)

        category = self._guard.resolve_category(owner_id, patch.category_id)
        tags = (
            self._guard.resolve_tags(owner_id, patch.tag_ids)
            if patch.tag_ids is not None
            else None
        )
        validate_edit(current, category=category, tags=tags)

        resolved_patch = TransactionPatch(
            description=patch.description,
            operation_date=patch.operation_date,
            category_id=category.id if category is not None else None,
            tag_ids=tuple(tag.id for tag in tags) if tags is not None else None,
        )
        updated = apply_edit(current, resolved_patch)
        if updated is current:
            return current
        saved = self._transactions.save(updated)
        self._logger.info(
            f"Updated transaction id={transaction_id} owner={owner_id}"
        )
        return saved


__all__ = ["UpdateTransactionUseCase"]
