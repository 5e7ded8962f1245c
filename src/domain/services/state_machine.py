"""Transaction lifecycle: PENDING -> CONFIRMED -> CANCELED."""

from dataclasses import replace

from src.domain.errors import IllegalTransitionError, ImmutableError, InvalidInputError
from src.domain.models.transactions import (
    Transaction,
    TransactionPatch,
    TransactionState,
)
from src.domain.policies.ledger_policy import LedgerPolicy


def initial_state(policy: LedgerPolicy) -> TransactionState:
    """Return the state a new transaction is created in."""
    return policy.create_state


def confirm(transaction: Transaction) -> Transaction:
    """Confirm a transaction.

    Confirming an already confirmed transaction returns it unchanged.

    Raises:
        IllegalTransitionError: If the transaction is canceled.
    """
    if transaction.state is TransactionState.CANCELED:
        raise IllegalTransitionError(
            "Canceled transaction cannot be confirmed"
        )
    if transaction.state is TransactionState.CONFIRMED:
        return transaction
    return replace(transaction, state=TransactionState.CONFIRMED)


def cancel(transaction: Transaction) -> Transaction:
    """Cancel a transaction; canceling twice returns it unchanged."""
    if transaction.state is TransactionState.CANCELED:
        return transaction
    return replace(transaction, state=TransactionState.CANCELED)


def ensure_editable(transaction: Transaction) -> None:
    """Raise ImmutableError for canceled transactions."""
    if transaction.state is TransactionState.CANCELED:
        raise ImmutableError("Canceled transactions cannot be edited")


def apply_edit(
    transaction: Transaction,
    patch: TransactionPatch,
) -> Transaction:
    """Return a copy of the transaction with the patch applied.

    Category and tag ids in the patch must already be resolved and checked
    by the caller; this function only enforces the lifecycle rule and the
    description format.

    Args:
        transaction: Transaction to edit.
        patch: Fields to change.

    Returns:
        Transaction: Edited copy.
    """
    ensure_editable(transaction)
    changes = {}
    if patch.description is not None:
        description = patch.description.strip()
        if not description:
            raise InvalidInputError("description cannot be blank")
        changes["description"] = description
    if patch.operation_date is not None:
        changes["operation_date"] = patch.operation_date
    if patch.category_id is not None:
        changes["category_id"] = patch.category_id
    if patch.tag_ids is not None:
        changes["tag_ids"] = frozenset(patch.tag_ids)
    if not changes:
        return transaction
    return replace(transaction, **changes)


__all__ = [
    "initial_state",
    "confirm",
    "cancel",
    "ensure_editable",
    "apply_edit",
]
