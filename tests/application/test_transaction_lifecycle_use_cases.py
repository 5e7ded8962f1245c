"""Tests for confirming, canceling and editing transactions."""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.change_transaction_state import (
    CancelTransactionUseCase,
    ConfirmTransactionUseCase,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.application.use_cases.update_transaction import (
    UpdateTransactionUseCase,
)
from src.domain.errors import (
    IllegalTransitionError,
    ImmutableError,
    InactiveReferenceError,
    InvalidStructureError,
    NotFoundError,
)
from src.domain.models import (
    Category,
    Owner,
    Tag,
    Transaction,
    TransactionPatch,
    TransactionState,
    TransactionType,
)


def _transaction(
    state: TransactionState = TransactionState.PENDING,
    kind: TransactionType = TransactionType.EXPENSE,
) -> Transaction:
    transfer = kind is TransactionType.TRANSFER
    return Transaction(
        id=5,
        owner_id=1,
        transaction_type=kind,
        state=state,
        amount=Decimal("42"),
        operation_date=date(2025, 11, 2),
        recorded_at=datetime(2025, 11, 2, 8, 0),
        description="coffee",
        source_account_id=10,
        destination_account_id=11 if transfer else None,
        category_id=None if transfer else 7,
        tag_ids=frozenset({1}) if not transfer else frozenset(),
    )


def _ports(transaction: Transaction | None) -> SimpleNamespace:
    ports = SimpleNamespace(
        owners=MagicMock(),
        accounts=MagicMock(),
        categories=MagicMock(),
        tags=MagicMock(),
        transactions=MagicMock(),
        logger=MagicMock(),
    )
    ports.transactions.get.return_value = transaction
    ports.transactions.save.side_effect = lambda tx: tx
    ports.guard = OwnershipGuard(
        ports.owners,
        ports.accounts,
        ports.categories,
        ports.tags,
        ports.transactions,
    )
    return ports


def test_confirm_pending_persists_new_state() -> None:
    ports = _ports(_transaction())
    use_case = ConfirmTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    result = use_case.execute(1, 5)

    assert result.state is TransactionState.CONFIRMED
    ports.transactions.save.assert_called_once()


def test_confirm_confirmed_does_not_write() -> None:
    current = _transaction(TransactionState.CONFIRMED)
    ports = _ports(current)
    use_case = ConfirmTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    assert use_case.execute(1, 5) is current
    ports.transactions.save.assert_not_called()


def test_confirm_canceled_is_illegal() -> None:
    ports = _ports(_transaction(TransactionState.CANCELED))
    use_case = ConfirmTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    with pytest.raises(IllegalTransitionError):
        use_case.execute(1, 5)
    ports.transactions.save.assert_not_called()


def test_cancel_is_idempotent() -> None:
    ports = _ports(_transaction(TransactionState.CONFIRMED))
    use_case = CancelTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    canceled = use_case.execute(1, 5)
    ports.transactions.get.return_value = canceled
    again = use_case.execute(1, 5)

    assert again == canceled
    assert ports.transactions.save.call_count == 1


def test_unknown_transaction_is_not_found() -> None:
    ports = _ports(None)
    use_case = CancelTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    with pytest.raises(NotFoundError):
        use_case.execute(1, 5)


def test_update_replaces_category_and_tags() -> None:
    ports = _ports(_transaction())
    ports.categories.get.return_value = Category(
        id=8, owner_id=1, name="Bills", description=None, color_hex="#000000"
    )
    ports.tags.fetch_many.return_value = [Tag(id=2, owner_id=1, name="home")]
    use_case = UpdateTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    result = use_case.execute(
        1,
        5,
        TransactionPatch(
            category_id=8,
            tag_ids=[2],
            operation_date=date(2025, 11, 9),
        ),
    )

    assert result.category_id == 8
    assert result.tag_ids == frozenset({2})
    assert result.operation_date == date(2025, 11, 9)
    assert result.amount == Decimal("42")
    ports.transactions.save.assert_called_once()


def test_update_with_empty_tags_clears_them() -> None:
    ports = _ports(_transaction())
    use_case = UpdateTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    result = use_case.execute(1, 5, TransactionPatch(tag_ids=()))

    assert result.tag_ids == frozenset()
    ports.tags.fetch_many.assert_not_called()


def test_update_without_changes_does_not_write() -> None:
    current = _transaction()
    ports = _ports(current)
    use_case = UpdateTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    assert use_case.execute(1, 5, TransactionPatch()) is current
    ports.transactions.save.assert_not_called()


def test_update_canceled_transaction_is_immutable() -> None:
    ports = _ports(_transaction(TransactionState.CANCELED))
    use_case = UpdateTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    with pytest.raises(ImmutableError):
        use_case.execute(1, 5, TransactionPatch(description="late"))


def test_transfer_cannot_receive_a_category() -> None:
    ports = _ports(_transaction(kind=TransactionType.TRANSFER))
    ports.categories.get.return_value = Category(
        id=8, owner_id=1, name="Bills", description=None, color_hex="#000000"
    )
    use_case = UpdateTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    with pytest.raises(InvalidStructureError):
        use_case.execute(1, 5, TransactionPatch(category_id=8))
    ports.transactions.save.assert_not_called()


def test_inactive_category_cannot_be_assigned() -> None:
    ports = _ports(_transaction())
    ports.categories.get.return_value = replace(
        Category(
            id=8, owner_id=1, name="Old", description=None,
            color_hex="#000000",
        ),
        active=False,
    )
    use_case = UpdateTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    with pytest.raises(InactiveReferenceError):
        use_case.execute(1, 5, TransactionPatch(category_id=8))


def test_inactive_owner_cannot_cancel() -> None:
    ports = _ports(_transaction())
    ports.owners.get.return_value = Owner(
        id=1, name="Ana", email="ana@example.com", active=False
    )
    use_case = CancelTransactionUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    with pytest.raises(InactiveReferenceError):
        use_case.execute(1, 5)
    ports.transactions.save.assert_not_called()
