"""End-to-end ledger scenarios through the composition root."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import (
    DuplicateNameError,
    IllegalTransitionError,
    ImmutableError,
    InvalidRangeError,
    NotFoundError,
)
from src.domain.models import TransactionPatch, TransactionState
from src.infrastructure.container import LedgerServices
from src.infrastructure.settings import LedgerSettings


@pytest.fixture
def ana(services):
    services.add_currency.execute("ARS", "Argentine Peso", "$")
    return services.register_owner.execute("Ana", "ana@example.com", "ARS")


@pytest.fixture
def pending_services(db_port):
    settings = LedgerSettings(
        db_url="sqlite://",
        create_state=TransactionState.PENDING,
    )
    return LedgerServices(db_port=db_port, settings=settings, logger=MagicMock())


def test_pending_expense_does_not_move_balance(services, pending_services, ana):
    wallet = services.create_account.execute(
        ana.id, "Wallet", "CASH", initial_balance="20000"
    )
    food = services.create_category.execute(ana.id, "Food")

    services.create_transaction.create_expense(ana.id, wallet.id, food.id, 500)
    pending = pending_services.create_transaction.create_expense(
        ana.id, wallet.id, food.id, 2000
    )

    assert pending.state is TransactionState.PENDING
    assert services.get_account_balance.execute(ana.id, wallet.id) == Decimal(
        "19500"
    )

    services.confirm_transaction.execute(ana.id, pending.id)
    assert services.get_account_balance.execute(ana.id, wallet.id) == Decimal(
        "17500"
    )


def test_confirmed_transfer_conserves_total(services, ana):
    wallet = services.create_account.execute(
        ana.id, "Wallet", "CASH", initial_balance="1000"
    )
    bank = services.create_account.execute(
        ana.id, "Bank", "BANK", initial_balance="250.50"
    )

    services.create_transaction.create_transfer(ana.id, wallet.id, bank.id, "400.25")

    balances = {
        item.name: item.balance
        for item in services.list_accounts.execute(ana.id)
    }
    assert balances == {
        "Bank": Decimal("650.75"),
        "Wallet": Decimal("599.75"),
    }
    assert sum(balances.values()) == Decimal("1250.50")


def test_category_names_are_unique_ignoring_case(services, ana):
    services.create_category.execute(ana.id, "Food")

    with pytest.raises(DuplicateNameError):
        services.create_category.execute(ana.id, "food")


def test_reversed_range_is_rejected(services, ana):
    start, end = date(2025, 12, 1), date(2025, 11, 1)

    with pytest.raises(InvalidRangeError):
        services.list_transactions.execute(ana.id, start, end)
    with pytest.raises(InvalidRangeError):
        services.get_summary.execute(ana.id, start, end)


def test_other_owner_cannot_reach_entities(services, ana):
    bob = services.register_owner.execute("Bob", "bob@example.com")
    wallet = services.create_account.execute(ana.id, "Wallet", "CASH")
    food = services.create_category.execute(ana.id, "Food")
    expense = services.create_transaction.create_expense(
        ana.id, wallet.id, food.id, 10
    )

    with pytest.raises(NotFoundError):
        services.get_account_balance.execute(bob.id, wallet.id)
    with pytest.raises(NotFoundError):
        services.cancel_transaction.execute(bob.id, expense.id)
    bob_wallet = services.create_account.execute(bob.id, "Wallet", "CASH")
    with pytest.raises(NotFoundError):
        services.create_transaction.create_expense(
            bob.id, bob_wallet.id, food.id, 10
        )


def test_summary_and_listing_for_a_month(services, ana):
    wallet = services.create_account.execute(ana.id, "Wallet", "CASH")
    salary = services.create_category.execute(ana.id, "Salary")
    food = services.create_category.execute(ana.id, "Food")
    rent = services.create_category.execute(ana.id, "Rent")
    trip = services.create_tag.execute(ana.id, "trip")
    create = services.create_transaction

    create.create_income(ana.id, wallet.id, salary.id, 3000, date(2025, 11, 1))
    create.create_expense(
        ana.id, wallet.id, food.id, 120, date(2025, 11, 3), tag_ids=[trip.id]
    )
    create.create_expense(ana.id, wallet.id, rent.id, 900, date(2025, 11, 5))
    canceled = create.create_expense(
        ana.id, wallet.id, food.id, 5000, date(2025, 11, 6)
    )
    services.cancel_transaction.execute(ana.id, canceled.id)
    create.create_expense(ana.id, wallet.id, food.id, 80, date(2025, 12, 2))

    summary = services.get_summary.execute(
        ana.id, date(2025, 11, 1), date(2025, 11, 30), top_n=1000
    )
    listed = services.list_transactions.execute(
        ana.id, date(2025, 11, 1), date(2025, 11, 30), limit=2
    )

    assert summary.total_income == Decimal("3000")
    assert summary.total_expense == Decimal("1020")
    assert summary.net == Decimal("1980")
    assert [c.category_name for c in summary.top_categories] == [
        "Rent",
        "Food",
    ]
    assert [tx.operation_date for tx in listed] == [
        date(2025, 11, 6),
        date(2025, 11, 5),
    ]


def test_canceled_transaction_is_terminal(services, ana):
    wallet = services.create_account.execute(ana.id, "Wallet", "CASH")
    food = services.create_category.execute(ana.id, "Food")
    expense = services.create_transaction.create_expense(
        ana.id, wallet.id, food.id, 10
    )

    once = services.cancel_transaction.execute(ana.id, expense.id)
    twice = services.cancel_transaction.execute(ana.id, expense.id)

    assert once == twice
    with pytest.raises(IllegalTransitionError):
        services.confirm_transaction.execute(ana.id, expense.id)
    with pytest.raises(ImmutableError):
        services.update_transaction.execute(
            ana.id, expense.id, TransactionPatch(description="late")
        )
