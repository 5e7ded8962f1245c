"""Tests for the account use cases."""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.manage_accounts import (
    CreateAccountUseCase,
    GetAccountBalanceUseCase,
    GetAccountDetailUseCase,
    ListAccountsUseCase,
    UpdateAccountUseCase,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.domain.errors import (
    DuplicateNameError,
    InvalidInputError,
    NotFoundError,
)
from src.domain.models import (
    Account,
    AccountPatch,
    AccountType,
    Currency,
    Owner,
    Transaction,
    TransactionState,
    TransactionType,
)

WALLET = Account(
    id=10,
    owner_id=1,
    name="Wallet",
    account_type=AccountType.CASH,
    currency_code="ARS",
    initial_balance=Decimal("20000"),
)


def _ports(owner: Owner | None = None) -> SimpleNamespace:
    ports = SimpleNamespace(
        owners=MagicMock(),
        accounts=MagicMock(),
        categories=MagicMock(),
        tags=MagicMock(),
        transactions=MagicMock(),
        currencies=MagicMock(),
        logger=MagicMock(),
    )
    ports.owners.get.return_value = owner or Owner(
        id=1, name="Ana", email="ana@example.com"
    )
    ports.accounts.exists_name.return_value = False
    ports.accounts.add.side_effect = lambda account: replace(account, id=10)
    ports.accounts.save.side_effect = lambda account: account
    ports.accounts.get.return_value = WALLET
    ports.currencies.get.side_effect = lambda code: (
        Currency(code=code, name=code, symbol=code)
        if code in {"ARS", "USD"}
        else None
    )
    ports.guard = OwnershipGuard(
        ports.owners,
        ports.accounts,
        ports.categories,
        ports.tags,
        ports.transactions,
    )
    return ports


def _create_use_case(ports: SimpleNamespace) -> CreateAccountUseCase:
    return CreateAccountUseCase(
        ports.guard, ports.accounts, ports.currencies, logger=ports.logger
    )


def test_create_account_uses_owner_default_currency() -> None:
    ports = _ports(
        Owner(
            id=1,
            name="Ana",
            email="ana@example.com",
            default_currency_code="USD",
        )
    )

    account = _create_use_case(ports).execute(1, " Savings ", "bank")

    assert account.id == 10
    assert account.name == "Savings"
    assert account.account_type is AccountType.BANK
    assert account.currency_code == "USD"
    assert account.initial_balance == Decimal("0")


def test_create_account_falls_back_to_ars() -> None:
    ports = _ports()

    account = _create_use_case(ports).execute(
        1, "Wallet", AccountType.CASH, initial_balance="-150.50"
    )

    assert account.currency_code == "ARS"
    assert account.initial_balance == Decimal("-150.50")


def test_create_account_rejects_unknown_currency() -> None:
    ports = _ports()

    with pytest.raises(NotFoundError):
        _create_use_case(ports).execute(1, "Euro cash", "CASH", "EUR")
    ports.accounts.add.assert_not_called()


def test_create_account_rejects_duplicate_name() -> None:
    ports = _ports()
    ports.accounts.exists_name.return_value = True

    with pytest.raises(DuplicateNameError):
        _create_use_case(ports).execute(1, "Wallet", "CASH")
    ports.accounts.exists_name.assert_called_once_with(1, "Wallet")


def test_create_account_rejects_unknown_type() -> None:
    with pytest.raises(InvalidInputError):
        _create_use_case(_ports()).execute(1, "Wallet", "CRYPTO")


def test_update_account_deactivates_and_renames() -> None:
    ports = _ports()
    use_case = UpdateAccountUseCase(
        ports.guard, ports.accounts, ports.currencies, logger=ports.logger
    )

    result = use_case.execute(
        1, 10, AccountPatch(name="Pocket", active=False)
    )

    assert result.name == "Pocket"
    assert result.active is False
    assert result.initial_balance == WALLET.initial_balance
    ports.accounts.exists_name.assert_called_once_with(
        1, "Pocket", exclude_id=10
    )


def test_update_account_without_changes_does_not_write() -> None:
    ports = _ports()
    use_case = UpdateAccountUseCase(
        ports.guard, ports.accounts, ports.currencies, logger=ports.logger
    )

    assert use_case.execute(1, 10, AccountPatch(name="Wallet")) is WALLET
    ports.accounts.save.assert_not_called()


def _movement(tx_id: int, amount: str, state: TransactionState) -> Transaction:
    return Transaction(
        id=tx_id,
        owner_id=1,
        transaction_type=TransactionType.EXPENSE,
        state=state,
        amount=Decimal(amount),
        operation_date=date(2025, 11, 1),
        recorded_at=datetime(2025, 11, 1, 10, 0),
        source_account_id=10,
        category_id=7,
    )


def test_balance_ignores_pending_expense() -> None:
    ports = _ports()
    ports.transactions.fetch_for_account.return_value = [
        _movement(1, "500", TransactionState.CONFIRMED),
        _movement(2, "2000", TransactionState.PENDING),
    ]
    use_case = GetAccountBalanceUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    assert use_case.execute(1, 10) == Decimal("19500")


def test_balance_of_foreign_account_is_not_found() -> None:
    ports = _ports()
    ports.accounts.get.return_value = replace(WALLET, owner_id=2)
    use_case = GetAccountBalanceUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    with pytest.raises(NotFoundError):
        use_case.execute(1, 10)
    ports.transactions.fetch_for_account.assert_not_called()


def test_list_accounts_derives_every_balance() -> None:
    ports = _ports()
    bank = replace(WALLET, id=11, name="Bank", initial_balance=Decimal("5"))
    ports.accounts.list_by_owner.return_value = [bank, WALLET]
    ports.transactions.fetch_for_account.side_effect = lambda account_id: (
        [_movement(1, "500", TransactionState.CONFIRMED)]
        if account_id == 10
        else []
    )
    use_case = ListAccountsUseCase(
        ports.guard, ports.accounts, ports.transactions, logger=ports.logger
    )

    result = use_case.execute(1, active_only=True)

    ports.accounts.list_by_owner.assert_called_once_with(1, True)
    assert [(item.name, item.balance) for item in result] == [
        ("Bank", Decimal("5")),
        ("Wallet", Decimal("19500")),
    ]


def test_account_detail_lists_recent_movements() -> None:
    ports = _ports()
    recent = [_movement(3, "10", TransactionState.CONFIRMED)]
    ports.transactions.list_recent.return_value = recent
    ports.transactions.fetch_for_account.return_value = recent
    use_case = GetAccountDetailUseCase(
        ports.guard, ports.transactions, logger=ports.logger
    )

    detail = use_case.execute(1, 10, limit=500)

    assert detail.transactions == recent
    assert detail.summary.balance == Decimal("19990")
    kwargs = ports.transactions.list_recent.call_args.kwargs
    assert kwargs["account_id"] == 10
    assert kwargs["limit"] == 200
