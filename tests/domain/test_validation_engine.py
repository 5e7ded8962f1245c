"""Tests for the ledger validation engine."""

from decimal import Decimal

import pytest

from src.domain.errors import (
    InactiveReferenceError,
    InvalidAmountError,
    InvalidStructureError,
    NotFoundError,
    SameAccountError,
    UnknownTypeError,
)
from src.domain.models import (
    Account,
    AccountType,
    Category,
    Tag,
    TransactionCandidate,
    TransactionType,
)
from src.domain.services.validation import (
    parse_amount,
    parse_transaction_type,
    validate_candidate,
)


def _account(account_id: int, owner_id: int = 1, active: bool = True) -> Account:
    return Account(
        id=account_id,
        owner_id=owner_id,
        name=f"Account {account_id}",
        account_type=AccountType.BANK,
        currency_code="ARS",
        initial_balance=Decimal("0"),
        active=active,
    )


def _category(owner_id: int = 1, active: bool = True) -> Category:
    return Category(
        id=7,
        owner_id=owner_id,
        name="Food",
        description=None,
        color_hex="#64748B",
        active=active,
    )


def _candidate(**overrides) -> TransactionCandidate:
    values = {
        "owner_id": 1,
        "transaction_type": TransactionType.EXPENSE,
        "amount": Decimal("100"),
        "source_account": _account(10),
        "destination_account": None,
        "category": _category(),
        "tags": (),
    }
    values.update(overrides)
    return TransactionCandidate(**values)


def test_valid_expense_is_accepted() -> None:
    validate_candidate(_candidate())


def test_valid_income_is_accepted() -> None:
    validate_candidate(
        _candidate(
            transaction_type=TransactionType.INCOME,
            source_account=None,
            destination_account=_account(10),
        )
    )


def test_valid_transfer_is_accepted() -> None:
    validate_candidate(
        _candidate(
            transaction_type=TransactionType.TRANSFER,
            source_account=_account(10),
            destination_account=_account(11),
            category=None,
        )
    )


@pytest.mark.parametrize("amount", [None, Decimal("0"), Decimal("-5")])
def test_non_positive_amount_is_rejected(amount) -> None:
    with pytest.raises(InvalidAmountError):
        validate_candidate(_candidate(amount=amount))


def test_amount_is_checked_before_structure() -> None:
    """A bad amount wins over a missing source account."""
    with pytest.raises(InvalidAmountError):
        validate_candidate(_candidate(amount=Decimal("0"), source_account=None))


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"source_account": None}, "source_account"),
        ({"destination_account": _account(11)}, "destination_account"),
        ({"category": None}, "category"),
    ],
)
def test_expense_structure_rules(overrides, field) -> None:
    with pytest.raises(InvalidStructureError) as excinfo:
        validate_candidate(_candidate(**overrides))
    assert excinfo.value.field == field


@pytest.mark.parametrize(
    "source, destination, category, field",
    [
        (None, None, _category(), "destination_account"),
        (_account(10), _account(11), _category(), "source_account"),
        (None, _account(11), None, "category"),
    ],
)
def test_income_structure_rules(source, destination, category, field) -> None:
    candidate = _candidate(
        transaction_type=TransactionType.INCOME,
        source_account=source,
        destination_account=destination,
        category=category,
    )
    with pytest.raises(InvalidStructureError) as excinfo:
        validate_candidate(candidate)
    assert excinfo.value.field == field


def test_transfer_to_same_account_is_rejected() -> None:
    with pytest.raises(SameAccountError):
        validate_candidate(
            _candidate(
                transaction_type=TransactionType.TRANSFER,
                source_account=_account(10),
                destination_account=_account(10),
                category=None,
            )
        )


def test_transfer_with_category_is_rejected() -> None:
    with pytest.raises(InvalidStructureError) as excinfo:
        validate_candidate(
            _candidate(
                transaction_type=TransactionType.TRANSFER,
                source_account=_account(10),
                destination_account=_account(11),
            )
        )
    assert excinfo.value.field == "category"


def test_transfer_with_tags_is_rejected() -> None:
    with pytest.raises(InvalidStructureError) as excinfo:
        validate_candidate(
            _candidate(
                transaction_type=TransactionType.TRANSFER,
                source_account=_account(10),
                destination_account=_account(11),
                category=None,
                tags=(Tag(id=3, owner_id=1, name="trip"),),
            )
        )
    assert excinfo.value.field == "tags"


def test_inactive_source_account_is_rejected() -> None:
    with pytest.raises(InactiveReferenceError):
        validate_candidate(_candidate(source_account=_account(10, active=False)))


def test_inactive_category_is_rejected() -> None:
    with pytest.raises(InactiveReferenceError):
        validate_candidate(_candidate(category=_category(active=False)))


def test_foreign_reference_reports_not_found() -> None:
    with pytest.raises(NotFoundError):
        validate_candidate(_candidate(source_account=_account(10, owner_id=2)))


def test_foreign_inactive_account_reports_not_found() -> None:
    foreign = _account(10, owner_id=2, active=False)

    with pytest.raises(NotFoundError):
        validate_candidate(_candidate(source_account=foreign))


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(UnknownTypeError):
        validate_candidate(_candidate(transaction_type="LOAN"))


def test_parse_transaction_type_accepts_lowercase() -> None:
    assert parse_transaction_type(" expense ") is TransactionType.EXPENSE
    with pytest.raises(UnknownTypeError):
        parse_transaction_type(None)


def test_parse_amount_keeps_decimal_exactness() -> None:
    assert parse_amount(0.1) == Decimal("0.1")
    assert parse_amount("19500.25") == Decimal("19500.25")
    for raw in ("abc", True, None, "NaN", "-1"):
        with pytest.raises(InvalidAmountError):
            parse_amount(raw)
