"""Ledger validation engine.

Pure checks over already-resolved transaction candidates. Nothing here
performs I/O; callers resolve references through the ownership guard first.
"""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from src.domain.errors import (
    InactiveReferenceError,
    InvalidAmountError,
    InvalidStructureError,
    NotFoundError,
    SameAccountError,
    UnknownTypeError,
)
from src.domain.models.accounts import Account
from src.domain.models.catalog import Category, Tag
from src.domain.models.transactions import (
    Transaction,
    TransactionCandidate,
    TransactionType,
)


def parse_transaction_type(value: TransactionType | str | None) -> TransactionType:
    """Map a raw value to a TransactionType.

    Raises:
        UnknownTypeError: If the value is not a supported type.
    """
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType(str(value).strip().upper())
    except ValueError as exc:
        raise UnknownTypeError(f"Unknown transaction type: {value}") from exc


def parse_amount(value) -> Decimal:
    """Convert a raw amount to a positive Decimal.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.

    Raises:
        InvalidAmountError: If the value is missing, not numeric, or <= 0.
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmountError("Amount is required")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(f"Amount is not a number: {value}") from exc
    validate_amount(amount)
    return amount


def validate_amount(amount: Decimal | None) -> None:
    """Reject missing, non-finite, zero, and negative amounts."""
    if amount is None:
        raise InvalidAmountError("Amount is required")
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError("Amount must be positive")


def validate_candidate(candidate: TransactionCandidate) -> None:
    """Accept or reject a candidate transaction before persistence.

    Checks run in order: amount, ownership, active references, then the
    structural rules of the transaction type.

    Args:
        candidate: Transaction request with resolved references.

    Raises:
        InvalidAmountError: Amount missing or not positive.
        NotFoundError: A reference belongs to another owner.
        InactiveReferenceError: A referenced account or category is inactive.
        InvalidStructureError: Fields do not match the type.
        SameAccountError: Transfer between one account and itself.
        UnknownTypeError: Type is not EXPENSE, INCOME, or TRANSFER.
    """
    validate_amount(candidate.amount)
    _validate_owner(candidate)
    _validate_active(candidate)

    transaction_type = candidate.transaction_type
    if transaction_type == TransactionType.EXPENSE:
        _validate_expense(candidate)
    elif transaction_type == TransactionType.INCOME:
        _validate_income(candidate)
    elif transaction_type == TransactionType.TRANSFER:
        _validate_transfer(candidate)
    else:
        raise UnknownTypeError(f"Unknown transaction type: {transaction_type}")


def validate_edit(
    transaction: Transaction,
    category: Category | None = None,
    tags: Iterable[Tag] | None = None,
) -> None:
    """Check that an edit keeps the transaction structurally valid.

    Args:
        transaction: Transaction being edited.
        category: Newly assigned category, if the edit sets one.
        tags: Newly assigned tags, if the edit replaces them.
    """
    if category is not None:
        if transaction.is_transfer:
            raise InvalidStructureError(
                "category",
                "Transfer must NOT have a category",
            )
        if not category.active:
            raise InactiveReferenceError("Category is not active")
    if tags and transaction.is_transfer:
        raise InvalidStructureError("tags", "Transfer must NOT have tags")


def _validate_active(candidate: TransactionCandidate) -> None:
    for label, account in (
        ("Source account", candidate.source_account),
        ("Destination account", candidate.destination_account),
    ):
        if account is not None and not account.active:
            raise InactiveReferenceError(f"{label} is not active")
    if candidate.category is not None and not candidate.category.active:
        raise InactiveReferenceError("Category is not active")


def _validate_owner(candidate: TransactionCandidate) -> None:
    references = [
        candidate.source_account,
        candidate.destination_account,
        candidate.category,
        *candidate.tags,
    ]
    for reference in references:
        if reference is not None and reference.owner_id != candidate.owner_id:
            raise NotFoundError(
                f"{type(reference).__name__} not found: {reference.id}"
            )


def _validate_expense(candidate: TransactionCandidate) -> None:
    if candidate.source_account is None:
        raise InvalidStructureError(
            "source_account",
            "Expense must have a source account",
        )
    if candidate.destination_account is not None:
        raise InvalidStructureError(
            "destination_account",
            "Expense must NOT have a destination account",
        )
    if candidate.category is None:
        raise InvalidStructureError("category", "Expense must have a category")


def _validate_income(candidate: TransactionCandidate) -> None:
    if candidate.destination_account is None:
        raise InvalidStructureError(
            "destination_account",
            "Income must have a destination account",
        )
    if candidate.source_account is not None:
        raise InvalidStructureError(
            "source_account",
            "Income must NOT have a source account",
        )
    if candidate.category is None:
        raise InvalidStructureError("category", "Income must have a category")


def _validate_transfer(candidate: TransactionCandidate) -> None:
    if candidate.source_account is None:
        raise InvalidStructureError(
            "source_account",
            "Transfer must have a source account",
        )
    if candidate.destination_account is None:
        raise InvalidStructureError(
            "destination_account",
            "Transfer must have a destination account",
        )
    if _same_account(candidate.source_account, candidate.destination_account):
        raise SameAccountError(
            "Source and destination account must be different"
        )
    if candidate.category is not None:
        raise InvalidStructureError(
            "category",
            "Transfer must NOT have a category",
        )
    if candidate.tags:
        raise InvalidStructureError("tags", "Transfer must NOT have tags")


def _same_account(left: Account, right: Account) -> bool:
    if left.id is None or right.id is None:
        return left is right
    return left.id == right.id


__all__ = [
    "parse_transaction_type",
    "parse_amount",
    "validate_amount",
    "validate_candidate",
    "validate_edit",
]
