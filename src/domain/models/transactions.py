"""Domain models for ledger transactions."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from src.domain.models.accounts import Account
from src.domain.models.catalog import Category, Tag


class TransactionType(str, Enum):
    """Direction of a money movement."""

    EXPENSE = "EXPENSE"
    INCOME = "INCOME"
    TRANSFER = "TRANSFER"


class TransactionState(str, Enum):
    """Lifecycle state; only CONFIRMED rows count in aggregations."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELED = "CANCELED"


@dataclass(frozen=True)
class Transaction:
    """Persisted movement of money owned by a single owner.

    Attributes:
        id: Storage identity, ``None`` before persistence.
        owner_id: Owner of the transaction and of every referenced entity.
        transaction_type: EXPENSE, INCOME or TRANSFER.
        state: Current lifecycle state.
        amount: Strictly positive amount.
        operation_date: Business date of the movement.
        recorded_at: Creation timestamp, never changed afterwards.
        description: Optional free text.
        source_account_id: Account money leaves (EXPENSE, TRANSFER).
        destination_account_id: Account money enters (INCOME, TRANSFER).
        category_id: Category for EXPENSE and INCOME.
        tag_ids: Tags attached to the transaction.
        external_reference: Optional identifier from an outside system.
    """

    id: int | None
    owner_id: int
    transaction_type: TransactionType
    state: TransactionState
    amount: Decimal
    operation_date: date
    recorded_at: datetime
    description: str | None = None
    source_account_id: int | None = None
    destination_account_id: int | None = None
    category_id: int | None = None
    tag_ids: frozenset[int] = field(default_factory=frozenset)
    external_reference: str | None = None

    @property
    def is_expense(self) -> bool:
        return self.transaction_type is TransactionType.EXPENSE

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    @property
    def is_transfer(self) -> bool:
        return self.transaction_type is TransactionType.TRANSFER

    @property
    def is_confirmed(self) -> bool:
        return self.state is TransactionState.CONFIRMED

    def touches(self, account_id: int) -> bool:
        """Return True when the account is the source or the destination."""
        return account_id in (
            self.source_account_id,
            self.destination_account_id,
        )


@dataclass(frozen=True)
class TransactionCandidate:
    """Transaction request whose references were already resolved.

    This is the input of the validation engine; nothing here has been
    persisted yet.
    """

    owner_id: int
    transaction_type: TransactionType | str
    amount: Decimal | None
    source_account: Account | None = None
    destination_account: Account | None = None
    category: Category | None = None
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True)
class TransactionPatch:
    """Editable fields of a transaction.

    ``None`` leaves a field untouched. ``tag_ids=()`` clears every tag.
    """

    description: str | None = None
    operation_date: date | None = None
    category_id: int | None = None
    tag_ids: tuple[int, ...] | list[int] | frozenset[int] | None = None


def new_transaction(
    candidate: TransactionCandidate,
    *,
    state: TransactionState,
    operation_date: date | None = None,
    description: str | None = None,
    external_reference: str | None = None,
    now: datetime | None = None,
) -> Transaction:
    """Build a transaction from a validated candidate.

    Creation defaults are applied here once: the recorded timestamp is the
    current time and the operation date falls back to its calendar day.

    Args:
        candidate: Candidate accepted by the validation engine.
        state: Initial state selected by the ledger policy.
        operation_date: Business date; defaults to today.
        description: Optional free text.
        external_reference: Optional outside identifier.
        now: Timestamp override.

    Returns:
        Transaction: Record without an id.
    """
    recorded_at = now or datetime.now()
    return Transaction(
        id=None,
        owner_id=candidate.owner_id,
        transaction_type=TransactionType(candidate.transaction_type),
        state=state,
        amount=candidate.amount,
        operation_date=operation_date or recorded_at.date(),
        recorded_at=recorded_at,
        description=description,
        source_account_id=_id_of(candidate.source_account),
        destination_account_id=_id_of(candidate.destination_account),
        category_id=_id_of(candidate.category),
        tag_ids=frozenset(tag.id for tag in candidate.tags),
        external_reference=external_reference,
    )


def _id_of(entity) -> int | None:
    return entity.id if entity is not None else None


__all__ = [
    "TransactionType",
    "TransactionState",
    "Transaction",
    "TransactionCandidate",
    "TransactionPatch",
    "new_transaction",
]
