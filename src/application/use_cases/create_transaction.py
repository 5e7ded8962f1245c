"""Use case recording a new expense, income, or transfer."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.domain.models import (
    Transaction,
    TransactionCandidate,
    TransactionType,
    new_transaction,
)
from src.domain.policies.ledger_policy import DEFAULT_POLICY, LedgerPolicy
from src.domain.services.normalization import normalize_description
from src.domain.services.state_machine import initial_state
from src.domain.services.validation import (
    parse_amount,
    parse_transaction_type,
    validate_candidate,
)
from src.infrastructure.logging.logger import get_app_logger


class CreateTransactionUseCase:
    """Resolve, validate, and append a transaction to the ledger.

    The flow is: acting owner, ownership guard on every reference, the
    validation engine, then the factory with the state chosen by the
    ledger policy. Nothing is written when any step fails.
    """

    def __init__(
        self,
        guard: OwnershipGuard,
        transactions: TransactionsRepositoryPort,
        policy: LedgerPolicy = DEFAULT_POLICY,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            guard: Ownership guard resolving referenced entities.
            transactions: Port appending to the transaction log.
            policy: Ledger policy selecting the creation state.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._guard = guard
        self._transactions = transactions
        self._policy = policy
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: int,
        transaction_type: TransactionType | str,
        amount: Decimal | str | int | None,
        operation_date: date | None = None,
        description: str | None = None,
        source_account_id: int | None = None,
        destination_account_id: int | None = None,
        category_id: int | None = None,
        tag_ids: Iterable[int] | None = None,
        external_reference: str | None = None,
    ) -> Transaction:
        """Create a transaction of any type.

        Returns:
            Transaction: Persisted transaction with its id.

        Raises:
            NotFoundError: Unknown owner or foreign/missing reference.
            UnknownTypeError: Unsupported transaction type.
            InvalidAmountError: Amount missing or not positive.
            InactiveReferenceError: Inactive owner, account, or category.
            InvalidStructureError: Fields do not match the type.
            SameAccountError: Transfer to the same account.
        """
        self._guard.require_active_owner(owner_id)
        kind = parse_transaction_type(transaction_type)

        source = self._guard.resolve_account(owner_id, source_account_id)
        destination = self._guard.resolve_account(
            owner_id,
            destination_account_id,
        )
        category = self._guard.resolve_category(owner_id, category_id)
        tags = self._guard.resolve_tags(owner_id, tag_ids)

        try:
            candidate = TransactionCandidate(
                owner_id=owner_id,
                transaction_type=kind,
                amount=parse_amount(amount),
                source_account=source,
                destination_account=destination,
                category=category,
                tags=tags,
            )
            validate_candidate(candidate)
        except ValueError as exc:
            self._logger.warning(
                f"Rejected {kind.value} for owner={owner_id}: {exc}"
            )
            raise

        transaction = new_transaction(
            candidate,
            state=initial_state(self._policy),
            operation_date=operation_date,
            description=normalize_description(description),
            external_reference=external_reference,
        )
        saved = self._transactions.add(transaction)
        self._logger.info(
            f"Created {kind.value} id={saved.id} owner={owner_id} "
            f"amount={saved.amount} state={saved.state.value}"
        )
        return saved

    def create_expense(
        self,
        owner_id: int,
        source_account_id: int,
        category_id: int,
        amount: Decimal | str | int,
        operation_date: date | None = None,
        description: str | None = None,
        tag_ids: Iterable[int] | None = None,
    ) -> Transaction:
        return self.execute(
            owner_id,
            TransactionType.EXPENSE,
            amount,
            operation_date=operation_date,
            description=description,
            source_account_id=source_account_id,
            category_id=category_id,
            tag_ids=tag_ids,
        )

    def create_income(
        self,
        owner_id: int,
        destination_account_id: int,
        category_id: int,
        amount: Decimal | str | int,
        operation_date: date | None = None,
        description: str | None = None,
        tag_ids: Iterable[int] | None = None,
    ) -> Transaction:
        return self.execute(
            owner_id,
            TransactionType.INCOME,
            amount,
            operation_date=operation_date,
            description=description,
            destination_account_id=destination_account_id,
            category_id=category_id,
            tag_ids=tag_ids,
        )

    def create_transfer(
        self,
        owner_id: int,
        source_account_id: int,
        destination_account_id: int,
        amount: Decimal | str | int,
        operation_date: date | None = None,
        description: str | None = None,
    ) -> Transaction:
        return self.execute(
            owner_id,
            TransactionType.TRANSFER,
            amount,
            operation_date=operation_date,
            description=description,
            source_account_id=source_account_id,
            destination_account_id=destination_account_id,
        )


__all__ = ["CreateTransactionUseCase"]
