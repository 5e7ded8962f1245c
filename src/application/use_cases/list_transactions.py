"""Use case listing an owner's transactions for stable pagination."""

from datetime import date

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.domain.constants import DEFAULT_TRANSACTION_LIMIT, MAX_TRANSACTION_LIMIT
from src.domain.models import Transaction
from src.domain.services.summary import validate_range
from src.infrastructure.logging.logger import get_app_logger


def resolve_page_size(limit: int | None) -> int:
    """Default missing or non-positive limits and cap large ones."""
    if limit is None or limit <= 0:
        return DEFAULT_TRANSACTION_LIMIT
    return min(limit, MAX_TRANSACTION_LIMIT)


class ListTransactionsUseCase:
    """List transactions by operation date desc, then id desc."""

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
        start_date: date | None = None,
        end_date: date | None = None,
        account_id: int | None = None,
        limit: int | None = None,
    ) -> list[Transaction]:
        """Return a page of the owner's transactions.

        Args:
            owner_id: Acting owner.
            start_date: Optional first day; requires end_date.
            end_date: Optional last day; requires start_date.
            account_id: Restrict to movements of one account.
            limit: Page size, default 20, capped at 200.

        Raises:
            InvalidRangeError: Only one bound given, or start after end.
            NotFoundError: Unknown owner or account.
        """
        if start_date is not None or end_date is not None:
            validate_range(start_date, end_date)
        self._guard.require_owner(owner_id)
        if account_id is not None:
            self._guard.require_account(owner_id, account_id)

        page_size = resolve_page_size(limit)
        rows = self._transactions.list_recent(
            owner_id,
            start_date=start_date,
            end_date=end_date,
            account_id=account_id,
            limit=page_size,
        )
        self._logger.info(
            f"Listed {len(rows)} transactions for owner={owner_id} "
            f"account={account_id} start={start_date} end={end_date}"
        )
        return rows


__all__ = ["ListTransactionsUseCase", "resolve_page_size"]
