"""Use case computing period totals for an owner."""

from datetime import date

from src.application.ports.catalog_repository import CategoriesRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.domain.models import LedgerSummary
from src.domain.services.summary import compute_summary, validate_range
from src.infrastructure.logging.logger import get_app_logger


class GetSummaryUseCase:
    """Summarize confirmed incomes and expenses over a period."""

    def __init__(
        self,
        guard: OwnershipGuard,
        transactions: TransactionsRepositoryPort,
        categories: CategoriesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            guard: Ownership guard resolving the owner.
            transactions: Port reading the transaction log.
            categories: Port providing category names.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._guard = guard
        self._transactions = transactions
        self._categories = categories
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: int,
        start_date: date | None,
        end_date: date | None,
        top_n: int | None = None,
    ) -> LedgerSummary:
        """Return totals for ``[start_date, end_date]`` inclusive.

        The range is checked before any query runs.

        Raises:
            InvalidRangeError: Missing bound or start after end.
            NotFoundError: Unknown owner.
        """
        validate_range(start_date, end_date)
        self._guard.require_owner(owner_id)

        rows = self._transactions.fetch_in_period(owner_id, start_date, end_date)
        categories = {
            category.id: category
            for category in self._categories.list_by_owner(owner_id)
        }
        summary = compute_summary(
            owner_id,
            start_date,
            end_date,
            rows,
            categories,
            top_n,
        )
        self._logger.info(
            f"Summary computed for owner={owner_id}: "
            f"income={summary.total_income}, expense={summary.total_expense}, "
            f"rows={len(rows)}"
        )
        return summary


__all__ = ["GetSummaryUseCase"]
