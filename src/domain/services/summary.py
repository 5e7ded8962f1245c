"""Summary aggregator for period totals and top expense categories."""

from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_TOP_CATEGORIES,
    MAX_TOP_CATEGORIES,
    ZERO,
)
from src.domain.errors import InvalidRangeError
from src.domain.models.catalog import Category
from src.domain.models.finance import CategoryTotal, LedgerSummary
from src.domain.models.transactions import Transaction
from src.utils.decimal_utils import coerce_decimal


def validate_range(start_date: date | None, end_date: date | None) -> None:
    """Require both bounds and ``start_date <= end_date``.

    Raises:
        InvalidRangeError: If a bound is missing or the range is reversed.
    """
    if start_date is None or end_date is None:
        raise InvalidRangeError("from and to are required")
    if start_date > end_date:
        raise InvalidRangeError("from must be <= to")


def clamp_top_n(top_n: int | None) -> int:
    """Default missing or non-positive values, cap large ones silently."""
    if top_n is None or top_n <= 0:
        return DEFAULT_TOP_CATEGORIES
    return min(top_n, MAX_TOP_CATEGORIES)


def compute_summary(
    owner_id: int,
    start_date: date,
    end_date: date,
    transactions: Iterable[Transaction],
    categories: Mapping[int, Category],
    top_n: int | None = None,
) -> LedgerSummary:
    """Compute income, expense, and top expense categories for a period.

    Args:
        owner_id: Owner whose transactions are summarized.
        start_date: First day of the period, inclusive.
        end_date: Last day of the period, inclusive.
        transactions: Candidate transactions; rows outside the period, of
            another owner, or not CONFIRMED are ignored.
        categories: Categories by id, used for display names.
        top_n: Number of categories to keep.

    Returns:
        LedgerSummary: Aggregated figures.
    """
    validate_range(start_date, end_date)
    limit = clamp_top_n(top_n)

    total_income = ZERO
    total_expense = ZERO
    by_category: dict[int, Decimal] = {}
    for transaction in transactions:
        if transaction.owner_id != owner_id or not transaction.is_confirmed:
            continue
        if not start_date <= transaction.operation_date <= end_date:
            continue
        amount = coerce_decimal(transaction.amount)
        if transaction.is_income:
            total_income += amount
        elif transaction.is_expense:
            total_expense += amount
            if transaction.category_id is not None:
                by_category[transaction.category_id] = (
                    by_category.get(transaction.category_id, ZERO) + amount
                )

    ranked = sorted(by_category.items(), key=lambda item: (-item[1], item[0]))
    top_categories = [
        CategoryTotal(
            category_id=category_id,
            category_name=_category_name(categories, category_id),
            total=total,
        )
        for category_id, total in ranked[:limit]
    ]
    return LedgerSummary(
        owner_id=owner_id,
        start_date=start_date,
        end_date=end_date,
        total_income=total_income,
        total_expense=total_expense,
        top_categories=top_categories,
    )


def _category_name(categories: Mapping[int, Category], category_id: int) -> str:
    category = categories.get(category_id)
    return category.name if category is not None else f"#{category_id}"


__all__ = ["validate_range", "clamp_top_n", "compute_summary"]
