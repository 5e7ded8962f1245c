"""CLI adapter printing account balances and a period summary.

The acting owner is resolved from LEDGER_OWNER_EMAIL. The period defaults to
month to date and can be overridden with LEDGER_REPORT_START and
LEDGER_REPORT_END (ISO dates). LEDGER_REPORT_TOP sets how many expense
categories are listed.
"""

from datetime import date
import os

from src.domain.errors import LedgerError
from src.domain.services.balance import quantize_for_display
from src.infrastructure.container import build_ledger_services
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _parse_date(raw: str | None, default: date) -> date:
    """Parse an ISO date, falling back to the default when blank."""
    if raw is None or not raw.strip():
        return default
    return date.fromisoformat(raw.strip())


def _parse_top(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    return int(raw.strip())


def main() -> None:
    """Print balances and the period summary for the configured owner."""
    logger = get_app_logger()
    email = os.getenv("LEDGER_OWNER_EMAIL", "").strip()
    if not email:
        raise RuntimeError("Missing environment variable: LEDGER_OWNER_EMAIL")

    today = date.today()
    start_date = _parse_date(
        os.getenv("LEDGER_REPORT_START"),
        date(today.year, today.month, 1),
    )
    end_date = _parse_date(os.getenv("LEDGER_REPORT_END"), today)
    top_n = _parse_top(os.getenv("LEDGER_REPORT_TOP"))

    services = build_ledger_services()
    try:
        owner = services.identity.resolve_owner(email)
        accounts = services.list_accounts.execute(owner.id)
        summary = services.get_summary.execute(
            owner.id,
            start_date,
            end_date,
            top_n=top_n,
        )
    except LedgerError as exc:
        logger.error(f"Report failed ({exc.kind}): {exc}")
        raise

    get_usage_logger().info(
        f"Report owner_id={owner.id} period={start_date}..{end_date}"
    )

    currencies = {
        currency.code: currency
        for currency in services.list_currencies.execute()
    }
    print(f"Accounts of {owner.name}:")
    for item in accounts:
        balance = quantize_for_display(
            item.balance,
            currencies.get(item.currency_code),
        )
        print(f"  {item.name:<30} {balance:>15,} {item.currency_code}")

    print(f"Summary {summary.start_date} .. {summary.end_date}:")
    print(f"  Income:  {summary.total_income:,}")
    print(f"  Expense: {summary.total_expense:,}")
    print(f"  Net:     {summary.net:,}")
    if summary.top_categories:
        print("Top expense categories:")
        for position, item in enumerate(summary.top_categories, start=1):
            print(f"  {position}. {item.category_name}: {item.total:,}")


if __name__ == "__main__":  # pragma: no cover
    main()
