"""Balance aggregator.

Balances are derived on every read from the initial balance and the
confirmed transactions touching the account; they are never stored.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_EVEN, Decimal

from src.domain.constants import ZERO
from src.domain.models.accounts import Account
from src.domain.models.owners import Currency
from src.domain.models.transactions import Transaction
from src.utils.decimal_utils import coerce_decimal


def compute_balance(
    account: Account,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Compute the current balance of an account.

    ``initial + incomes in + transfers in - expenses out - transfers out``,
    counting CONFIRMED transactions only.

    Args:
        account: Account whose balance is requested.
        transactions: Transactions of any state; unrelated ones are ignored.

    Returns:
        Decimal: Exact balance, not rounded.
    """
    incomes_in = ZERO
    transfers_in = ZERO
    expenses_out = ZERO
    transfers_out = ZERO
    for transaction in transactions:
        if not transaction.is_confirmed or not transaction.touches(account.id):
            continue
        amount = coerce_decimal(transaction.amount)
        if transaction.destination_account_id == account.id:
            if transaction.is_income:
                incomes_in += amount
            elif transaction.is_transfer:
                transfers_in += amount
        if transaction.source_account_id == account.id:
            if transaction.is_expense:
                expenses_out += amount
            elif transaction.is_transfer:
                transfers_out += amount

    initial = coerce_decimal(account.initial_balance)
    return initial + incomes_in + transfers_in - expenses_out - transfers_out


def quantize_for_display(amount: Decimal, currency: Currency | None) -> Decimal:
    """Round an amount to the currency's decimal digits for display only."""
    digits = currency.decimal_digits if currency is not None else 2
    exponent = Decimal(1).scaleb(-digits)
    return amount.quantize(exponent, rounding=ROUND_HALF_EVEN)


__all__ = ["compute_balance", "quantize_for_display"]
