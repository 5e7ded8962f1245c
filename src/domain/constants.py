"""Domain constants for the personal ledger."""

from decimal import Decimal

DEFAULT_CURRENCY_CODE = "ARS"

DEFAULT_CATEGORY_COLOR = "#64748B"

DEFAULT_TOP_CATEGORIES = 5
MAX_TOP_CATEGORIES = 50

DEFAULT_TRANSACTION_LIMIT = 20
MAX_TRANSACTION_LIMIT = 200

ZERO = Decimal("0")


__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "DEFAULT_CATEGORY_COLOR",
    "DEFAULT_TOP_CATEGORIES",
    "MAX_TOP_CATEGORIES",
    "DEFAULT_TRANSACTION_LIMIT",
    "MAX_TRANSACTION_LIMIT",
    "ZERO",
]
