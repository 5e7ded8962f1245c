"""Domain services package."""

from .balance import compute_balance, quantize_for_display
from .normalization import (
    name_key,
    normalize_color_hex,
    normalize_currency_code,
    normalize_description,
    normalize_email,
    normalize_name,
)
from .state_machine import apply_edit, cancel, confirm, ensure_editable, initial_state
from .summary import clamp_top_n, compute_summary, validate_range
from .validation import (
    parse_amount,
    parse_transaction_type,
    validate_amount,
    validate_candidate,
    validate_edit,
)

__all__ = [
    "compute_balance",
    "quantize_for_display",
    "name_key",
    "normalize_color_hex",
    "normalize_currency_code",
    "normalize_description",
    "normalize_email",
    "normalize_name",
    "apply_edit",
    "cancel",
    "confirm",
    "ensure_editable",
    "initial_state",
    "clamp_top_n",
    "compute_summary",
    "validate_range",
    "parse_amount",
    "parse_transaction_type",
    "validate_amount",
    "validate_candidate",
    "validate_edit",
]
