"""Typed failures raised by the ledger core.

Every error carries a stable ``kind`` so boundary adapters can map it to a
transport-specific code without inspecting messages.
"""


class LedgerError(ValueError):
    """Base class for request-fatal ledger errors."""

    kind = "LEDGER_ERROR"


class NotFoundError(LedgerError):
    """Referenced entity does not exist or belongs to another owner."""

    kind = "NOT_FOUND"


class InvalidAmountError(LedgerError):
    """Amount is missing, not a number, zero, or negative."""

    kind = "INVALID_AMOUNT"


class InvalidStructureError(LedgerError):
    """Transaction fields do not match the shape required by its type."""

    kind = "INVALID_STRUCTURE"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class SameAccountError(LedgerError):
    """Transfer source and destination are the same account."""

    kind = "SAME_ACCOUNT"


class InactiveReferenceError(LedgerError):
    """A referenced account, category, or owner is deactivated."""

    kind = "INACTIVE_REFERENCE"


class UnknownTypeError(LedgerError):
    """Transaction type is not one of the supported types."""

    kind = "UNKNOWN_TYPE"


class IllegalTransitionError(LedgerError):
    """Requested state transition is not allowed."""

    kind = "ILLEGAL_TRANSITION"


class ImmutableError(LedgerError):
    """Transaction can no longer be edited."""

    kind = "IMMUTABLE"


class InvalidRangeError(LedgerError):
    """Date range is incomplete or reversed."""

    kind = "INVALID_RANGE"


class DuplicateNameError(LedgerError):
    """Name collides with an existing entry of the same owner."""

    kind = "DUPLICATE_NAME"


class InvalidInputError(LedgerError):
    """Free-form input such as a name, color, or email is malformed."""

    kind = "INVALID_INPUT"


__all__ = [
    "LedgerError",
    "NotFoundError",
    "InvalidAmountError",
    "InvalidStructureError",
    "SameAccountError",
    "InactiveReferenceError",
    "UnknownTypeError",
    "IllegalTransitionError",
    "ImmutableError",
    "InvalidRangeError",
    "DuplicateNameError",
    "InvalidInputError",
]
