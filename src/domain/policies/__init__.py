"""Domain policies package."""

from .ledger_policy import DEFAULT_POLICY, LedgerPolicy

__all__ = ["LedgerPolicy", "DEFAULT_POLICY"]
