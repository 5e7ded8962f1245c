"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.models.transactions import TransactionState
from src.domain.policies.ledger_policy import LedgerPolicy
from src.infrastructure.db import LEDGER_DB_URL_ENV, default_db_url
from src.infrastructure.logging.logger import get_app_logger

LEDGER_CREATE_STATE_ENV = "LEDGER_CREATE_STATE"
LEDGER_DEFAULT_CURRENCY_ENV = "LEDGER_DEFAULT_CURRENCY"

_CREATION_STATES = {
    TransactionState.PENDING.value,
    TransactionState.CONFIRMED.value,
}


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger deployment.

    Attributes:
        db_url: SQLAlchemy URL of the ledger database.
        create_state: State new transactions are created in.
        default_currency_code: Currency used when an owner has none.
    """

    db_url: str
    create_state: TransactionState = TransactionState.CONFIRMED
    default_currency_code: str = DEFAULT_CURRENCY_CODE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv(LEDGER_DB_URL_ENV, "").strip() or default_db_url()
        raw_state = os.getenv(LEDGER_CREATE_STATE_ENV, "").strip().upper()
        create_state = TransactionState.CONFIRMED
        if raw_state in _CREATION_STATES:
            create_state = TransactionState(raw_state)
        elif raw_state:
            logger.warning(
                f"Invalid {LEDGER_CREATE_STATE_ENV}={raw_state}; "
                f"using {create_state.value}"
            )
        currency = (
            os.getenv(LEDGER_DEFAULT_CURRENCY_ENV, "").strip().upper()
            or DEFAULT_CURRENCY_CODE
        )
        return cls(
            db_url=db_url,
            create_state=create_state,
            default_currency_code=currency,
        )

    def policy(self) -> LedgerPolicy:
        """Return the domain policy these settings select."""
        return LedgerPolicy(create_state=self.create_state)


__all__ = ["LedgerSettings"]
