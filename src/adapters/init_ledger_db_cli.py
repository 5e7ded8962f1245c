"""CLI adapter to create the ledger schema and seed reference data.

The default currency comes from LEDGER_DEFAULT_CURRENCY. When
LEDGER_OWNER_EMAIL is set, an owner with that email is registered too so the
report CLI and the dashboard have someone to act for.
"""

import os

from src.domain.errors import NotFoundError
from src.infrastructure.container import (
    build_database_adapter,
    build_ledger_services,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema
from src.infrastructure.settings import LedgerSettings

KNOWN_CURRENCIES = {
    "ARS": ("Argentine Peso", "$"),
    "USD": ("US Dollar", "US$"),
    "EUR": ("Euro", "€"),
}


def main() -> None:
    """Create missing tables, the default currency and the local owner."""
    logger = get_app_logger()
    settings = LedgerSettings.from_env()
    db_adapter = build_database_adapter()
    ensure_schema(db_adapter.get_ledger_engine())
    print(f"Ledger schema ready at {settings.db_url}")

    services = build_ledger_services(db_port=db_adapter, settings=settings)
    code = settings.default_currency_code
    existing = {currency.code for currency in services.list_currencies.execute()}
    if code not in existing:
        name, symbol = KNOWN_CURRENCIES.get(code, (code, code))
        services.add_currency.execute(code, name, symbol)
        print(f"Registered currency {code}.")

    email = os.getenv("LEDGER_OWNER_EMAIL", "").strip()
    if not email:
        return
    try:
        owner = services.identity.resolve_owner(email)
        logger.info(f"Owner already registered: id={owner.id}")
    except NotFoundError:
        name = os.getenv("LEDGER_OWNER_NAME", "").strip() or email.split("@")[0]
        owner = services.register_owner.execute(
            name,
            email,
            default_currency_code=code,
        )
        print(f"Registered owner {owner.email} (id={owner.id}).")


if __name__ == "__main__":  # pragma: no cover
    main()
