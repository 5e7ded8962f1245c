"""Composition root for wiring infrastructure adapters."""

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.catalog_repository import (
    CategoriesRepositoryPort,
    TagsRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.identity import IdentityPort
from src.application.ports.owners_repository import (
    CurrenciesRepositoryPort,
    OwnersRepositoryPort,
)
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.change_transaction_state import (
    CancelTransactionUseCase,
    ConfirmTransactionUseCase,
)
from src.application.use_cases.create_transaction import (
    CreateTransactionUseCase,
)
from src.application.use_cases.get_summary import GetSummaryUseCase
from src.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from src.application.use_cases.manage_accounts import (
    CreateAccountUseCase,
    GetAccountBalanceUseCase,
    GetAccountDetailUseCase,
    ListAccountsUseCase,
    UpdateAccountUseCase,
)
from src.application.use_cases.manage_catalog import (
    CreateCategoryUseCase,
    CreateTagUseCase,
    ListCategoriesUseCase,
    ListTagsUseCase,
    UpdateCategoryUseCase,
    UpdateTagUseCase,
)
from src.application.use_cases.manage_owners import (
    AddCurrencyUseCase,
    ListCurrenciesUseCase,
    RegisterOwnerUseCase,
    SetOwnerActiveUseCase,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.application.use_cases.update_transaction import (
    UpdateTransactionUseCase,
)
from src.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from src.infrastructure.catalog_repository import (
    SqlAlchemyCategoriesRepository,
    SqlAlchemyTagsRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.identity import EmailIdentityAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.owners_repository import (
    SqlAlchemyCurrenciesRepository,
    SqlAlchemyOwnersRepository,
)
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_owners_repository(
    db_port: DatabaseEnginePort | None = None,
) -> OwnersRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyOwnersRepository(resolved_db)


def build_currencies_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CurrenciesRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCurrenciesRepository(resolved_db)


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AccountsRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAccountsRepository(resolved_db)


def build_categories_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoriesRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoriesRepository(resolved_db)


def build_tags_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TagsRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTagsRepository(resolved_db)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(resolved_db)


def build_identity(
    db_port: DatabaseEnginePort | None = None,
) -> IdentityPort:
    """Return the local identity adapter."""
    return EmailIdentityAdapter(build_owners_repository(db_port))


def build_guard(db_port: DatabaseEnginePort | None = None) -> OwnershipGuard:
    """Return an ownership guard over every owner-scoped repository."""
    resolved_db = db_port or build_database_adapter()
    return OwnershipGuard(
        owners=build_owners_repository(resolved_db),
        accounts=build_accounts_repository(resolved_db),
        categories=build_categories_repository(resolved_db),
        tags=build_tags_repository(resolved_db),
        transactions=build_transactions_repository(resolved_db),
    )


class LedgerServices:
    """Every ledger use case wired against one database adapter.

    Adapters (CLI, dashboard) build one instance and call the use cases
    through its attributes.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort | None = None,
        settings: LedgerSettings | None = None,
        logger=None,
    ) -> None:
        resolved_db = db_port or build_database_adapter()
        resolved_settings = settings or LedgerSettings.from_env()
        resolved_logger = logger or get_app_logger()
        owners = build_owners_repository(resolved_db)
        currencies = build_currencies_repository(resolved_db)
        accounts = build_accounts_repository(resolved_db)
        categories = build_categories_repository(resolved_db)
        tags = build_tags_repository(resolved_db)
        transactions = build_transactions_repository(resolved_db)
        guard = OwnershipGuard(
            owners=owners,
            accounts=accounts,
            categories=categories,
            tags=tags,
            transactions=transactions,
        )

        self.settings = resolved_settings
        self.identity = EmailIdentityAdapter(owners)
        self.register_owner = RegisterOwnerUseCase(
            owners, currencies, logger=resolved_logger
        )
        self.set_owner_active = SetOwnerActiveUseCase(
            owners, logger=resolved_logger
        )
        self.add_currency = AddCurrencyUseCase(
            currencies, logger=resolved_logger
        )
        self.list_currencies = ListCurrenciesUseCase(currencies)
        self.create_account = CreateAccountUseCase(
            guard,
            accounts,
            currencies,
            logger=resolved_logger,
            fallback_currency=resolved_settings.default_currency_code,
        )
        self.update_account = UpdateAccountUseCase(
            guard, accounts, currencies, logger=resolved_logger
        )
        self.get_account_balance = GetAccountBalanceUseCase(
            guard, transactions, logger=resolved_logger
        )
        self.list_accounts = ListAccountsUseCase(
            guard, accounts, transactions, logger=resolved_logger
        )
        self.get_account_detail = GetAccountDetailUseCase(
            guard, transactions, logger=resolved_logger
        )
        self.create_category = CreateCategoryUseCase(
            guard, categories, logger=resolved_logger
        )
        self.update_category = UpdateCategoryUseCase(
            guard, categories, logger=resolved_logger
        )
        self.list_categories = ListCategoriesUseCase(guard, categories)
        self.create_tag = CreateTagUseCase(
            guard, tags, logger=resolved_logger
        )
        self.update_tag = UpdateTagUseCase(
            guard, tags, logger=resolved_logger
        )
        self.list_tags = ListTagsUseCase(guard, tags)
        self.create_transaction = CreateTransactionUseCase(
            guard,
            transactions,
            policy=resolved_settings.policy(),
            logger=resolved_logger,
        )
        self.confirm_transaction = ConfirmTransactionUseCase(
            guard, transactions, logger=resolved_logger
        )
        self.cancel_transaction = CancelTransactionUseCase(
            guard, transactions, logger=resolved_logger
        )
        self.update_transaction = UpdateTransactionUseCase(
            guard, transactions, logger=resolved_logger
        )
        self.list_transactions = ListTransactionsUseCase(
            guard, transactions, logger=resolved_logger
        )
        self.get_summary = GetSummaryUseCase(
            guard, transactions, categories, logger=resolved_logger
        )


def build_ledger_services(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerServices:
    """Return every ledger use case wired against the configured database."""
    return LedgerServices(db_port=db_port, settings=settings)


__all__ = [
    "build_database_adapter",
    "build_owners_repository",
    "build_currencies_repository",
    "build_accounts_repository",
    "build_categories_repository",
    "build_tags_repository",
    "build_transactions_repository",
    "build_identity",
    "build_guard",
    "LedgerServices",
    "build_ledger_services",
]
