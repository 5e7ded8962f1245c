"""Use cases for creating, updating, and reading accounts."""

from datetime import date
from decimal import Decimal, InvalidOperation

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.owners_repository import CurrenciesRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.list_transactions import ListTransactionsUseCase
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.errors import (
    DuplicateNameError,
    InvalidAmountError,
    InvalidInputError,
    NotFoundError,
)
from src.domain.models import (
    Account,
    AccountDetail,
    AccountPatch,
    AccountSummary,
    AccountType,
    new_account,
)
from src.domain.services.balance import compute_balance
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_name,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


def parse_account_type(value: AccountType | str | None) -> AccountType:
    """Map a raw value to an AccountType or raise InvalidInputError."""
    if isinstance(value, AccountType):
        return value
    try:
        return AccountType(str(value).strip().upper())
    except ValueError as exc:
        raise InvalidInputError(f"Unknown account type: {value}") from exc


def _parse_initial_balance(value) -> Decimal:
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(
            f"Initial balance is not a number: {value}"
        ) from exc
    if not amount.is_finite():
        raise InvalidAmountError("Initial balance must be a finite number")
    return amount


class CreateAccountUseCase:
    """Open a new account for an owner."""

    def __init__(
        self,
        guard: OwnershipGuard,
        accounts: AccountsRepositoryPort,
        currencies: CurrenciesRepositoryPort,
        logger=None,
        fallback_currency: str = DEFAULT_CURRENCY_CODE,
    ) -> None:
        """Initialize the use case.

        Args:
            guard: Ownership guard resolving the owner.
            accounts: Port storing accounts.
            currencies: Port used to resolve currency codes.
            logger: Optional logger compatible with logging.Logger-like API.
            fallback_currency: Code used when neither the request nor the
                owner names a currency.
        """
        self._guard = guard
        self._accounts = accounts
        self._currencies = currencies
        self._logger = logger or get_app_logger()
        self._fallback_currency = fallback_currency

    def execute(
        self,
        owner_id: int,
        name: str,
        account_type: AccountType | str,
        currency_code: str | None = None,
        initial_balance: Decimal | str | int | None = None,
    ) -> Account:
        """Create the account.

        The currency defaults to the owner's default currency, then to the
        fallback currency. The initial balance defaults to zero and is never
        changed afterwards.

        Raises:
            NotFoundError: Unknown owner or currency.
            DuplicateNameError: Same name (case-sensitive) already used.
        """
        owner = self._guard.require_active_owner(owner_id)
        clean_name = normalize_name(name)
        kind = parse_account_type(account_type)
        code = (
            normalize_currency_code(currency_code)
            or owner.default_currency_code
            or self._fallback_currency
        )
        if self._currencies.get(code) is None:
            raise NotFoundError(f"Currency not found: {code}")
        balance = _parse_initial_balance(initial_balance)

        if self._accounts.exists_name(owner_id, clean_name):
            self._logger.warning(
                f"Duplicate account name for owner={owner_id}: {clean_name}"
            )
            raise DuplicateNameError(
                "Account with that name already exists for this owner"
            )

        account = self._accounts.add(
            new_account(owner_id, clean_name, kind, code, balance)
        )
        self._logger.info(
            f"Created account id={account.id} owner={owner_id} "
            f"currency={code}"
        )
        return account


class UpdateAccountUseCase:
    """Rename, retype, change currency, or toggle an account."""

    def __init__(
        self,
        guard: OwnershipGuard,
        accounts: AccountsRepositoryPort,
        currencies: CurrenciesRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._accounts = accounts
        self._currencies = currencies
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: int,
        account_id: int,
        patch: AccountPatch,
    ) -> Account:
        """Apply the patch; the initial balance is not patchable."""
        self._guard.require_active_owner(owner_id)
        account = self._guard.require_account(owner_id, account_id)
        updated = account
        if patch.name is not None:
            clean_name = normalize_name(patch.name)
            if clean_name != account.name and self._accounts.exists_name(
                owner_id,
                clean_name,
                exclude_id=account_id,
            ):
                raise DuplicateNameError(
                    "Account with that name already exists for this owner"
                )
            updated = updated.rename(clean_name)
        if patch.account_type is not None:
            updated = updated.change_type(parse_account_type(patch.account_type))
        if patch.currency_code is not None:
            code = normalize_currency_code(patch.currency_code)
            if code is None or self._currencies.get(code) is None:
                raise NotFoundError(f"Currency not found: {patch.currency_code}")
            updated = updated.change_currency(code)
        if patch.active is not None:
            updated = updated.activate() if patch.active else updated.deactivate()

        if updated == account:
            return account
        saved = self._accounts.save(updated)
        self._logger.info(f"Updated account id={account_id} owner={owner_id}")
        return saved


class GetAccountBalanceUseCase:
    """Derive the current balance of one account."""

    def __init__(
        self,
        guard: OwnershipGuard,
        transactions: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._transactions = transactions
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: int, account_id: int) -> Decimal:
        """Return initial balance plus confirmed movements, recomputed now."""
        account = self._guard.require_account(owner_id, account_id)
        return self.balance_of(account)

    def balance_of(self, account: Account) -> Decimal:
        movements = self._transactions.fetch_for_account(account.id)
        balance = compute_balance(account, movements)
        self._logger.info(
            f"Computed balance for account={account.id} "
            f"from {len(movements)} movements"
        )
        return balance


class ListAccountsUseCase:
    """List an owner's accounts with their derived balances."""

    def __init__(
        self,
        guard: OwnershipGuard,
        accounts: AccountsRepositoryPort,
        transactions: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._accounts = accounts
        self._balances = GetAccountBalanceUseCase(guard, transactions, logger)
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: int,
        active_only: bool = False,
    ) -> list[AccountSummary]:
        self._guard.require_owner(owner_id)
        accounts = self._accounts.list_by_owner(owner_id, active_only)
        summaries = [
            AccountSummary(account=account, balance=self._balances.balance_of(account))
            for account in accounts
        ]
        self._logger.info(
            f"Listed {len(summaries)} accounts for owner={owner_id}"
        )
        return summaries


class GetAccountDetailUseCase:
    """Return an account summary with its recent transactions."""

    def __init__(
        self,
        guard: OwnershipGuard,
        transactions: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._balances = GetAccountBalanceUseCase(guard, transactions, logger)
        self._listing = ListTransactionsUseCase(guard, transactions, logger)

    def execute(
        self,
        owner_id: int,
        account_id: int,
        limit: int | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> AccountDetail:
        account = self._guard.require_account(owner_id, account_id)
        recent = self._listing.execute(
            owner_id,
            start_date=start_date,
            end_date=end_date,
            account_id=account_id,
            limit=limit,
        )
        summary = AccountSummary(
            account=account,
            balance=self._balances.balance_of(account),
        )
        return AccountDetail(summary=summary, transactions=recent)


__all__ = [
    "parse_account_type",
    "CreateAccountUseCase",
    "UpdateAccountUseCase",
    "GetAccountBalanceUseCase",
    "ListAccountsUseCase",
    "GetAccountDetailUseCase",
]
