"""Use cases for owners and currency reference data."""

from decimal import Decimal

from src.application.ports.owners_repository import (
    CurrenciesRepositoryPort,
    OwnersRepositoryPort,
)
from src.domain.errors import DuplicateNameError, InvalidInputError, NotFoundError
from src.domain.models.owners import Currency, Owner, Role, new_owner
from src.domain.services.normalization import (
    normalize_currency_code,
    normalize_email,
    normalize_name,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class RegisterOwnerUseCase:
    """Register a new owner identity."""

    def __init__(
        self,
        owners: OwnersRepositoryPort,
        currencies: CurrenciesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            owners: Port storing owners.
            currencies: Port used to check the default currency.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._owners = owners
        self._currencies = currencies
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        email: str,
        default_currency_code: str | None = None,
        roles: set[Role] | None = None,
    ) -> Owner:
        """Create the owner after checking email uniqueness.

        Raises:
            InvalidInputError: Blank name or malformed email.
            DuplicateNameError: Email already registered.
            NotFoundError: Unknown default currency.
        """
        clean_name = normalize_name(name)
        clean_email = normalize_email(email)
        currency_code = normalize_currency_code(default_currency_code)
        if self._owners.get_by_email(clean_email) is not None:
            self._logger.warning(f"Email already registered: {clean_email}")
            raise DuplicateNameError("Email already registered")
        if currency_code and self._currencies.get(currency_code) is None:
            raise NotFoundError(f"Currency not found: {currency_code}")

        owner = self._owners.add(
            new_owner(
                clean_name,
                clean_email,
                default_currency_code=currency_code,
                roles=frozenset(roles) if roles else None,
            )
        )
        self._logger.info(f"Registered owner id={owner.id}")
        return owner


class SetOwnerActiveUseCase:
    """Deactivate or reactivate an owner; owners are never deleted."""

    def __init__(self, owners: OwnersRepositoryPort, logger=None) -> None:
        self._owners = owners
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: int, active: bool) -> Owner:
        owner = self._owners.get(owner_id)
        if owner is None:
            raise NotFoundError(f"Owner not found: {owner_id}")
        if owner.active == active:
            return owner
        updated = owner.activate() if active else owner.deactivate()
        saved = self._owners.save(updated)
        self._logger.info(f"Owner id={owner_id} active={active}")
        return saved


class AddCurrencyUseCase:
    """Register a currency as reference data."""

    def __init__(self, currencies: CurrenciesRepositoryPort, logger=None) -> None:
        self._currencies = currencies
        self._logger = logger or get_app_logger()

    def execute(
        self,
        code: str,
        name: str,
        symbol: str,
        decimal_digits: int = 2,
        exchange_rate_to_base: Decimal | str | int = Decimal("1"),
    ) -> Currency:
        """Create the currency unless the code already exists.

        Raises:
            InvalidInputError: Malformed code or negative digits.
            DuplicateNameError: Code already registered.
        """
        clean_code = normalize_currency_code(code)
        if clean_code is None:
            raise InvalidInputError("currency code is required")
        if decimal_digits < 0:
            raise InvalidInputError("decimal_digits must be >= 0")
        if self._currencies.get(clean_code) is not None:
            raise DuplicateNameError(f"Currency already exists: {clean_code}")
        currency = self._currencies.add(
            Currency(
                code=clean_code,
                name=normalize_name(name),
                symbol=symbol.strip() if symbol else clean_code,
                decimal_digits=decimal_digits,
                exchange_rate_to_base=coerce_decimal(exchange_rate_to_base),
            )
        )
        self._logger.info(f"Added currency {clean_code}")
        return currency


class ListCurrenciesUseCase:
    """List reference currencies."""

    def __init__(self, currencies: CurrenciesRepositoryPort) -> None:
        self._currencies = currencies

    def execute(self) -> list[Currency]:
        return self._currencies.list_all()


__all__ = [
    "RegisterOwnerUseCase",
    "SetOwnerActiveUseCase",
    "AddCurrencyUseCase",
    "ListCurrenciesUseCase",
]
