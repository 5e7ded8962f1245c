"""Domain models for owners and reference currencies."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum


class Role(str, Enum):
    """Role tags carried by an owner."""

    USER = "USER"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Currency:
    """Reference currency shared by many owners and accounts.

    Attributes:
        code: Three-letter currency code, e.g. ``ARS``.
        name: Display name.
        symbol: Display symbol.
        decimal_digits: Digits used when displaying amounts.
        exchange_rate_to_base: Informational rate, never used in arithmetic.
    """

    code: str
    name: str
    symbol: str
    decimal_digits: int = 2
    exchange_rate_to_base: Decimal = Decimal("1")


@dataclass(frozen=True)
class Owner:
    """Account holder identity that owns every other ledger entity."""

    id: int | None
    name: str
    email: str
    default_currency_code: str | None = None
    active: bool = True
    roles: frozenset[Role] = field(default_factory=lambda: frozenset({Role.USER}))
    created_at: datetime | None = None

    def deactivate(self) -> "Owner":
        return replace(self, active=False)

    def activate(self) -> "Owner":
        return replace(self, active=True)

    def change_default_currency(self, currency_code: str | None) -> "Owner":
        return replace(self, default_currency_code=currency_code)


def new_owner(
    name: str,
    email: str,
    *,
    default_currency_code: str | None = None,
    roles: frozenset[Role] | None = None,
    now: datetime | None = None,
) -> Owner:
    """Build a fully-formed owner ready to be persisted.

    Args:
        name: Display name.
        email: Normalized unique email.
        default_currency_code: Optional default currency for new accounts.
        roles: Role tags; defaults to ``{Role.USER}`` when empty.
        now: Creation timestamp override.

    Returns:
        Owner: Active owner without an id.
    """
    return Owner(
        id=None,
        name=name,
        email=email,
        default_currency_code=default_currency_code,
        active=True,
        roles=frozenset(roles) if roles else frozenset({Role.USER}),
        created_at=now or datetime.now(),
    )


__all__ = ["Role", "Currency", "Owner", "new_owner"]
