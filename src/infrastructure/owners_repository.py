"""SQLAlchemy-backed repositories for owners and currencies."""

from datetime import datetime

from sqlalchemy import bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.owners_repository import (
    CurrenciesRepositoryPort,
    OwnersRepositoryPort,
)
from src.domain.models.owners import Currency, Owner, Role
from src.utils.decimal_utils import coerce_decimal, decimal_to_storage

SELECT_OWNER_SQL = """
    SELECT id, name, email, default_currency_code, active, created_at
    FROM owners
"""

SELECT_ROLES_SQL = text(
    """
    SELECT owner_id, role
    FROM owner_roles
    WHERE owner_id IN :owner_ids
    """
).bindparams(bindparam("owner_ids", expanding=True))


class SqlAlchemyOwnersRepository(OwnersRepositoryPort):
    """Repository backed by SQLAlchemy for owner records."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def add(self, owner: Owner) -> Owner:
        query = text(
            """
            INSERT INTO owners (
                name, email, default_currency_code, active, created_at
            )
            VALUES (
                :name, :email, :default_currency_code, :active, :created_at
            )
            RETURNING id
            """
        )
        created_at = owner.created_at or datetime.now()
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            owner_id = conn.execute(
                query,
                {
                    "name": owner.name,
                    "email": owner.email,
                    "default_currency_code": owner.default_currency_code,
                    "active": int(owner.active),
                    "created_at": created_at.isoformat(),
                },
            ).scalar_one()
            self._write_roles(conn, owner_id, owner.roles)
        return Owner(
            id=owner_id,
            name=owner.name,
            email=owner.email,
            default_currency_code=owner.default_currency_code,
            active=owner.active,
            roles=owner.roles,
            created_at=created_at,
        )

    def get(self, owner_id: int) -> Owner | None:
        return self._fetch_one(
            SELECT_OWNER_SQL + " WHERE id = :owner_id",
            {"owner_id": owner_id},
        )

    def get_by_email(self, email: str) -> Owner | None:
        return self._fetch_one(
            SELECT_OWNER_SQL + " WHERE email = :email",
            {"email": email},
        )

    def save(self, owner: Owner) -> Owner:
        query = text(
            """
            UPDATE owners
            SET name = :name,
                email = :email,
                default_currency_code = :default_currency_code,
                active = :active
            WHERE id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {
                    "owner_id": owner.id,
                    "name": owner.name,
                    "email": owner.email,
                    "default_currency_code": owner.default_currency_code,
                    "active": int(owner.active),
                },
            )
            conn.execute(
                text("DELETE FROM owner_roles WHERE owner_id = :owner_id"),
                {"owner_id": owner.id},
            )
            self._write_roles(conn, owner.id, owner.roles)
        return owner

    def _fetch_one(self, sql: str, params: dict) -> Owner | None:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(text(sql), params).first()
            if row is None:
                return None
            roles = conn.execute(SELECT_ROLES_SQL, {"owner_ids": [row.id]}).all()
        return Owner(
            id=row.id,
            name=row.name,
            email=row.email,
            default_currency_code=row.default_currency_code,
            active=bool(row.active),
            roles=frozenset(Role(item.role) for item in roles),
            created_at=datetime.fromisoformat(row.created_at),
        )

    @staticmethod
    def _write_roles(conn, owner_id: int, roles) -> None:
        payload = [
            {"owner_id": owner_id, "role": Role(role).value}
            for role in sorted(roles, key=lambda item: Role(item).value)
        ]
        if payload:
            conn.execute(
                text(
                    "INSERT INTO owner_roles (owner_id, role) "
                    "VALUES (:owner_id, :role)"
                ),
                payload,
            )


class SqlAlchemyCurrenciesRepository(CurrenciesRepositoryPort):
    """Repository backed by SQLAlchemy for currency reference data."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def add(self, currency: Currency) -> Currency:
        query = text(
            """
            INSERT INTO currencies (
                code, name, symbol, decimal_digits, exchange_rate_to_base
            )
            VALUES (
                :code, :name, :symbol, :decimal_digits, :exchange_rate_to_base
            )
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {
                    "code": currency.code,
                    "name": currency.name,
                    "symbol": currency.symbol,
                    "decimal_digits": currency.decimal_digits,
                    "exchange_rate_to_base": decimal_to_storage(
                        currency.exchange_rate_to_base
                    ),
                },
            )
        return currency

    def get(self, code: str) -> Currency | None:
        query = text(
            """
            SELECT code, name, symbol, decimal_digits, exchange_rate_to_base
            FROM currencies
            WHERE code = :code
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"code": code}).first()
        return self._to_currency(row) if row is not None else None

    def list_all(self) -> list[Currency]:
        query = text(
            """
            SELECT code, name, symbol, decimal_digits, exchange_rate_to_base
            FROM currencies
            ORDER BY code
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self._to_currency(row) for row in rows]

    @staticmethod
    def _to_currency(row) -> Currency:
        return Currency(
            code=row.code,
            name=row.name,
            symbol=row.symbol,
            decimal_digits=int(row.decimal_digits),
            exchange_rate_to_base=coerce_decimal(row.exchange_rate_to_base),
        )


__all__ = ["SqlAlchemyOwnersRepository", "SqlAlchemyCurrenciesRepository"]
