"""SQLAlchemy-backed repository for ledger accounts."""

from datetime import datetime

from sqlalchemy import text

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.accounts import Account, AccountType
from src.utils.decimal_utils import coerce_decimal, decimal_to_storage

SELECT_ACCOUNTS_SQL = """
    SELECT id, owner_id, name, account_type, currency_code,
           initial_balance, active, created_at
    FROM accounts
"""


class SqlAlchemyAccountsRepository(AccountsRepositoryPort):
    """Repository backed by SQLAlchemy for owner accounts."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def add(self, account: Account) -> Account:
        query = text(
            """
            INSERT INTO accounts (
                owner_id, name, account_type, currency_code,
                initial_balance, active, created_at
            )
            VALUES (
                :owner_id, :name, :account_type, :currency_code,
                :initial_balance, :active, :created_at
            )
            RETURNING id
            """
        )
        created_at = account.created_at or datetime.now()
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            account_id = conn.execute(
                query,
                {
                    "owner_id": account.owner_id,
                    "name": account.name,
                    "account_type": AccountType(account.account_type).value,
                    "currency_code": account.currency_code,
                    "initial_balance": decimal_to_storage(
                        account.initial_balance
                    ),
                    "active": int(account.active),
                    "created_at": created_at.isoformat(),
                },
            ).scalar_one()
        return Account(
            id=account_id,
            owner_id=account.owner_id,
            name=account.name,
            account_type=AccountType(account.account_type),
            currency_code=account.currency_code,
            initial_balance=account.initial_balance,
            active=account.active,
            created_at=created_at,
        )

    def get(self, owner_id: int, account_id: int) -> Account | None:
        query = text(
            SELECT_ACCOUNTS_SQL
            + " WHERE id = :account_id AND owner_id = :owner_id"
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                query,
                {"account_id": account_id, "owner_id": owner_id},
            ).first()
        return self._to_account(row) if row is not None else None

    def save(self, account: Account) -> Account:
        """Persist mutable fields; the initial balance is never rewritten."""
        query = text(
            """
            UPDATE accounts
            SET name = :name,
                account_type = :account_type,
                currency_code = :currency_code,
                active = :active
            WHERE id = :account_id AND owner_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {
                    "account_id": account.id,
                    "owner_id": account.owner_id,
                    "name": account.name,
                    "account_type": AccountType(account.account_type).value,
                    "currency_code": account.currency_code,
                    "active": int(account.active),
                },
            )
        return account

    def list_by_owner(
        self,
        owner_id: int,
        active_only: bool = False,
    ) -> list[Account]:
        sql = SELECT_ACCOUNTS_SQL + " WHERE owner_id = :owner_id"
        if active_only:
            sql += " AND active = 1"
        query = text(sql + " ORDER BY name, id")
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"owner_id": owner_id}).all()
        return [self._to_account(row) for row in rows]

    def exists_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> bool:
        sql = "SELECT 1 FROM accounts WHERE owner_id = :owner_id AND name = :name"
        params = {"owner_id": owner_id, "name": name}
        if exclude_id is not None:
            sql += " AND id <> :exclude_id"
            params["exclude_id"] = exclude_id
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(text(sql), params).first() is not None

    @staticmethod
    def _to_account(row) -> Account:
        return Account(
            id=row.id,
            owner_id=row.owner_id,
            name=row.name,
            account_type=AccountType(row.account_type),
            currency_code=row.currency_code,
            initial_balance=coerce_decimal(row.initial_balance),
            active=bool(row.active),
            created_at=(
                datetime.fromisoformat(row.created_at)
                if row.created_at
                else None
            ),
        )


__all__ = ["SqlAlchemyAccountsRepository"]
