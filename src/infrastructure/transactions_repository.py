"""SQLAlchemy-backed repository for the transaction log."""

from collections import defaultdict
from datetime import date, datetime

from sqlalchemy import bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models.transactions import (
    Transaction,
    TransactionState,
    TransactionType,
)
from src.utils.decimal_utils import coerce_decimal, decimal_to_storage

SELECT_TRANSACTIONS_SQL = """
    SELECT id, owner_id, transaction_type, state, amount, operation_date,
           recorded_at, description, external_reference,
           source_account_id, destination_account_id, category_id
    FROM transactions
"""

SELECT_TAG_LINKS_SQL = text(
    """
    SELECT transaction_id, tag_id
    FROM transaction_tags
    WHERE transaction_id IN :transaction_ids
    """
).bindparams(bindparam("transaction_ids", expanding=True))

INSERT_TAG_LINK_SQL = text(
    """
    INSERT INTO transaction_tags (transaction_id, tag_id)
    VALUES (:transaction_id, :tag_id)
    """
)


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy for ledger transactions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def add(self, transaction: Transaction) -> Transaction:
        """Insert the transaction and its tag links in one unit of work."""
        query = text(
            """
            INSERT INTO transactions (
                owner_id, transaction_type, state, amount, operation_date,
                recorded_at, description, external_reference,
                source_account_id, destination_account_id, category_id
            )
            VALUES (
                :owner_id, :transaction_type, :state, :amount,
                :operation_date, :recorded_at, :description,
                :external_reference, :source_account_id,
                :destination_account_id, :category_id
            )
            RETURNING id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            transaction_id = conn.execute(
                query,
                {
                    "owner_id": transaction.owner_id,
                    "transaction_type": TransactionType(
                        transaction.transaction_type
                    ).value,
                    "state": TransactionState(transaction.state).value,
                    "amount": decimal_to_storage(transaction.amount),
                    "operation_date": transaction.operation_date.isoformat(),
                    "recorded_at": transaction.recorded_at.isoformat(),
                    "description": transaction.description,
                    "external_reference": transaction.external_reference,
                    "source_account_id": transaction.source_account_id,
                    "destination_account_id": (
                        transaction.destination_account_id
                    ),
                    "category_id": transaction.category_id,
                },
            ).scalar_one()
            self._write_tags(conn, transaction_id, transaction.tag_ids)
        return Transaction(
            id=transaction_id,
            owner_id=transaction.owner_id,
            transaction_type=TransactionType(transaction.transaction_type),
            state=TransactionState(transaction.state),
            amount=transaction.amount,
            operation_date=transaction.operation_date,
            recorded_at=transaction.recorded_at,
            description=transaction.description,
            source_account_id=transaction.source_account_id,
            destination_account_id=transaction.destination_account_id,
            category_id=transaction.category_id,
            tag_ids=frozenset(transaction.tag_ids),
            external_reference=transaction.external_reference,
        )

    def get(self, owner_id: int, transaction_id: int) -> Transaction | None:
        rows = self._fetch(
            SELECT_TRANSACTIONS_SQL
            + " WHERE id = :transaction_id AND owner_id = :owner_id",
            {"transaction_id": transaction_id, "owner_id": owner_id},
        )
        return rows[0] if rows else None

    def save(self, transaction: Transaction) -> Transaction:
        """Persist state and editable fields, replacing tag links.

        Type, amount, accounts and the recorded timestamp are never
        rewritten.
        """
        query = text(
            """
            UPDATE transactions
            SET state = :state,
                description = :description,
                operation_date = :operation_date,
                category_id = :category_id
            WHERE id = :transaction_id AND owner_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {
                    "transaction_id": transaction.id,
                    "owner_id": transaction.owner_id,
                    "state": TransactionState(transaction.state).value,
                    "description": transaction.description,
                    "operation_date": transaction.operation_date.isoformat(),
                    "category_id": transaction.category_id,
                },
            )
            conn.execute(
                text(
                    "DELETE FROM transaction_tags "
                    "WHERE transaction_id = :transaction_id"
                ),
                {"transaction_id": transaction.id},
            )
            self._write_tags(conn, transaction.id, transaction.tag_ids)
        return transaction

    def fetch_for_account(self, account_id: int) -> list[Transaction]:
        return self._fetch(
            SELECT_TRANSACTIONS_SQL
            + """
            WHERE source_account_id = :account_id
               OR destination_account_id = :account_id
            ORDER BY operation_date, id
            """,
            {"account_id": account_id},
        )

    def fetch_in_period(
        self,
        owner_id: int,
        start_date: date,
        end_date: date,
    ) -> list[Transaction]:
        return self._fetch(
            SELECT_TRANSACTIONS_SQL
            + """
            WHERE owner_id = :owner_id
              AND operation_date >= :start_date
              AND operation_date <= :end_date
            ORDER BY operation_date, id
            """,
            {
                "owner_id": owner_id,
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
            },
        )

    def list_recent(
        self,
        owner_id: int,
        *,
        start_date: date | None = None,
        end_date: date | None = None,
        account_id: int | None = None,
        limit: int,
    ) -> list[Transaction]:
        sql = SELECT_TRANSACTIONS_SQL + " WHERE owner_id = :owner_id"
        params = {"owner_id": owner_id, "limit": limit}
        if start_date is not None:
            sql += " AND operation_date >= :start_date"
            params["start_date"] = start_date.isoformat()
        if end_date is not None:
            sql += " AND operation_date <= :end_date"
            params["end_date"] = end_date.isoformat()
        if account_id is not None:
            sql += (
                " AND (source_account_id = :account_id"
                " OR destination_account_id = :account_id)"
            )
            params["account_id"] = account_id
        sql += " ORDER BY operation_date DESC, id DESC LIMIT :limit"
        return self._fetch(sql, params)

    def _fetch(self, sql: str, params: dict) -> list[Transaction]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
            tags_by_tx: dict[int, set[int]] = defaultdict(set)
            if rows:
                links = conn.execute(
                    SELECT_TAG_LINKS_SQL,
                    {"transaction_ids": [row.id for row in rows]},
                ).all()
                for link in links:
                    tags_by_tx[link.transaction_id].add(link.tag_id)
        return [
            self._to_transaction(row, tags_by_tx.get(row.id, ()))
            for row in rows
        ]

    @staticmethod
    def _write_tags(conn, transaction_id: int, tag_ids) -> None:
        for tag_id in sorted(tag_ids):
            conn.execute(
                INSERT_TAG_LINK_SQL,
                {"transaction_id": transaction_id, "tag_id": tag_id},
            )

    @staticmethod
    def _to_transaction(row, tag_ids) -> Transaction:
        return Transaction(
            id=row.id,
            owner_id=row.owner_id,
            transaction_type=TransactionType(row.transaction_type),
            state=TransactionState(row.state),
            amount=coerce_decimal(row.amount),
            operation_date=date.fromisoformat(row.operation_date),
            recorded_at=datetime.fromisoformat(row.recorded_at),
            description=row.description,
            source_account_id=row.source_account_id,
            destination_account_id=row.destination_account_id,
            category_id=row.category_id,
            tag_ids=frozenset(tag_ids),
            external_reference=row.external_reference,
        )


__all__ = ["SqlAlchemyTransactionsRepository"]
