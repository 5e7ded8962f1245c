"""Relational layout of the ledger.

Amounts are TEXT so every backend keeps exact decimals; dates and
timestamps are ISO-8601 TEXT so range filters compare correctly.
"""

from sqlalchemy.engine import Engine

CREATE_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS currencies (
        code VARCHAR(3) PRIMARY KEY,
        name TEXT NOT NULL,
        symbol TEXT NOT NULL,
        decimal_digits INTEGER NOT NULL DEFAULT 2,
        exchange_rate_to_base TEXT NOT NULL DEFAULT '1'
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS owners (
        id {pk},
        name TEXT NOT NULL,
        email TEXT NOT NULL UNIQUE,
        default_currency_code VARCHAR(3) REFERENCES currencies (code),
        active INTEGER NOT NULL DEFAULT 1,
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS owner_roles (
        owner_id INTEGER NOT NULL REFERENCES owners (id),
        role TEXT NOT NULL,
        PRIMARY KEY (owner_id, role)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS accounts (
        id {pk},
        owner_id INTEGER NOT NULL REFERENCES owners (id),
        name TEXT NOT NULL,
        account_type TEXT NOT NULL,
        currency_code VARCHAR(3) NOT NULL REFERENCES currencies (code),
        initial_balance TEXT NOT NULL,
        active INTEGER NOT NULL DEFAULT 1,
        created_at TEXT NOT NULL,
        UNIQUE (owner_id, name)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS categories (
        id {pk},
        owner_id INTEGER NOT NULL REFERENCES owners (id),
        name TEXT NOT NULL,
        name_key TEXT NOT NULL,
        description TEXT,
        color_hex VARCHAR(7) NOT NULL,
        active INTEGER NOT NULL DEFAULT 1,
        UNIQUE (owner_id, name_key)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS tags (
        id {pk},
        owner_id INTEGER NOT NULL REFERENCES owners (id),
        name TEXT NOT NULL,
        name_key TEXT NOT NULL,
        active INTEGER NOT NULL DEFAULT 1,
        UNIQUE (owner_id, name_key)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id {pk},
        owner_id INTEGER NOT NULL REFERENCES owners (id),
        transaction_type TEXT NOT NULL,
        state TEXT NOT NULL,
        amount TEXT NOT NULL,
        operation_date TEXT NOT NULL,
        recorded_at TEXT NOT NULL,
        description TEXT,
        external_reference TEXT,
        source_account_id INTEGER REFERENCES accounts (id),
        destination_account_id INTEGER REFERENCES accounts (id),
        category_id INTEGER REFERENCES categories (id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transaction_tags (
        transaction_id INTEGER NOT NULL REFERENCES transactions (id),
        tag_id INTEGER NOT NULL REFERENCES tags (id),
        PRIMARY KEY (transaction_id, tag_id)
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_owner_date
        ON transactions (owner_id, operation_date)
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_source
        ON transactions (source_account_id)
    """,
    """
    CREATE INDEX IF NOT EXISTS ix_transactions_destination
        ON transactions (destination_account_id)
    """,
)


def _primary_key_type(dialect_name: str) -> str:
    if dialect_name == "sqlite":
        return "INTEGER PRIMARY KEY"
    return "SERIAL PRIMARY KEY"


def ensure_schema(engine: Engine) -> None:
    """Create every ledger table and index that does not exist yet."""
    pk = _primary_key_type(engine.dialect.name)
    with engine.begin() as conn:
        for statement in CREATE_TABLES_SQL:
            conn.exec_driver_sql(statement.replace("{pk}", pk))


__all__ = ["CREATE_TABLES_SQL", "ensure_schema"]
