"""SQLAlchemy-backed repositories for categories and tags."""

from collections.abc import Iterable

from sqlalchemy import bindparam, text

from src.application.ports.catalog_repository import (
    CategoriesRepositoryPort,
    TagsRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.catalog import Category, Tag
from src.domain.services.normalization import name_key

SELECT_CATEGORIES_SQL = """
    SELECT id, owner_id, name, description, color_hex, active
    FROM categories
"""

SELECT_TAGS_SQL = """
    SELECT id, owner_id, name, active
    FROM tags
"""


def _name_exists(
    engine,
    table: str,
    owner_id: int,
    name: str,
    exclude_id: int | None,
) -> bool:
    sql = (
        f"SELECT 1 FROM {table} "
        "WHERE owner_id = :owner_id AND name_key = :name_key"
    )
    params = {"owner_id": owner_id, "name_key": name_key(name)}
    if exclude_id is not None:
        sql += " AND id <> :exclude_id"
        params["exclude_id"] = exclude_id
    with engine.connect() as conn:
        return conn.execute(text(sql), params).first() is not None


class SqlAlchemyCategoriesRepository(CategoriesRepositoryPort):
    """Repository backed by SQLAlchemy for categories."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def add(self, category: Category) -> Category:
        query = text(
            """
            INSERT INTO categories (
                owner_id, name, name_key, description, color_hex, active
            )
            VALUES (
                :owner_id, :name, :name_key, :description, :color_hex, :active
            )
            RETURNING id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            category_id = conn.execute(
                query,
                {
                    "owner_id": category.owner_id,
                    "name": category.name,
                    "name_key": name_key(category.name),
                    "description": category.description,
                    "color_hex": category.color_hex,
                    "active": int(category.active),
                },
            ).scalar_one()
        return Category(
            id=category_id,
            owner_id=category.owner_id,
            name=category.name,
            description=category.description,
            color_hex=category.color_hex,
            active=category.active,
        )

    def get(self, owner_id: int, category_id: int) -> Category | None:
        query = text(
            SELECT_CATEGORIES_SQL
            + " WHERE id = :category_id AND owner_id = :owner_id"
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                query,
                {"category_id": category_id, "owner_id": owner_id},
            ).first()
        return self._to_category(row) if row is not None else None

    def save(self, category: Category) -> Category:
        query = text(
            """
            UPDATE categories
            SET name = :name,
                name_key = :name_key,
                description = :description,
                color_hex = :color_hex,
                active = :active
            WHERE id = :category_id AND owner_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {
                    "category_id": category.id,
                    "owner_id": category.owner_id,
                    "name": category.name,
                    "name_key": name_key(category.name),
                    "description": category.description,
                    "color_hex": category.color_hex,
                    "active": int(category.active),
                },
            )
        return category

    def list_by_owner(
        self,
        owner_id: int,
        active_only: bool = False,
    ) -> list[Category]:
        sql = SELECT_CATEGORIES_SQL + " WHERE owner_id = :owner_id"
        if active_only:
            sql += " AND active = 1"
        query = text(sql + " ORDER BY name_key, id")
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"owner_id": owner_id}).all()
        return [self._to_category(row) for row in rows]

    def exists_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> bool:
        return _name_exists(
            self._db_port.get_ledger_engine(),
            "categories",
            owner_id,
            name,
            exclude_id,
        )

    @staticmethod
    def _to_category(row) -> Category:
        return Category(
            id=row.id,
            owner_id=row.owner_id,
            name=row.name,
            description=row.description,
            color_hex=row.color_hex,
            active=bool(row.active),
        )


class SqlAlchemyTagsRepository(TagsRepositoryPort):
    """Repository backed by SQLAlchemy for tags."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def add(self, tag: Tag) -> Tag:
        query = text(
            """
            INSERT INTO tags (owner_id, name, name_key, active)
            VALUES (:owner_id, :name, :name_key, :active)
            RETURNING id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            tag_id = conn.execute(
                query,
                {
                    "owner_id": tag.owner_id,
                    "name": tag.name,
                    "name_key": name_key(tag.name),
                    "active": int(tag.active),
                },
            ).scalar_one()
        return Tag(
            id=tag_id,
            owner_id=tag.owner_id,
            name=tag.name,
            active=tag.active,
        )

    def get(self, owner_id: int, tag_id: int) -> Tag | None:
        query = text(
            SELECT_TAGS_SQL + " WHERE id = :tag_id AND owner_id = :owner_id"
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                query,
                {"tag_id": tag_id, "owner_id": owner_id},
            ).first()
        return self._to_tag(row) if row is not None else None

    def save(self, tag: Tag) -> Tag:
        query = text(
            """
            UPDATE tags
            SET name = :name, name_key = :name_key, active = :active
            WHERE id = :tag_id AND owner_id = :owner_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {
                    "tag_id": tag.id,
                    "owner_id": tag.owner_id,
                    "name": tag.name,
                    "name_key": name_key(tag.name),
                    "active": int(tag.active),
                },
            )
        return tag

    def list_by_owner(
        self,
        owner_id: int,
        active_only: bool = False,
    ) -> list[Tag]:
        sql = SELECT_TAGS_SQL + " WHERE owner_id = :owner_id"
        if active_only:
            sql += " AND active = 1"
        query = text(sql + " ORDER BY name_key, id")
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"owner_id": owner_id}).all()
        return [self._to_tag(row) for row in rows]

    def exists_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> bool:
        return _name_exists(
            self._db_port.get_ledger_engine(),
            "tags",
            owner_id,
            name,
            exclude_id,
        )

    def fetch_many(self, owner_id: int, tag_ids: Iterable[int]) -> list[Tag]:
        ids = list(tag_ids)
        if not ids:
            return []
        query = text(
            SELECT_TAGS_SQL
            + " WHERE owner_id = :owner_id AND id IN :tag_ids ORDER BY id"
        ).bindparams(bindparam("tag_ids", expanding=True))
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                query,
                {"owner_id": owner_id, "tag_ids": ids},
            ).all()
        return [self._to_tag(row) for row in rows]

    @staticmethod
    def _to_tag(row) -> Tag:
        return Tag(
            id=row.id,
            owner_id=row.owner_id,
            name=row.name,
            active=bool(row.active),
        )


__all__ = ["SqlAlchemyCategoriesRepository", "SqlAlchemyTagsRepository"]
