"""Ports for owner-scoped categories and tags."""

from collections.abc import Iterable
from typing import Protocol

from src.domain.models.catalog import Category, Tag


class CategoriesRepositoryPort(Protocol):
    """Port exposing read and write access to categories."""

    def add(self, category: Category) -> Category:
        """Persist a new category and return it with its id."""

    def get(self, owner_id: int, category_id: int) -> Category | None:
        """Return the owner's category or None."""

    def save(self, category: Category) -> Category:
        """Persist changes to an existing category."""

    def list_by_owner(
        self,
        owner_id: int,
        active_only: bool = False,
    ) -> list[Category]:
        """Return the owner's categories ordered by name."""

    def exists_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Return True when the name is taken, ignoring case."""


class TagsRepositoryPort(Protocol):
    """Port exposing read and write access to tags."""

    def add(self, tag: Tag) -> Tag:
        """Persist a new tag and return it with its id."""

    def get(self, owner_id: int, tag_id: int) -> Tag | None:
        """Return the owner's tag or None."""

    def save(self, tag: Tag) -> Tag:
        """Persist changes to an existing tag."""

    def list_by_owner(
        self,
        owner_id: int,
        active_only: bool = False,
    ) -> list[Tag]:
        """Return the owner's tags ordered by name."""

    def exists_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Return True when the name is taken, ignoring case."""

    def fetch_many(self, owner_id: int, tag_ids: Iterable[int]) -> list[Tag]:
        """Return the owner's tags among the given ids."""


__all__ = ["CategoriesRepositoryPort", "TagsRepositoryPort"]
