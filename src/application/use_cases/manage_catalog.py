"""Use cases for owner categories and tags.

Names are unique per owner ignoring case, counting inactive entries too.
"""

from src.application.ports.catalog_repository import (
    CategoriesRepositoryPort,
    TagsRepositoryPort,
)
from src.application.use_cases.ownership_guard import OwnershipGuard
from src.domain.constants import DEFAULT_CATEGORY_COLOR
from src.domain.errors import DuplicateNameError
from src.domain.models import Category, CategoryPatch, Tag, TagPatch
from src.domain.services.normalization import (
    normalize_color_hex,
    normalize_description,
    normalize_name,
)
from src.infrastructure.logging.logger import get_app_logger


class CreateCategoryUseCase:
    """Create a category for an owner."""

    def __init__(
        self,
        guard: OwnershipGuard,
        categories: CategoriesRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._categories = categories
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: int,
        name: str,
        description: str | None = None,
        color_hex: str | None = None,
    ) -> Category:
        """Create the category.

        Raises:
            NotFoundError: Unknown owner.
            InvalidInputError: Blank name or malformed color.
            DuplicateNameError: Name already used, ignoring case.
        """
        self._guard.require_active_owner(owner_id)
        clean_name = normalize_name(name)
        color = normalize_color_hex(color_hex or DEFAULT_CATEGORY_COLOR)
        if self._categories.exists_name(owner_id, clean_name):
            self._logger.warning(
                f"Duplicate category name for owner={owner_id}: {clean_name}"
            )
            raise DuplicateNameError(
                "Category with that name already exists for this owner"
            )
        category = self._categories.add(
            Category(
                id=None,
                owner_id=owner_id,
                name=clean_name,
                description=normalize_description(description),
                color_hex=color,
                active=True,
            )
        )
        self._logger.info(
            f"Created category id={category.id} owner={owner_id}"
        )
        return category


class UpdateCategoryUseCase:
    """Rename, describe, re-color, or toggle a category."""

    def __init__(
        self,
        guard: OwnershipGuard,
        categories: CategoriesRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._categories = categories
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: int,
        category_id: int,
        patch: CategoryPatch,
    ) -> Category:
        self._guard.require_active_owner(owner_id)
        category = self._guard.require_category(owner_id, category_id)
        updated = category
        if patch.name is not None:
            clean_name = normalize_name(patch.name)
            if self._categories.exists_name(
                owner_id,
                clean_name,
                exclude_id=category_id,
            ):
                raise DuplicateNameError(
                    "Category with that name already exists for this owner"
                )
            updated = updated.rename(clean_name)
        if patch.description is not None:
            updated = updated.change_description(
                normalize_description(patch.description)
            )
        if patch.color_hex is not None:
            updated = updated.change_color(normalize_color_hex(patch.color_hex))
        if patch.active is not None:
            updated = updated.activate() if patch.active else updated.deactivate()

        if updated == category:
            return category
        saved = self._categories.save(updated)
        self._logger.info(f"Updated category id={category_id} owner={owner_id}")
        return saved


class ListCategoriesUseCase:
    """List an owner's categories."""

    def __init__(
        self,
        guard: OwnershipGuard,
        categories: CategoriesRepositoryPort,
    ) -> None:
        self._guard = guard
        self._categories = categories

    def execute(self, owner_id: int, active_only: bool = False) -> list[Category]:
        self._guard.require_owner(owner_id)
        return self._categories.list_by_owner(owner_id, active_only)


class CreateTagUseCase:
    """Create a tag for an owner."""

    def __init__(
        self,
        guard: OwnershipGuard,
        tags: TagsRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._tags = tags
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: int, name: str) -> Tag:
        self._guard.require_active_owner(owner_id)
        clean_name = normalize_name(name)
        if self._tags.exists_name(owner_id, clean_name):
            self._logger.warning(
                f"Duplicate tag name for owner={owner_id}: {clean_name}"
            )
            raise DuplicateNameError(
                "Tag with that name already exists for this owner"
            )
        tag = self._tags.add(
            Tag(id=None, owner_id=owner_id, name=clean_name, active=True)
        )
        self._logger.info(f"Created tag id={tag.id} owner={owner_id}")
        return tag


class UpdateTagUseCase:
    """Rename, archive, or reactivate a tag."""

    def __init__(
        self,
        guard: OwnershipGuard,
        tags: TagsRepositoryPort,
        logger=None,
    ) -> None:
        self._guard = guard
        self._tags = tags
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: int, tag_id: int, patch: TagPatch) -> Tag:
        self._guard.require_active_owner(owner_id)
        tag = self._guard.require_tag(owner_id, tag_id)
        updated = tag
        if patch.name is not None:
            clean_name = normalize_name(patch.name)
            if self._tags.exists_name(owner_id, clean_name, exclude_id=tag_id):
                raise DuplicateNameError(
                    "Tag with that name already exists for this owner"
                )
            updated = updated.rename(clean_name)
        if patch.active is not None:
            updated = updated.activate() if patch.active else updated.deactivate()

        if updated == tag:
            return tag
        saved = self._tags.save(updated)
        self._logger.info(f"Updated tag id={tag_id} owner={owner_id}")
        return saved


class ListTagsUseCase:
    """List an owner's tags."""

    def __init__(self, guard: OwnershipGuard, tags: TagsRepositoryPort) -> None:
        self._guard = guard
        self._tags = tags

    def execute(self, owner_id: int, active_only: bool = False) -> list[Tag]:
        self._guard.require_owner(owner_id)
        return self._tags.list_by_owner(owner_id, active_only)


__all__ = [
    "CreateCategoryUseCase",
    "UpdateCategoryUseCase",
    "ListCategoriesUseCase",
    "CreateTagUseCase",
    "UpdateTagUseCase",
    "ListTagsUseCase",
]
