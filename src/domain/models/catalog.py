"""Domain models for owner-scoped classification: categories and tags."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Category:
    """Expense or income category; names are unique per owner ignoring case."""

    id: int | None
    owner_id: int
    name: str
    description: str | None
    color_hex: str
    active: bool = True

    def rename(self, name: str) -> "Category":
        return replace(self, name=name)

    def change_description(self, description: str | None) -> "Category":
        return replace(self, description=description)

    def change_color(self, color_hex: str) -> "Category":
        return replace(self, color_hex=color_hex)

    def deactivate(self) -> "Category":
        return replace(self, active=False)

    def activate(self) -> "Category":
        return replace(self, active=True)


@dataclass(frozen=True)
class CategoryPatch:
    """Optional changes for a category."""

    name: str | None = None
    description: str | None = None
    color_hex: str | None = None
    active: bool | None = None


@dataclass(frozen=True)
class Tag:
    """Free label attached to transactions; unique per owner ignoring case."""

    id: int | None
    owner_id: int
    name: str
    active: bool = True

    def rename(self, name: str) -> "Tag":
        return replace(self, name=name)

    def deactivate(self) -> "Tag":
        return replace(self, active=False)

    def activate(self) -> "Tag":
        return replace(self, active=True)


@dataclass(frozen=True)
class TagPatch:
    """Optional changes for a tag."""

    name: str | None = None
    active: bool | None = None


__all__ = ["Category", "CategoryPatch", "Tag", "TagPatch"]
