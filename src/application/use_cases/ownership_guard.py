"""Ownership guard resolving references on behalf of an acting owner.

Every lookup is scoped by owner id. A foreign id and a missing id produce
the same NotFoundError so callers never learn about other owners' data.
"""

from collections.abc import Iterable

from src.application.ports.accounts_repository import AccountsRepositoryPort
from src.application.ports.catalog_repository import (
    CategoriesRepositoryPort,
    TagsRepositoryPort,
)
from src.application.ports.owners_repository import OwnersRepositoryPort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.errors import InactiveReferenceError, NotFoundError
from src.domain.models import Account, Category, Owner, Tag, Transaction


class OwnershipGuard:
    """Resolve owner-scoped entities or fail with NotFoundError."""

    def __init__(
        self,
        owners: OwnersRepositoryPort,
        accounts: AccountsRepositoryPort,
        categories: CategoriesRepositoryPort,
        tags: TagsRepositoryPort,
        transactions: TransactionsRepositoryPort,
    ) -> None:
        self._owners = owners
        self._accounts = accounts
        self._categories = categories
        self._tags = tags
        self._transactions = transactions

    def require_owner(self, owner_id: int | None) -> Owner:
        if owner_id is None:
            raise NotFoundError("Owner not found: None")
        owner = self._owners.get(owner_id)
        if owner is None:
            raise NotFoundError(f"Owner not found: {owner_id}")
        return owner

    def require_active_owner(self, owner_id: int | None) -> Owner:
        """Resolve an owner allowed to write to the ledger."""
        owner = self.require_owner(owner_id)
        if not owner.active:
            raise InactiveReferenceError(f"Owner is not active: {owner_id}")
        return owner

    def resolve_account(
        self,
        owner_id: int,
        account_id: int | None,
    ) -> Account | None:
        """Return the owner's account, or None when no id was given."""
        if account_id is None:
            return None
        return self.require_account(owner_id, account_id)

    def require_account(self, owner_id: int, account_id: int) -> Account:
        account = self._accounts.get(owner_id, account_id)
        if account is None or account.owner_id != owner_id:
            raise NotFoundError(f"Account not found: {account_id}")
        return account

    def resolve_category(
        self,
        owner_id: int,
        category_id: int | None,
    ) -> Category | None:
        if category_id is None:
            return None
        return self.require_category(owner_id, category_id)

    def require_category(self, owner_id: int, category_id: int) -> Category:
        category = self._categories.get(owner_id, category_id)
        if category is None or category.owner_id != owner_id:
            raise NotFoundError(f"Category not found: {category_id}")
        return category

    def require_tag(self, owner_id: int, tag_id: int) -> Tag:
        tag = self._tags.get(owner_id, tag_id)
        if tag is None or tag.owner_id != owner_id:
            raise NotFoundError(f"Tag not found: {tag_id}")
        return tag

    def resolve_tags(
        self,
        owner_id: int,
        tag_ids: Iterable[int] | None,
    ) -> tuple[Tag, ...]:
        """Resolve a batch of tags as a whole.

        Duplicate ids are collapsed. If any id is missing or foreign the
        whole batch is rejected.

        Args:
            owner_id: Acting owner.
            tag_ids: Requested tag ids; None or empty means no tags.

        Returns:
            tuple[Tag, ...]: Resolved tags ordered by id.
        """
        requested = set(tag_ids or ())
        if not requested:
            return ()
        by_id = {
            tag.id: tag
            for tag in self._tags.fetch_many(owner_id, sorted(requested))
            if tag.owner_id == owner_id and tag.id in requested
        }
        if len(by_id) != len(requested):
            raise NotFoundError(
                "Some tag ids do not exist (or do not belong to owner)"
            )
        return tuple(by_id[tag_id] for tag_id in sorted(by_id))

    def require_transaction(
        self,
        owner_id: int,
        transaction_id: int,
    ) -> Transaction:
        transaction = self._transactions.get(owner_id, transaction_id)
        if transaction is None or transaction.owner_id != owner_id:
            raise NotFoundError(f"Transaction not found: {transaction_id}")
        return transaction


__all__ = ["OwnershipGuard"]
