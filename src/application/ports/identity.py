"""Port for resolving the acting owner from an external credential."""

from typing import Protocol

from src.domain.models.owners import Owner


class IdentityPort(Protocol):
    """Port implemented by the identity collaborator.

    The core never issues or verifies credentials; it only receives the
    owner a token stands for.
    """

    def resolve_owner(self, token: str) -> Owner:
        """Return the owner for a token or raise NotFoundError."""


__all__ = ["IdentityPort"]
