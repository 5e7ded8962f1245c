"""Local identity adapter keyed by owner email."""

from src.application.ports.identity import IdentityPort
from src.application.ports.owners_repository import OwnersRepositoryPort
from src.domain.errors import InvalidInputError, NotFoundError
from src.domain.models.owners import Owner
from src.domain.services.normalization import normalize_email


class EmailIdentityAdapter(IdentityPort):
    """Treat the token as an owner email.

    Stands in for a real authentication collaborator in the CLI and the
    dashboard, which run on a trusted machine.
    """

    def __init__(self, owners: OwnersRepositoryPort) -> None:
        self._owners = owners

    def resolve_owner(self, token: str) -> Owner:
        if not token or not token.strip():
            raise NotFoundError("Owner not found: empty identity")
        try:
            email = normalize_email(token)
        except InvalidInputError as exc:
            raise NotFoundError(f"Owner not found: {token}") from exc
        owner = self._owners.get_by_email(email)
        if owner is None:
            raise NotFoundError(f"Owner not found: {email}")
        return owner


__all__ = ["EmailIdentityAdapter"]
