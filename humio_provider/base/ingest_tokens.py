"""Ingest token service blueprint."""

from abc import ABC, abstractmethod

from humio_provider.base.models import IngestToken


class IngestTokensBlueprint(ABC):
    """Abstract interface for ingest tokens.

    Tokens are addressed by name within a repository and may be bound to
    one parser.
    """

    @abstractmethod
    def list(self, repository: str) -> list[IngestToken]:
        """List the ingest tokens of *repository*."""

    @abstractmethod
    def get(self, repository: str, name: str) -> IngestToken:
        """Fetch a token by name.

        Raises:
            IngestTokenNotFoundError: If no token has that name.
        """

    @abstractmethod
    def create(self, repository: str, name: str, parser: str = "") -> IngestToken:
        """Create a token, optionally bound to *parser*."""

    @abstractmethod
    def update(self, repository: str, name: str, parser: str = "") -> IngestToken:
        """Assign *parser* to the token, or unassign when empty."""

    @abstractmethod
    def delete(self, repository: str, name: str) -> None:
        """Remove a token."""
