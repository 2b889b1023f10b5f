"""Repository service blueprint."""

from abc import ABC, abstractmethod

from humio_provider.base.models import Repository


class RepositoriesBlueprint(ABC):
    """Abstract interface for repository (search domain) management.

    Unlike alerts, actions and parsers, repositories support in-place
    field updates, so ``update`` issues one mutation per field.
    """

    @abstractmethod
    def list(self) -> list[Repository]:
        """List every repository visible to the token.

        Returns:
            Repositories with ``id`` and ``name`` populated.
        """
        pass

    @abstractmethod
    def get(self, name: str) -> Repository:
        """Fetch a repository by name.

        Args:
            name: Repository name.

        Returns:
            The full repository record.

        Raises:
            RepositoryNotFoundError: If no repository has that name.
        """
        pass

    @abstractmethod
    def create(self, name: str) -> None:
        """Create an empty repository.

        Args:
            name: Repository name.
        """
        pass

    @abstractmethod
    def update_description(self, name: str, description: str) -> None:
        """Replace the repository description."""
        pass

    @abstractmethod
    def update_retention(self, name: str, retention_days: float) -> None:
        """Set time-based retention.

        Args:
            name: Repository name.
            retention_days: Days to keep data; ``0`` or less means unlimited.
        """
        pass

    @abstractmethod
    def update(self, repository: Repository) -> None:
        """Apply description and retention from *repository*."""
        pass

    @abstractmethod
    def delete(self, name: str, reason: str = "Deleted by humio-provider") -> None:
        """Delete a repository and all of its data.

        Args:
            name: Repository name.
            reason: Audit message recorded with the deletion.
        """
        pass
