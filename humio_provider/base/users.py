"""User service blueprint."""

from abc import ABC, abstractmethod

from humio_provider.base.models import User


class UsersBlueprint(ABC):
    """Read-only access to the user owning the API token."""

    @abstractmethod
    def get_current(self) -> User:
        """Return the authenticated user."""
