"""Alert service blueprint."""

from abc import ABC, abstractmethod

from humio_provider.base.models import Alert


class AlertsBlueprint(ABC):
    """Abstract interface for alert management within a repository."""

    @abstractmethod
    def list(self, repository: str) -> list[Alert]:
        """List all alerts in *repository*."""

    @abstractmethod
    def get(self, repository: str, name: str) -> Alert:
        """Fetch an alert by name.

        Raises:
            AlertNotFoundError: If no alert has that name.
        """

    @abstractmethod
    def create(self, repository: str, alert: Alert) -> Alert:
        """Create an alert and return it with its server-assigned ID."""

    @abstractmethod
    def update(self, repository: str, alert: Alert) -> Alert:
        """Replace the alert named ``alert.name``.

        The API has no update mutation, so the existing alert is deleted
        and a new one created. The returned alert carries a new ID.

        Raises:
            AlertNotFoundError: If there is nothing to replace.
            PartialUpdateError: If the delete went through but the create
                did not.
        """

    @abstractmethod
    def delete(self, repository: str, name: str) -> None:
        """Delete an alert by name."""

    @abstractmethod
    def delete_by_id(self, repository: str, alert_id: str) -> None:
        """Delete an alert by its server-assigned ID."""
