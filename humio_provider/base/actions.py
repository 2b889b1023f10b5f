"""Action (notification sink) service blueprint."""

from abc import ABC, abstractmethod

from humio_provider.base.models import Action


class ActionsBlueprint(ABC):
    """Abstract interface for action management within a repository.

    Actions are polymorphic: ``Action.type`` selects which settings block
    is sent and which GraphQL mutation is used.
    """

    @abstractmethod
    def list(self, repository: str) -> list[Action]:
        """List all actions in *repository*.

        Actions of a type this client cannot decode are kept with their
        ``type`` and no settings block.
        """

    @abstractmethod
    def get(self, repository: str, name: str) -> Action:
        """Fetch an action by name.

        Raises:
            ActionNotFoundError: If no action has that name.
            UnsupportedActionTypeError: If the action has a type this
                client cannot decode.
        """

    @abstractmethod
    def create(self, repository: str, action: Action) -> Action:
        """Create an action and return it with its server-assigned ID.

        Raises:
            UnsupportedActionTypeError: If ``action.type`` is unknown.
        """

    @abstractmethod
    def update(self, repository: str, action: Action) -> Action:
        """Replace the action named ``action.name`` via delete-then-create."""

    @abstractmethod
    def delete(self, repository: str, name: str) -> None:
        """Delete an action by name."""

    @abstractmethod
    def delete_by_id(self, repository: str, action_id: str) -> None:
        """Delete an action by its server-assigned ID."""
