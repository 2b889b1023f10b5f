"""Shared plumbing for the create/read/update/delete entry points."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator

from humio_provider.base.exceptions import HumioError
from humio_provider.base.logger import hp_logger
from humio_provider.resources.data import ResourceData

ID_SEPARATOR = "+"


def compose_id(repository: str, name: str) -> str:
    """Build the ``REPOSITORY+NAME`` identifier of a repository-scoped resource."""
    return f"{repository}{ID_SEPARATOR}{name}"


def parse_repository_and_name(resource_id: str) -> tuple[str, str]:
    """Split a ``REPOSITORY+NAME`` identifier.

    Raises:
        ValueError: If either part is missing.
    """
    repository, _, name = resource_id.partition(ID_SEPARATOR)
    if not repository or not name:
        raise ValueError(
            f"invalid id '{resource_id}': expected the form REPOSITORY{ID_SEPARATOR}NAME"
        )
    return repository, name


class Resource(ABC):
    """One resource type as seen by the host framework.

    Subclasses translate between :class:`ResourceData` and the typed
    records of their mapper (``self.service``).
    """

    resource_type: str = ""

    def __init__(self, service: Any) -> None:
        self.service = service

    @contextmanager
    def _operation(self, operation: str, repository: str | None = None) -> Iterator[None]:
        """Log a failed operation with its context and let the error propagate."""
        try:
            yield
        except (HumioError, ValueError) as e:
            hp_logger.error(
                f"could not {operation} {self.resource_type}: {e}",
                resource=self.resource_type, operation=operation, repository=repository,
            )
            raise

    @abstractmethod
    def create(self, data: ResourceData) -> None:
        """Create the remote resource from *data*, then refresh *data*."""

    @abstractmethod
    def read(self, data: ResourceData) -> None:
        """Populate *data* from the remote resource."""

    @abstractmethod
    def update(self, data: ResourceData) -> None:
        """Bring the remote resource in line with *data*, then refresh *data*."""

    @abstractmethod
    def delete(self, data: ResourceData) -> None:
        """Delete the remote resource and clear ``data.id``."""


class RepositoryScopedResource(Resource):
    """A resource living inside a repository and identified by ``REPOSITORY+NAME``."""

    def _locate(self, data: ResourceData) -> tuple[str, str]:
        """Return (repository, name) from the attributes, or from the ID on import."""
        repository, ok = data.get_ok("repository")
        if not ok:
            repository, name = parse_repository_and_name(data.id)
            data.set("repository", repository)
            data.set("name", name)
            return repository, name
        return repository, data.get("name")
