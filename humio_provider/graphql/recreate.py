"""
Emulated update for resources the API cannot mutate in place.

Alerts, actions and parsers are "updated" by deleting the current
resource and creating a replacement under the same name. The two calls
are not atomic: if the create fails, the resource is gone. That window is
reported as :class:`~humio_provider.base.exceptions.PartialUpdateError`
so callers can tell it apart from an ordinary failure.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from humio_provider.base.exceptions import HumioError, PartialUpdateError
from humio_provider.base.logger import hp_logger

T = TypeVar("T")


def recreate(
    kind: str,
    repository: str,
    name: str,
    existing_id: str,
    delete: Callable[[str, str], None],
    create: Callable[[], T],
) -> T:
    """Delete *existing_id* then run *create*.

    Args:
        kind: Resource type, used in log records and errors.
        repository: Repository the resource lives in.
        name: Resource name (unchanged by the update).
        existing_id: Server ID of the resource being replaced.
        delete: ``delete_by_id(repository, id)`` of the owning mapper.
        create: Zero-argument callable creating the replacement.

    Returns:
        Whatever *create* returns.

    Raises:
        HumioError: If the delete fails; nothing has changed remotely.
        PartialUpdateError: If the create fails after the delete.
    """
    delete(repository, existing_id)
    try:
        created = create()
    except HumioError as e:
        hp_logger.error(
            f"{kind} '{name}' deleted but not recreated: {e}",
            resource=kind, operation="update", repository=repository,
        )
        raise PartialUpdateError(kind, name, existing_id) from e
    hp_logger.info(
        f"Replaced {kind} '{name}'",
        resource=kind, operation="update", repository=repository,
    )
    return created
