"""Universal service factory.

Provides :func:`universal_factory`, the single entry-point for creating
resource mappers. The function validates the config, builds a
:class:`~humio_provider.graphql.client.GraphQLClient` (unless one is
passed in) and returns a typed instance via ``@overload`` signatures so
IDEs can autocomplete methods.
"""

from typing import overload, Literal, Any

from humio_provider.base import (
    RepositoriesBlueprint,
    AlertsBlueprint,
    ActionsBlueprint,
    IngestTokensBlueprint,
    ParsersBlueprint,
    UsersBlueprint,
    existing_services,
)
from humio_provider.base.config import HumioConfig, validate_config
from humio_provider.graphql.client import GraphQLClient
from humio_provider.graphql.factory import SERVICE_REGISTRY


@overload
def universal_factory(
    service_name: Literal["repository"], config: dict | HumioConfig, client: GraphQLClient | None = None
) -> RepositoriesBlueprint: ...


@overload
def universal_factory(
    service_name: Literal["alert"], config: dict | HumioConfig, client: GraphQLClient | None = None
) -> AlertsBlueprint: ...


@overload
def universal_factory(
    service_name: Literal["action"], config: dict | HumioConfig, client: GraphQLClient | None = None
) -> ActionsBlueprint: ...


@overload
def universal_factory(
    service_name: Literal["ingest_token"], config: dict | HumioConfig, client: GraphQLClient | None = None
) -> IngestTokensBlueprint: ...


@overload
def universal_factory(
    service_name: Literal["parser"], config: dict | HumioConfig, client: GraphQLClient | None = None
) -> ParsersBlueprint: ...


@overload
def universal_factory(
    service_name: Literal["user"], config: dict | HumioConfig, client: GraphQLClient | None = None
) -> UsersBlueprint: ...


def universal_factory(
    service_name: existing_services,
    config: dict | HumioConfig,
    client: GraphQLClient | None = None,
) -> Any:
    """
    Universal factory function to create resource mappers by name.
    Args:
        service_name: The resource type (e.g. 'alert', 'repository').
        config: Configuration dictionary (or validated model) for the API.
        client: Optional existing transport to share between mappers.
    Returns:
        An instance of the requested mapper class.
    Raises:
        ValueError: If the resource type is not supported.
    """
    if service_name not in SERVICE_REGISTRY:
        raise ValueError(f"Unsupported service '{service_name}'")

    service_class = SERVICE_REGISTRY[service_name]
    if client is None:
        client = GraphQLClient(validate_config(config))
    return service_class(client)
