"""Create/read/update/delete entry points for the infrastructure-as-code host.

Each resource class consumes and populates a flat
:class:`~humio_provider.resources.data.ResourceData`. Use
:func:`resource_factory` to build one on top of a configured mapper.
"""

from __future__ import annotations

from typing import Any

from humio_provider.base.config import HumioConfig
from humio_provider.factory import universal_factory
from humio_provider.graphql.client import GraphQLClient

from .data import ResourceData
from .base import Resource, compose_id, parse_repository_and_name
from .repository import RepositoryResource
from .alert import AlertResource
from .action import ActionResource
from .ingest_token import IngestTokenResource
from .parser import ParserResource
from .user import UserDataSource

RESOURCE_REGISTRY: dict[str, type] = {
    "repository": RepositoryResource,
    "alert": AlertResource,
    "action": ActionResource,
    "ingest_token": IngestTokenResource,
    "parser": ParserResource,
    "user": UserDataSource,
}


def resource_factory(
    resource_type: str,
    config: dict | HumioConfig,
    client: GraphQLClient | None = None,
) -> Any:
    """Build the resource class for *resource_type* over a GraphQL mapper.

    Raises:
        ValueError: If the resource type is not supported.
    """
    if resource_type not in RESOURCE_REGISTRY:
        raise ValueError(f"Unsupported resource '{resource_type}'")
    return RESOURCE_REGISTRY[resource_type](universal_factory(resource_type, config, client))


__all__ = [
    "ResourceData",
    "Resource",
    "compose_id",
    "parse_repository_and_name",
    "RepositoryResource",
    "AlertResource",
    "ActionResource",
    "IngestTokenResource",
    "ParserResource",
    "UserDataSource",
    "RESOURCE_REGISTRY",
    "resource_factory",
]
