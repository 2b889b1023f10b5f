"""GraphQL transport and per-resource implementations for the Humio API."""

from .client import GraphQLClient
from .actions import Actions
from .alerts import Alerts
from .ingest_tokens import IngestTokens
from .parsers import Parsers
from .repositories import Repositories
from .users import Users

__all__ = [
    "GraphQLClient",
    "Actions",
    "Alerts",
    "IngestTokens",
    "Parsers",
    "Repositories",
    "Users",
]
