"""GraphQL service factory.

Maps resource names to their GraphQL implementations.
``SERVICE_REGISTRY`` is consumed by :func:`humio_provider.factory.universal_factory`.
"""

from humio_provider.graphql.repositories import Repositories
from humio_provider.graphql.alerts import Alerts
from humio_provider.graphql.actions import Actions
from humio_provider.graphql.ingest_tokens import IngestTokens
from humio_provider.graphql.parsers import Parsers
from humio_provider.graphql.users import Users


# Service registry for the GraphQL API
SERVICE_REGISTRY: dict[str, type] = {
    "repository": Repositories,
    "alert": Alerts,
    "action": Actions,
    "ingest_token": IngestTokens,
    "parser": Parsers,
    "user": Users,
}
