"""humio-provider: declarative management of Humio resources over GraphQL.

Entry point for the library. Import :func:`universal_factory` to create
any resource mapper with a single call::

    from humio_provider import universal_factory

    alerts = universal_factory("alert", {"address": "https://cloud.humio.com", "api_token": "..."})
    alerts.get("my-repo", "errors-spike")
"""

from .base import (
    RepositoriesBlueprint,
    AlertsBlueprint,
    ActionsBlueprint,
    IngestTokensBlueprint,
    ParsersBlueprint,
    UsersBlueprint,
)
from .factory import universal_factory

__all__ = [
    "RepositoriesBlueprint",
    "AlertsBlueprint",
    "ActionsBlueprint",
    "IngestTokensBlueprint",
    "ParsersBlueprint",
    "UsersBlueprint",
    "universal_factory",
]
