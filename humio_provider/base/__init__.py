"""Abstract service blueprints and core utilities.

Every GraphQL mapper inherits from one of the blueprints defined here.
Import them to type-hint your own code or to build test doubles.
"""

from .repositories import RepositoriesBlueprint
from .alerts import AlertsBlueprint
from .actions import ActionsBlueprint
from .ingest_tokens import IngestTokensBlueprint
from .parsers import ParsersBlueprint
from .users import UsersBlueprint
from .supported_services import existing_services


__all__ = [
    "RepositoriesBlueprint",
    "AlertsBlueprint",
    "ActionsBlueprint",
    "IngestTokensBlueprint",
    "ParsersBlueprint",
    "UsersBlueprint",
    "existing_services",
]
