"""GraphQL implementation of the Users blueprint."""

from __future__ import annotations

from pydantic import BaseModel, Field

from humio_provider.base.users import UsersBlueprint
from humio_provider.base.models import User
from humio_provider.graphql.client import GraphQLClient

CURRENT_USER_QUERY = """
query CurrentUser {
  currentUser {
    id
    username
    fullName
    email
    isRoot
  }
}
"""


class _CurrentUserResponse(BaseModel):
    current_user: User = Field(alias="currentUser")


class Users(UsersBlueprint):
    """Humio users (read-only)."""

    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    def get_current(self) -> User:
        return self.client.query(CURRENT_USER_QUERY, None, _CurrentUserResponse).current_user
