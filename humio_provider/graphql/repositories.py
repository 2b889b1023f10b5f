"""GraphQL implementation of the Repositories blueprint."""

from __future__ import annotations

from typing import Any

from humio_provider.base.repositories import RepositoriesBlueprint
from humio_provider.base.exceptions import RepositoryNotFoundError
from humio_provider.base.logger import hp_logger
from humio_provider.base.models import Repository
from humio_provider.graphql.client import GraphQLClient

GET_REPOSITORY_QUERY = """
query GetRepository($RepositoryName: String!) {
  repository(name: $RepositoryName) {
    id
    name
    description
    timeBasedRetention
  }
}
"""

LIST_REPOSITORIES_QUERY = """
query ListRepositories {
  repositories {
    id
    name
  }
}
"""

CREATE_REPOSITORY_MUTATION = """
mutation CreateRepository($Name: String!) {
  createRepository(name: $Name) {
    __typename
  }
}
"""

UPDATE_DESCRIPTION_MUTATION = """
mutation UpdateDescription($RepositoryName: String!, $Description: String!) {
  updateDescriptionForSearchDomain(name: $RepositoryName, newDescription: $Description) {
    __typename
  }
}
"""

UPDATE_RETENTION_MUTATION = """
mutation UpdateTimeBasedRetention($RepositoryName: String!, $RetentionDays: Float) {
  updateRetention(
    repositoryName: $RepositoryName
    timeBasedRetention: $RetentionDays
  ) {
    repository {
      id
      name
      ... on Repository {
        timeBasedRetention
      }
    }
  }
}
"""

DELETE_REPOSITORY_MUTATION = """
mutation DeleteRepository($RepositoryName: String!, $Reason: String) {
  deleteSearchDomain(name: $RepositoryName, deleteMessage: $Reason) {
    result
  }
}
"""


class Repositories(RepositoriesBlueprint):
    """Humio repositories.

    Attributes:
        client: Shared GraphQL transport.
    """

    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    def list(self) -> list[Repository]:
        data = self.client.query(LIST_REPOSITORIES_QUERY)
        return [
            Repository(id=r["id"], name=r["name"])
            for r in data.get("repositories") or []
        ]

    def get(self, name: str) -> Repository:
        """Fetch a repository by name.

        Raises:
            RepositoryNotFoundError: If the server returns no repository.
        """
        data = self.client.query(GET_REPOSITORY_QUERY, {"RepositoryName": name})
        raw = data.get("repository")
        if not raw:
            raise RepositoryNotFoundError(f"repository not found: {name}")
        retention = raw.get("timeBasedRetention")
        return Repository(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description") or "",
            retention_days=retention if retention is not None else 0.0,
        )

    def create(self, name: str) -> None:
        self.client.query(CREATE_REPOSITORY_MUTATION, {"Name": name})
        hp_logger.info(f"Created repository '{name}'", resource="repository", operation="create", repository=name)

    def update_description(self, name: str, description: str) -> None:
        self.client.query(
            UPDATE_DESCRIPTION_MUTATION,
            {"RepositoryName": name, "Description": description},
        )

    def update_retention(self, name: str, retention_days: float) -> None:
        """Set time-based retention.

        The variable is left out for ``retention_days <= 0``, which the API
        treats as null, i.e. unlimited retention.
        """
        variables: dict[str, Any] = {"RepositoryName": name}
        if retention_days > 0:
            variables["RetentionDays"] = retention_days
        self.client.query(UPDATE_RETENTION_MUTATION, variables)

    def update(self, repository: Repository) -> None:
        self.update_description(repository.name, repository.description)
        self.update_retention(repository.name, repository.retention_days)
        hp_logger.info(
            f"Updated repository '{repository.name}'",
            resource="repository", operation="update", repository=repository.name,
        )

    def delete(self, name: str, reason: str = "Deleted by humio-provider") -> None:
        self.client.query(
            DELETE_REPOSITORY_MUTATION,
            {"RepositoryName": name, "Reason": reason},
        )
        hp_logger.info(f"Deleted repository '{name}'", resource="repository", operation="delete", repository=name)
