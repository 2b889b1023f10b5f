"""GraphQL implementation of the IngestTokens blueprint."""

from __future__ import annotations

from typing import Any

from humio_provider.base.ingest_tokens import IngestTokensBlueprint
from humio_provider.base.exceptions import IngestTokenNotFoundError
from humio_provider.base.logger import hp_logger
from humio_provider.base.models import IngestToken
from humio_provider.graphql.client import GraphQLClient

LIST_INGEST_TOKENS_QUERY = """
query ListIngestTokens($RepositoryName: String!) {
  repository(name: $RepositoryName) {
    ingestTokens {
      name
      token
      parser {
        name
      }
    }
  }
}
"""

ADD_INGEST_TOKEN_MUTATION = """
mutation AddIngestToken($RepositoryName: String!, $Name: String!, $Parser: String) {
  addIngestTokenV3(input: {
    repositoryName: $RepositoryName
    name: $Name
    parser: $Parser
  }) {
    name
    token
    parser {
      name
    }
  }
}
"""

ASSIGN_PARSER_MUTATION = """
mutation AssignParser($RepositoryName: String!, $TokenName: String!, $ParserName: String!) {
  assignParserToIngestToken(input: {
    repositoryName: $RepositoryName
    tokenName: $TokenName
    parserName: $ParserName
  }) {
    name
    token
    parser {
      name
    }
  }
}
"""

UNASSIGN_PARSER_MUTATION = """
mutation UnassignParser($RepositoryName: String!, $TokenName: String!) {
  unassignParserFromIngestToken(input: {
    repositoryName: $RepositoryName
    tokenName: $TokenName
  }) {
    name
    token
    parser {
      name
    }
  }
}
"""

REMOVE_INGEST_TOKEN_MUTATION = """
mutation RemoveIngestToken($RepositoryName: String!, $Name: String!) {
  removeIngestToken(repositoryName: $RepositoryName, name: $Name) {
    __typename
  }
}
"""


def _token_from_response(raw: dict[str, Any]) -> IngestToken:
    parser = raw.get("parser")
    return IngestToken(
        name=raw["name"],
        token=raw.get("token") or "",
        assigned_parser=parser["name"] if parser else "",
    )


class IngestTokens(IngestTokensBlueprint):
    """Humio ingest tokens.

    Attributes:
        client: Shared GraphQL transport.
    """

    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    def list(self, repository: str) -> list[IngestToken]:
        data = self.client.query(LIST_INGEST_TOKENS_QUERY, {"RepositoryName": repository})
        repo = data.get("repository") or {}
        return [_token_from_response(t) for t in repo.get("ingestTokens") or []]

    def get(self, repository: str, name: str) -> IngestToken:
        for token in self.list(repository):
            if token.name == name:
                return token
        raise IngestTokenNotFoundError(f"ingest token not found: {name}")

    def create(self, repository: str, name: str, parser: str = "") -> IngestToken:
        variables: dict[str, Any] = {"RepositoryName": repository, "Name": name}
        if parser:
            variables["Parser"] = parser
        data = self.client.query(ADD_INGEST_TOKEN_MUTATION, variables)
        raw = data.get("addIngestTokenV3")
        hp_logger.info(f"Created ingest token '{name}'", resource="ingest_token", operation="create", repository=repository)
        if raw:
            return _token_from_response(raw)
        return self.get(repository, name)

    def update(self, repository: str, name: str, parser: str = "") -> IngestToken:
        """Change the parser bound to a token in place.

        Args:
            repository: Repository owning the token.
            name: Token name.
            parser: Parser to assign; empty unassigns the current one.

        Returns:
            The token as the server reports it after the change.
        """
        if parser:
            data = self.client.query(
                ASSIGN_PARSER_MUTATION,
                {"RepositoryName": repository, "TokenName": name, "ParserName": parser},
            )
            raw = data.get("assignParserToIngestToken")
        else:
            data = self.client.query(
                UNASSIGN_PARSER_MUTATION,
                {"RepositoryName": repository, "TokenName": name},
            )
            raw = data.get("unassignParserFromIngestToken")
        hp_logger.info(f"Updated ingest token '{name}'", resource="ingest_token", operation="update", repository=repository)
        if raw:
            return _token_from_response(raw)
        return self.get(repository, name)

    def delete(self, repository: str, name: str) -> None:
        self.client.query(
            REMOVE_INGEST_TOKEN_MUTATION,
            {"RepositoryName": repository, "Name": name},
        )
        hp_logger.info(f"Removed ingest token '{name}'", resource="ingest_token", operation="delete", repository=repository)
