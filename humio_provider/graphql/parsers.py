"""GraphQL implementation of the Parsers blueprint."""

from __future__ import annotations

from typing import Any

from humio_provider.base.parsers import ParsersBlueprint
from humio_provider.base.exceptions import ParserNotFoundError
from humio_provider.base.logger import hp_logger
from humio_provider.base.models import Parser
from humio_provider.graphql.client import GraphQLClient
from humio_provider.graphql.recreate import recreate

LIST_PARSERS_QUERY = """
query ListParsers($RepositoryName: String!) {
  repository(name: $RepositoryName) {
    parsers {
      id
      name
      isBuiltIn
    }
  }
}
"""

GET_PARSER_QUERY = """
query GetParser($RepositoryName: String!, $ParserName: String!) {
  repository(name: $RepositoryName) {
    parser(name: $ParserName) {
      id
      name
      script
      testCases {
        event {
          rawString
        }
      }
      fieldsToTag
    }
  }
}
"""

CREATE_PARSER_MUTATION = """
mutation CreateParser(
  $RepositoryName: RepoOrViewName!
  $Name: String!
  $Script: String!
  $TestCases: [ParserTestCaseInput!]!
  $FieldsToTag: [String!]!
  $FieldsToBeRemovedBeforeParsing: [String!]!
) {
  createParserV2(input: {
    repositoryName: $RepositoryName
    name: $Name
    script: $Script
    testCases: $TestCases
    fieldsToTag: $FieldsToTag
    fieldsToBeRemovedBeforeParsing: $FieldsToBeRemovedBeforeParsing
  }) {
    id
    name
  }
}
"""

DELETE_PARSER_MUTATION = """
mutation DeleteParser($RepositoryName: RepoOrViewName!, $ParserID: String!) {
  deleteParser(input: {
    repositoryName: $RepositoryName
    id: $ParserID
  }) {
    __typename
  }
}
"""


class Parsers(ParsersBlueprint):
    """Humio parsers.

    Built-in parsers are read-only and never returned by :meth:`list`.

    Attributes:
        client: Shared GraphQL transport.
    """

    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    def list(self, repository: str) -> list[Parser]:
        data = self.client.query(LIST_PARSERS_QUERY, {"RepositoryName": repository})
        repo = data.get("repository") or {}
        return [
            Parser(id=p["id"], name=p["name"], script="")
            for p in repo.get("parsers") or []
            if not p.get("isBuiltIn")
        ]

    def get(self, repository: str, name: str) -> Parser:
        data = self.client.query(
            GET_PARSER_QUERY,
            {"RepositoryName": repository, "ParserName": name},
        )
        raw = (data.get("repository") or {}).get("parser")
        if not raw:
            raise ParserNotFoundError(f"parser not found: {name}")
        return Parser(
            id=raw["id"],
            name=raw["name"],
            script=raw.get("script") or "",
            fields_to_tag=raw.get("fieldsToTag") or [],
            test_cases=[tc["event"]["rawString"] for tc in raw.get("testCases") or []],
        )

    def create(self, repository: str, parser: Parser) -> Parser:
        variables: dict[str, Any] = {
            "RepositoryName": repository,
            "Name": parser.name,
            "Script": parser.script,
            "TestCases": [{"event": {"rawString": raw}} for raw in parser.test_cases],
            "FieldsToTag": parser.fields_to_tag,
            "FieldsToBeRemovedBeforeParsing": [],
        }
        data = self.client.query(CREATE_PARSER_MUTATION, variables)
        created = data.get("createParserV2") or {}
        hp_logger.info(f"Created parser '{parser.name}'", resource="parser", operation="create", repository=repository)
        return parser.model_copy(update={"id": created.get("id", "")})

    def update(self, repository: str, parser: Parser) -> Parser:
        existing = self.get(repository, parser.name)
        return recreate(
            "parser", repository, parser.name, existing.id,
            self.delete_by_id,
            lambda: self.create(repository, parser),
        )

    def delete(self, repository: str, name: str) -> None:
        parser = self.get(repository, name)
        self.delete_by_id(repository, parser.id)

    def delete_by_id(self, repository: str, parser_id: str) -> None:
        self.client.query(
            DELETE_PARSER_MUTATION,
            {"RepositoryName": repository, "ParserID": parser_id},
        )
        hp_logger.info(f"Deleted parser {parser_id}", resource="parser", operation="delete", repository=repository)
