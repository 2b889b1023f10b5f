"""
Synchronous GraphQL client for the Humio API.

All operations use: POST <address>/graphql
Authentication: Authorization: Bearer <token>

One request per call. Nothing is retried; every failure is surfaced as a
:class:`~humio_provider.base.exceptions.HumioError` subclass.
"""

from __future__ import annotations

import re
from typing import Any, TypeVar, overload

import requests
from pydantic import BaseModel, Field, ValidationError

from humio_provider.base.config import HumioConfig
from humio_provider.base.exceptions import GraphQLError, HTTPStatusError, TransportError
from humio_provider.base.logger import hp_logger

T = TypeVar("T", bound=BaseModel)

_OPERATION_NAME = re.compile(r"^\s*(?:query|mutation)\s+(\w+)")


class GraphQLErrorEntry(BaseModel):
    message: str = ""
    path: list[Any] | None = None
    extensions: dict[str, Any] | None = None


class GraphQLResponse(BaseModel):
    """The ``{data, errors}`` envelope every response is decoded into."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLErrorEntry] = Field(default_factory=list)


def operation_name(query: str) -> str:
    """Return the operation name declared by *query*, or ``"anonymous"``."""
    match = _OPERATION_NAME.match(query)
    return match.group(1) if match else "anonymous"


class GraphQLClient:
    """Thin wrapper around a :class:`requests.Session` bound to one Humio instance.

    Attributes:
        config: Validated connection settings.
        session: Session carrying the bearer token and CA bundle.
    """

    def __init__(self, config: HumioConfig) -> None:
        self.config = config
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {config.api_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        if config.ca_certificate_path:
            self.session.verify = config.ca_certificate_path

    @property
    def graphql_url(self) -> str:
        return self.config.graphql_url

    @overload
    def query(self, query: str, variables: dict[str, Any] | None = None, target: None = None) -> dict[str, Any]: ...

    @overload
    def query(self, query: str, variables: dict[str, Any] | None, target: type[T]) -> T: ...

    def query(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        target: type[BaseModel] | None = None,
    ) -> Any:
        """Execute a query or mutation.

        Args:
            query: GraphQL document.
            variables: Variable values keyed by variable name.
            target: Optional pydantic model to decode ``data`` into.

        Returns:
            ``target`` instance when given, otherwise the ``data`` dict
            (``{}`` when the server returned null).

        Raises:
            TransportError: Network failure or undecodable response.
            HTTPStatusError: Any status other than 200.
            GraphQLError: The envelope reported one or more errors.
        """
        name = operation_name(query)
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        hp_logger.debug(f"POST {self.graphql_url}", resource="graphql", operation=name)
        try:
            response = self.session.post(self.graphql_url, json=payload)
        except requests.RequestException as e:
            hp_logger.error(f"failed to execute request: {e}", resource="graphql", operation=name)
            raise TransportError(f"failed to execute request: {e}") from e

        if response.status_code != 200:
            hp_logger.error(f"unexpected status code {response.status_code}", resource="graphql", operation=name)
            raise HTTPStatusError(response.status_code, response.text)

        try:
            envelope = GraphQLResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            hp_logger.error(f"failed to unmarshal response: {e}", resource="graphql", operation=name)
            raise TransportError(f"failed to unmarshal response: {e}") from e

        if envelope.errors:
            error = GraphQLError([entry.model_dump(exclude_none=True) for entry in envelope.errors])
            hp_logger.error(str(error), resource="graphql", operation=name)
            raise error

        data = envelope.data or {}
        if target is None:
            return data
        try:
            return target.model_validate(data)
        except ValidationError as e:
            hp_logger.error(f"failed to unmarshal data: {e}", resource="graphql", operation=name)
            raise TransportError(f"failed to unmarshal data: {e}") from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> GraphQLClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
