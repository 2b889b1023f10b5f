"""
humio-provider exception hierarchy.

Every failure inherits from :class:`HumioError`. Transport-level problems,
HTTP status failures and GraphQL-reported errors each get their own type;
name-lookup misses get a per-resource not-found error.
"""

from __future__ import annotations

from typing import Any


# ── Base ──────────────────────────────────────────────────────────────
class HumioError(Exception):
    """Root exception for all humio-provider errors."""


# ── Transport ─────────────────────────────────────────────────────────
class TransportError(HumioError):
    """The request could not be sent or the response could not be decoded."""


class HTTPStatusError(HumioError):
    """The GraphQL endpoint answered with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"unexpected status code {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class GraphQLError(HumioError):
    """The response envelope carried a non-empty ``errors`` list.

    Attributes:
        errors: The raw error entries (``message``, ``path``, ``extensions``).
    """

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        messages = [str(e.get("message", e)) for e in errors]
        super().__init__(f"GraphQL errors: {'; '.join(messages)}")
        self.errors = errors

    @property
    def messages(self) -> list[str]:
        return [str(e.get("message", e)) for e in self.errors]


# ── Lookups ───────────────────────────────────────────────────────────
class ResourceNotFoundError(HumioError):
    """A name lookup found no matching resource."""


class RepositoryNotFoundError(ResourceNotFoundError):
    """Repository not found."""


class AlertNotFoundError(ResourceNotFoundError):
    """Alert not found."""


class ActionNotFoundError(ResourceNotFoundError):
    """Action not found."""


class IngestTokenNotFoundError(ResourceNotFoundError):
    """Ingest token not found."""


class ParserNotFoundError(ResourceNotFoundError):
    """Parser not found."""


# ── Mapping ───────────────────────────────────────────────────────────
class UnsupportedActionTypeError(HumioError):
    """An action carried a type discriminant this client cannot map."""

    def __init__(self, action_type: str) -> None:
        super().__init__(f"unsupported action type: {action_type}")
        self.action_type = action_type


class PartialUpdateError(HumioError):
    """Delete-then-recreate stopped after the delete.

    The old resource is gone and the replacement was not created.
    """

    def __init__(self, kind: str, name: str, deleted_id: str) -> None:
        super().__init__(
            f"{kind} '{name}' was deleted (id {deleted_id}) but could not be recreated"
        )
        self.kind = kind
        self.name = name
        self.deleted_id = deleted_id
