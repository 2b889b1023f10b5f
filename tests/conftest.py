"""Shared fixtures: an in-memory stand-in for the Humio GraphQL endpoint.

``FakeHumio`` has the same ``query(query, variables, target)`` surface as
:class:`~humio_provider.graphql.client.GraphQLClient` and answers by
operation name, so mappers can be exercised end to end without HTTP.
"""

from __future__ import annotations

import itertools
from typing import Any

import pytest

from humio_provider.base.exceptions import GraphQLError
from humio_provider.graphql.client import operation_name


# create mutation -> (__typename, {variable: response field})
_ACTION_SHAPES: dict[str, tuple[str, dict[str, str]]] = {
    "CreateEmailAction": ("EmailAction", {
        "Recipients": "recipients",
        "SubjectTemplate": "subjectTemplate",
        "BodyTemplate": "emailBodyTemplate",
        "UseProxy": "emailUseProxy",
    }),
    "CreateHumioRepoAction": ("HumioRepoAction", {"IngestToken": "ingestToken"}),
    "CreateOpsGenieAction": ("OpsGenieAction", {
        "ApiUrl": "apiUrl",
        "GenieKey": "genieKey",
        "UseProxy": "opsGenieUseProxy",
    }),
    "CreatePagerDutyAction": ("PagerDutyAction", {
        "RoutingKey": "routingKey",
        "Severity": "severity",
        "UseProxy": "pagerDutyUseProxy",
    }),
    "CreateSlackAction": ("SlackAction", {
        "Url": "url",
        "Fields": "fields",
        "UseProxy": "slackUseProxy",
    }),
    "CreateSlackPostMessageAction": ("SlackPostMessageAction", {
        "ApiToken": "apiToken",
        "Channels": "channels",
        "Fields": "fields",
        "UseProxy": "useProxy",
    }),
    "CreateVictorOpsAction": ("VictorOpsAction", {
        "MessageType": "messageType",
        "NotifyUrl": "notifyUrl",
        "UseProxy": "victorOpsUseProxy",
    }),
    "CreateWebhookAction": ("WebhookAction", {
        "Url": "webhookUrl",
        "Method": "method",
        "Headers": "headers",
        "BodyTemplate": "webhookBodyTemplate",
        "IgnoreSSL": "ignoreSSL",
        "UseProxy": "webhookUseProxy",
    }),
}


class FakeHumio:
    """Minimal stateful Humio backend.

    Attributes:
        calls: ``(operation name, variables)`` for every request received.
        fail_on: Operation names that answer with a GraphQL error.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self.repositories: dict[str, dict[str, Any]] = {}
        self.alerts: dict[str, list[dict[str, Any]]] = {}
        self.actions: dict[str, list[dict[str, Any]]] = {}
        self.tokens: dict[str, list[dict[str, Any]]] = {}
        self.parsers: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.fail_on: set[str] = set()
        self.current_user = {
            "id": "user-1",
            "username": "jane",
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "isRoot": False,
        }

    def _new_id(self) -> str:
        return f"{next(self._ids):020d}"

    def add_repository(self, name: str) -> None:
        self.repositories[name] = {
            "id": self._new_id(),
            "name": name,
            "description": "",
            "timeBasedRetention": None,
        }
        self.parsers[name] = [
            {"id": "builtin-kv", "name": "kv", "isBuiltIn": True, "script": "kvParse()",
             "fieldsToTag": [], "testCases": []},
        ]

    def ops(self) -> list[str]:
        return [name for name, _ in self.calls]

    # ── transport surface ────────────────────────────────────────────

    def query(self, query: str, variables: dict[str, Any] | None = None, target: Any = None) -> Any:
        name = operation_name(query)
        variables = variables or {}
        self.calls.append((name, variables))
        if name in self.fail_on:
            raise GraphQLError([{"message": f"{name} rejected"}])
        data = getattr(self, f"_op_{name}")(variables)
        if target is not None:
            return target.model_validate(data)
        return data

    # ── repositories ─────────────────────────────────────────────────

    def _op_ListRepositories(self, v: dict[str, Any]) -> dict[str, Any]:
        return {"repositories": [{"id": r["id"], "name": r["name"]} for r in self.repositories.values()]}

    def _op_GetRepository(self, v: dict[str, Any]) -> dict[str, Any]:
        return {"repository": self.repositories.get(v["RepositoryName"])}

    def _op_CreateRepository(self, v: dict[str, Any]) -> dict[str, Any]:
        self.add_repository(v["Name"])
        return {"createRepository": {"__typename": "CreateRepositoryMutation"}}

    def _op_UpdateDescription(self, v: dict[str, Any]) -> dict[str, Any]:
        self.repositories[v["RepositoryName"]]["description"] = v["Description"]
        return {"updateDescriptionForSearchDomain": {"__typename": "UpdateDescriptionMutation"}}

    def _op_UpdateTimeBasedRetention(self, v: dict[str, Any]) -> dict[str, Any]:
        repo = self.repositories[v["RepositoryName"]]
        repo["timeBasedRetention"] = v.get("RetentionDays")
        return {"updateRetention": {"repository": dict(repo)}}

    def _op_DeleteRepository(self, v: dict[str, Any]) -> dict[str, Any]:
        self.repositories.pop(v["RepositoryName"], None)
        return {"deleteSearchDomain": {"result": True}}

    # ── alerts ───────────────────────────────────────────────────────

    def _op_ListAlerts(self, v: dict[str, Any]) -> dict[str, Any]:
        return {"searchDomain": {"alerts": list(self.alerts.get(v["SearchDomainName"], []))}}

    def _op_CreateAlert(self, v: dict[str, Any]) -> dict[str, Any]:
        alert_id = self._new_id()
        ownership: dict[str, Any] = {"id": f"ownership-{alert_id}"}
        if v.get("QueryOwnershipType") == "User":
            ownership["user"] = {"id": v.get("RunAsUserID") or self.current_user["id"]}
        self.alerts.setdefault(v["SearchDomainName"], []).append({
            "id": alert_id,
            "name": v["Name"],
            "description": v.get("Description"),
            "queryString": v["QueryString"],
            "queryStart": v["QueryStart"],
            "throttleField": v.get("ThrottleField"),
            "throttleTimeMillis": v["ThrottleTimeMillis"],
            "enabled": v["Enabled"],
            "actions": v["Actions"],
            "labels": v.get("Labels"),
            "queryOwnership": ownership,
        })
        return {"createAlert": {"id": alert_id, "name": v["Name"]}}

    def _op_DeleteAlert(self, v: dict[str, Any]) -> dict[str, Any]:
        alerts = self.alerts.get(v["SearchDomainName"], [])
        self.alerts[v["SearchDomainName"]] = [a for a in alerts if a["id"] != v["AlertID"]]
        return {"deleteAlert": True}

    # ── actions ──────────────────────────────────────────────────────

    def _op_ListActions(self, v: dict[str, Any]) -> dict[str, Any]:
        return {"searchDomain": {"actions": list(self.actions.get(v["SearchDomainName"], []))}}

    def _create_action(self, mutation: str, v: dict[str, Any]) -> dict[str, Any]:
        typename, shape = _ACTION_SHAPES[mutation]
        action_id = self._new_id()
        row: dict[str, Any] = {"__typename": typename, "id": action_id, "name": v["Name"]}
        for variable, field in shape.items():
            if variable in v:
                row[field] = v[variable]
        self.actions.setdefault(v["SearchDomainName"], []).append(row)
        response_field = mutation[0].lower() + mutation[1:]
        return {response_field: {"id": action_id, "name": v["Name"]}}

    def __getattr__(self, attr: str) -> Any:
        prefix = "_op_"
        if attr.startswith(prefix) and attr[len(prefix):] in _ACTION_SHAPES:
            mutation = attr[len(prefix):]
            return lambda v: self._create_action(mutation, v)
        raise AttributeError(attr)

    def _op_DeleteAction(self, v: dict[str, Any]) -> dict[str, Any]:
        actions = self.actions.get(v["SearchDomainName"], [])
        self.actions[v["SearchDomainName"]] = [a for a in actions if a["id"] != v["ActionID"]]
        return {"deleteAction": True}

    # ── ingest tokens ────────────────────────────────────────────────

    def _token_row(self, row: dict[str, Any]) -> dict[str, Any]:
        parser = row.get("parser")
        return {"name": row["name"], "token": row["token"], "parser": {"name": parser} if parser else None}

    def _op_ListIngestTokens(self, v: dict[str, Any]) -> dict[str, Any]:
        rows = self.tokens.get(v["RepositoryName"], [])
        return {"repository": {"ingestTokens": [self._token_row(r) for r in rows]}}

    def _op_AddIngestToken(self, v: dict[str, Any]) -> dict[str, Any]:
        row = {"name": v["Name"], "token": f"tok-{self._new_id()}", "parser": v.get("Parser")}
        self.tokens.setdefault(v["RepositoryName"], []).append(row)
        return {"addIngestTokenV3": self._token_row(row)}

    def _find_token(self, repository: str, name: str) -> dict[str, Any]:
        return next(r for r in self.tokens.get(repository, []) if r["name"] == name)

    def _op_AssignParser(self, v: dict[str, Any]) -> dict[str, Any]:
        row = self._find_token(v["RepositoryName"], v["TokenName"])
        row["parser"] = v["ParserName"]
        return {"assignParserToIngestToken": self._token_row(row)}

    def _op_UnassignParser(self, v: dict[str, Any]) -> dict[str, Any]:
        row = self._find_token(v["RepositoryName"], v["TokenName"])
        row["parser"] = None
        return {"unassignParserFromIngestToken": self._token_row(row)}

    def _op_RemoveIngestToken(self, v: dict[str, Any]) -> dict[str, Any]:
        rows = self.tokens.get(v["RepositoryName"], [])
        self.tokens[v["RepositoryName"]] = [r for r in rows if r["name"] != v["Name"]]
        return {"removeIngestToken": {"__typename": "BooleanResultType"}}

    # ── parsers ──────────────────────────────────────────────────────

    def _op_ListParsers(self, v: dict[str, Any]) -> dict[str, Any]:
        rows = self.parsers.get(v["RepositoryName"], [])
        return {"repository": {"parsers": [
            {"id": p["id"], "name": p["name"], "isBuiltIn": p["isBuiltIn"]} for p in rows
        ]}}

    def _op_GetParser(self, v: dict[str, Any]) -> dict[str, Any]:
        rows = self.parsers.get(v["RepositoryName"], [])
        match = next((p for p in rows if p["name"] == v["ParserName"]), None)
        return {"repository": {"parser": match}}

    def _op_CreateParser(self, v: dict[str, Any]) -> dict[str, Any]:
        parser_id = self._new_id()
        self.parsers.setdefault(v["RepositoryName"], []).append({
            "id": parser_id,
            "name": v["Name"],
            "isBuiltIn": False,
            "script": v["Script"],
            "fieldsToTag": v["FieldsToTag"],
            "testCases": v["TestCases"],
        })
        return {"createParserV2": {"id": parser_id, "name": v["Name"]}}

    def _op_DeleteParser(self, v: dict[str, Any]) -> dict[str, Any]:
        rows = self.parsers.get(v["RepositoryName"], [])
        self.parsers[v["RepositoryName"]] = [p for p in rows if p["id"] != v["ParserID"]]
        return {"deleteParser": {"__typename": "BooleanResultType"}}

    # ── users ────────────────────────────────────────────────────────

    def _op_CurrentUser(self, v: dict[str, Any]) -> dict[str, Any]:
        return {"currentUser": dict(self.current_user)}


@pytest.fixture
def humio() -> FakeHumio:
    fake = FakeHumio()
    fake.add_repository("test-repo")
    return fake


@pytest.fixture
def humio_config() -> dict[str, str]:
    return {"address": "https://humio.test/", "api_token": "secret-token"}
