"""GraphQL implementation of the Actions blueprint.

Every action type has its own create mutation and its own GraphQL
fragment. Fields that collide between fragments (``useProxy``,
``bodyTemplate``, ``url``) are aliased in the list query so one flat
response row can be decoded by ``__typename``.
"""

from __future__ import annotations

from typing import Any, Callable

from humio_provider.base.actions import ActionsBlueprint
from humio_provider.base.exceptions import ActionNotFoundError, UnsupportedActionTypeError
from humio_provider.base.logger import hp_logger
from humio_provider.base.models import (
    ACTION_SETTINGS,
    ACTION_TYPE_EMAIL,
    ACTION_TYPE_HUMIO_REPO,
    ACTION_TYPE_OPS_GENIE,
    ACTION_TYPE_PAGER_DUTY,
    ACTION_TYPE_SLACK,
    ACTION_TYPE_SLACK_POST_MESSAGE,
    ACTION_TYPE_VICTOR_OPS,
    ACTION_TYPE_WEBHOOK,
    Action,
    EmailAction,
    HttpHeader,
    HumioRepoAction,
    OpsGenieAction,
    PagerDutyAction,
    SlackAction,
    SlackField,
    SlackPostMessageAction,
    VictorOpsAction,
    WebhookAction,
)
from humio_provider.graphql.client import GraphQLClient
from humio_provider.graphql.recreate import recreate

LIST_ACTIONS_QUERY = """
query ListActions($SearchDomainName: String!) {
  searchDomain(name: $SearchDomainName) {
    actions {
      __typename
      id
      name
      ... on EmailAction {
        recipients
        subjectTemplate
        emailBodyTemplate: bodyTemplate
        emailUseProxy: useProxy
      }
      ... on HumioRepoAction {
        ingestToken
      }
      ... on OpsGenieAction {
        apiUrl
        genieKey
        opsGenieUseProxy: useProxy
      }
      ... on PagerDutyAction {
        routingKey
        severity
        pagerDutyUseProxy: useProxy
      }
      ... on SlackAction {
        url
        fields {
          fieldName
          value
        }
        slackUseProxy: useProxy
      }
      ... on SlackPostMessageAction {
        apiToken
        channels
        fields {
          fieldName
          value
        }
        useProxy
      }
      ... on VictorOpsAction {
        messageType
        notifyUrl
        victorOpsUseProxy: useProxy
      }
      ... on WebhookAction {
        method
        webhookUrl: url
        headers {
          header
          value
        }
        webhookBodyTemplate: bodyTemplate
        ignoreSSL
        webhookUseProxy: useProxy
      }
    }
  }
}
"""

DELETE_ACTION_MUTATION = """
mutation DeleteAction($SearchDomainName: String!, $ActionID: String!) {
  deleteAction(input: {
    viewName: $SearchDomainName
    id: $ActionID
  })
}
"""

CREATE_EMAIL_ACTION_MUTATION = """
mutation CreateEmailAction(
  $SearchDomainName: String!
  $Name: String!
  $Recipients: [String!]!
  $SubjectTemplate: String
  $BodyTemplate: String
  $UseProxy: Boolean!
) {
  createEmailAction(input: {
    viewName: $SearchDomainName
    name: $Name
    recipients: $Recipients
    subjectTemplate: $SubjectTemplate
    bodyTemplate: $BodyTemplate
    useProxy: $UseProxy
  }) {
    id
    name
  }
}
"""

CREATE_HUMIO_REPO_ACTION_MUTATION = """
mutation CreateHumioRepoAction(
  $SearchDomainName: String!
  $Name: String!
  $IngestToken: String!
) {
  createHumioRepoAction(input: {
    viewName: $SearchDomainName
    name: $Name
    ingestToken: $IngestToken
  }) {
    id
    name
  }
}
"""

CREATE_OPS_GENIE_ACTION_MUTATION = """
mutation CreateOpsGenieAction(
  $SearchDomainName: String!
  $Name: String!
  $ApiUrl: String!
  $GenieKey: String!
  $UseProxy: Boolean!
) {
  createOpsGenieAction(input: {
    viewName: $SearchDomainName
    name: $Name
    apiUrl: $ApiUrl
    genieKey: $GenieKey
    useProxy: $UseProxy
  }) {
    id
    name
  }
}
"""

CREATE_PAGER_DUTY_ACTION_MUTATION = """
mutation CreatePagerDutyAction(
  $SearchDomainName: String!
  $Name: String!
  $RoutingKey: String!
  $Severity: String!
  $UseProxy: Boolean!
) {
  createPagerDutyAction(input: {
    viewName: $SearchDomainName
    name: $Name
    routingKey: $RoutingKey
    severity: $Severity
    useProxy: $UseProxy
  }) {
    id
    name
  }
}
"""

CREATE_SLACK_ACTION_MUTATION = """
mutation CreateSlackAction(
  $SearchDomainName: String!
  $Name: String!
  $Url: String!
  $Fields: [SlackFieldEntryInput!]!
  $UseProxy: Boolean!
) {
  createSlackAction(input: {
    viewName: $SearchDomainName
    name: $Name
    url: $Url
    fields: $Fields
    useProxy: $UseProxy
  }) {
    id
    name
  }
}
"""

CREATE_SLACK_POST_MESSAGE_ACTION_MUTATION = """
mutation CreateSlackPostMessageAction(
  $SearchDomainName: String!
  $Name: String!
  $ApiToken: String!
  $Channels: [String!]!
  $Fields: [SlackFieldEntryInput!]!
  $UseProxy: Boolean!
) {
  createSlackPostMessageAction(input: {
    viewName: $SearchDomainName
    name: $Name
    apiToken: $ApiToken
    channels: $Channels
    fields: $Fields
    useProxy: $UseProxy
  }) {
    id
    name
  }
}
"""

CREATE_VICTOR_OPS_ACTION_MUTATION = """
mutation CreateVictorOpsAction(
  $SearchDomainName: String!
  $Name: String!
  $MessageType: String!
  $NotifyUrl: String!
  $UseProxy: Boolean!
) {
  createVictorOpsAction(input: {
    viewName: $SearchDomainName
    name: $Name
    messageType: $MessageType
    notifyUrl: $NotifyUrl
    useProxy: $UseProxy
  }) {
    id
    name
  }
}
"""

CREATE_WEBHOOK_ACTION_MUTATION = """
mutation CreateWebhookAction(
  $SearchDomainName: String!
  $Name: String!
  $Url: String!
  $Method: String!
  $Headers: [HttpHeaderEntryInput!]!
  $BodyTemplate: String!
  $IgnoreSSL: Boolean!
  $UseProxy: Boolean!
) {
  createWebhookAction(input: {
    viewName: $SearchDomainName
    name: $Name
    url: $Url
    method: $Method
    headers: $Headers
    bodyTemplate: $BodyTemplate
    ignoreSSL: $IgnoreSSL
    useProxy: $UseProxy
  }) {
    id
    name
  }
}
"""


# ── Encoding: settings model -> mutation variables ────────────────────

def _slack_fields(fields: list[SlackField]) -> list[dict[str, str]]:
    return [{"fieldName": f.field_name, "value": f.value} for f in fields]


def _email_variables(s: EmailAction) -> dict[str, Any]:
    variables: dict[str, Any] = {"Recipients": s.recipients, "UseProxy": s.use_proxy}
    if s.subject_template:
        variables["SubjectTemplate"] = s.subject_template
    if s.body_template:
        variables["BodyTemplate"] = s.body_template
    return variables


def _humio_repo_variables(s: HumioRepoAction) -> dict[str, Any]:
    return {"IngestToken": s.ingest_token}


def _ops_genie_variables(s: OpsGenieAction) -> dict[str, Any]:
    return {"ApiUrl": s.api_url, "GenieKey": s.genie_key, "UseProxy": s.use_proxy}


def _pager_duty_variables(s: PagerDutyAction) -> dict[str, Any]:
    return {"RoutingKey": s.routing_key, "Severity": s.severity, "UseProxy": s.use_proxy}


def _slack_variables(s: SlackAction) -> dict[str, Any]:
    return {"Url": s.url, "Fields": _slack_fields(s.fields), "UseProxy": s.use_proxy}


def _slack_post_message_variables(s: SlackPostMessageAction) -> dict[str, Any]:
    return {
        "ApiToken": s.api_token,
        "Channels": s.channels,
        "Fields": _slack_fields(s.fields),
        "UseProxy": s.use_proxy,
    }


def _victor_ops_variables(s: VictorOpsAction) -> dict[str, Any]:
    return {"MessageType": s.message_type, "NotifyUrl": s.notify_url, "UseProxy": s.use_proxy}


def _webhook_variables(s: WebhookAction) -> dict[str, Any]:
    return {
        "Url": s.url,
        "Method": s.method,
        "Headers": [{"header": h.header, "value": h.value} for h in s.headers],
        "BodyTemplate": s.body_template,
        "IgnoreSSL": s.ignore_ssl,
        "UseProxy": s.use_proxy,
    }


# type -> (mutation document, response field, variable builder)
_CREATE_REGISTRY: dict[str, tuple[str, str, Callable[[Any], dict[str, Any]]]] = {
    ACTION_TYPE_EMAIL: (CREATE_EMAIL_ACTION_MUTATION, "createEmailAction", _email_variables),
    ACTION_TYPE_HUMIO_REPO: (CREATE_HUMIO_REPO_ACTION_MUTATION, "createHumioRepoAction", _humio_repo_variables),
    ACTION_TYPE_OPS_GENIE: (CREATE_OPS_GENIE_ACTION_MUTATION, "createOpsGenieAction", _ops_genie_variables),
    ACTION_TYPE_PAGER_DUTY: (CREATE_PAGER_DUTY_ACTION_MUTATION, "createPagerDutyAction", _pager_duty_variables),
    ACTION_TYPE_SLACK: (CREATE_SLACK_ACTION_MUTATION, "createSlackAction", _slack_variables),
    ACTION_TYPE_SLACK_POST_MESSAGE: (
        CREATE_SLACK_POST_MESSAGE_ACTION_MUTATION,
        "createSlackPostMessageAction",
        _slack_post_message_variables,
    ),
    ACTION_TYPE_VICTOR_OPS: (CREATE_VICTOR_OPS_ACTION_MUTATION, "createVictorOpsAction", _victor_ops_variables),
    ACTION_TYPE_WEBHOOK: (CREATE_WEBHOOK_ACTION_MUTATION, "createWebhookAction", _webhook_variables),
}


# ── Decoding: aliased list row -> settings model ──────────────────────

def _fields_from_response(raw: dict[str, Any]) -> list[SlackField]:
    return [
        SlackField(field_name=f["fieldName"], value=f["value"])
        for f in raw.get("fields") or []
    ]


_DECODERS: dict[str, Callable[[dict[str, Any]], Any]] = {
    ACTION_TYPE_EMAIL: lambda r: EmailAction(
        recipients=r.get("recipients") or [],
        subject_template=r.get("subjectTemplate") or "",
        body_template=r.get("emailBodyTemplate") or "",
        use_proxy=bool(r.get("emailUseProxy")),
    ),
    ACTION_TYPE_HUMIO_REPO: lambda r: HumioRepoAction(ingest_token=r.get("ingestToken") or ""),
    ACTION_TYPE_OPS_GENIE: lambda r: OpsGenieAction(
        api_url=r.get("apiUrl") or "",
        genie_key=r.get("genieKey") or "",
        use_proxy=bool(r.get("opsGenieUseProxy")),
    ),
    ACTION_TYPE_PAGER_DUTY: lambda r: PagerDutyAction(
        routing_key=r.get("routingKey") or "",
        severity=r.get("severity") or "",
        use_proxy=bool(r.get("pagerDutyUseProxy")),
    ),
    ACTION_TYPE_SLACK: lambda r: SlackAction(
        url=r.get("url") or "",
        fields=_fields_from_response(r),
        use_proxy=bool(r.get("slackUseProxy")),
    ),
    ACTION_TYPE_SLACK_POST_MESSAGE: lambda r: SlackPostMessageAction(
        api_token=r.get("apiToken") or "",
        channels=r.get("channels") or [],
        fields=_fields_from_response(r),
        use_proxy=bool(r.get("useProxy")),
    ),
    ACTION_TYPE_VICTOR_OPS: lambda r: VictorOpsAction(
        message_type=r.get("messageType") or "",
        notify_url=r.get("notifyUrl") or "",
        use_proxy=bool(r.get("victorOpsUseProxy")),
    ),
    ACTION_TYPE_WEBHOOK: lambda r: WebhookAction(
        method=r.get("method") or "",
        url=r.get("webhookUrl") or "",
        headers=[HttpHeader(header=h["header"], value=h["value"]) for h in r.get("headers") or []],
        body_template=r.get("webhookBodyTemplate") or "",
        ignore_ssl=bool(r.get("ignoreSSL")),
        use_proxy=bool(r.get("webhookUseProxy")),
    ),
}


def _action_from_response(raw: dict[str, Any]) -> Action:
    """Decode one list row; types without a decoder come back with no settings."""
    action_type = raw.get("__typename", "")
    decoder = _DECODERS.get(action_type)
    if decoder is None:
        return Action(id=raw["id"], name=raw["name"], type=action_type)
    attribute, _ = ACTION_SETTINGS[action_type]
    return Action(
        id=raw["id"],
        name=raw["name"],
        type=action_type,
        **{attribute: decoder(raw)},
    )


class Actions(ActionsBlueprint):
    """Humio actions.

    Attributes:
        client: Shared GraphQL transport.
    """

    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    def list(self, repository: str) -> list[Action]:
        data = self.client.query(LIST_ACTIONS_QUERY, {"SearchDomainName": repository})
        search_domain = data.get("searchDomain") or {}
        return [_action_from_response(a) for a in search_domain.get("actions") or []]

    def _find(self, repository: str, name: str) -> Action:
        for action in self.list(repository):
            if action.name == name:
                return action
        raise ActionNotFoundError(f"action not found: {name}")

    def get(self, repository: str, name: str) -> Action:
        """Look up an action by name.

        Raises:
            ActionNotFoundError: No action has that name.
            UnsupportedActionTypeError: The action exists but its type has
                no local representation.
        """
        action = self._find(repository, name)
        if action.settings is None:
            raise UnsupportedActionTypeError(action.type)
        return action

    def create(self, repository: str, action: Action) -> Action:
        """Create *action* with the mutation matching ``action.type``.

        Raises:
            UnsupportedActionTypeError: If the type is unknown or its
                settings block is missing. No request is sent.
        """
        entry = _CREATE_REGISTRY.get(action.type)
        settings = action.settings
        if entry is None or settings is None:
            raise UnsupportedActionTypeError(action.type)
        mutation, response_field, build = entry

        variables: dict[str, Any] = {"SearchDomainName": repository, "Name": action.name}
        variables.update(build(settings))

        data = self.client.query(mutation, variables)
        created = data.get(response_field) or {}
        hp_logger.info(
            f"Created {action.type} '{action.name}'",
            resource="action", operation="create", repository=repository,
        )
        return action.model_copy(update={"id": created.get("id", "")})

    def update(self, repository: str, action: Action) -> Action:
        if action.type not in _CREATE_REGISTRY or action.settings is None:
            # must be rejected before the delete
            raise UnsupportedActionTypeError(action.type)
        existing = self.get(repository, action.name)
        return recreate(
            "action", repository, action.name, existing.id,
            self.delete_by_id,
            lambda: self.create(repository, action),
        )

    def delete(self, repository: str, name: str) -> None:
        action = self._find(repository, name)
        self.delete_by_id(repository, action.id)

    def delete_by_id(self, repository: str, action_id: str) -> None:
        self.client.query(
            DELETE_ACTION_MUTATION,
            {"SearchDomainName": repository, "ActionID": action_id},
        )
        hp_logger.info(f"Deleted action {action_id}", resource="action", operation="delete", repository=repository)
