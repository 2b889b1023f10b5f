"""GraphQL implementation of the Alerts blueprint."""

from __future__ import annotations

from typing import Any

from humio_provider.base.alerts import AlertsBlueprint
from humio_provider.base.exceptions import AlertNotFoundError
from humio_provider.base.logger import hp_logger
from humio_provider.base.models import Alert
from humio_provider.graphql.client import GraphQLClient
from humio_provider.graphql.recreate import recreate

LIST_ALERTS_QUERY = """
query ListAlerts($SearchDomainName: String!) {
  searchDomain(name: $SearchDomainName) {
    alerts {
      id
      name
      description
      queryString
      queryStart
      throttleField
      throttleTimeMillis
      enabled
      actions
      labels
      queryOwnership {
        id
        ... on QueryOwnershipTypeUser {
          user {
            id
          }
        }
        ... on QueryOwnershipTypeOrganization {
          id
        }
      }
    }
  }
}
"""

CREATE_ALERT_MUTATION = """
mutation CreateAlert(
  $SearchDomainName: String!
  $Name: String!
  $Description: String
  $QueryString: String!
  $QueryStart: String!
  $ThrottleTimeMillis: Long!
  $ThrottleField: String
  $Enabled: Boolean!
  $Actions: [String!]!
  $Labels: [String!]
  $RunAsUserID: String
  $QueryOwnershipType: QueryOwnershipType
) {
  createAlert(input: {
    viewName: $SearchDomainName
    name: $Name
    description: $Description
    queryString: $QueryString
    queryStart: $QueryStart
    throttleTimeMillis: $ThrottleTimeMillis
    throttleField: $ThrottleField
    enabled: $Enabled
    actions: $Actions
    labels: $Labels
    runAsUserId: $RunAsUserID
    queryOwnershipType: $QueryOwnershipType
  }) {
    id
    name
  }
}
"""

DELETE_ALERT_MUTATION = """
mutation DeleteAlert($SearchDomainName: String!, $AlertID: String!) {
  deleteAlert(input: {
    viewName: $SearchDomainName
    id: $AlertID
  })
}
"""


def _alert_from_response(raw: dict[str, Any]) -> Alert:
    ownership = raw.get("queryOwnership") or {}
    user = ownership.get("user")
    return Alert(
        id=raw["id"],
        name=raw["name"],
        description=raw.get("description") or "",
        query_string=raw.get("queryString") or "",
        query_start=raw.get("queryStart") or "",
        throttle_field=raw.get("throttleField") or "",
        throttle_time_millis=raw.get("throttleTimeMillis") or 0,
        enabled=bool(raw.get("enabled")),
        actions=raw.get("actions") or [],
        labels=raw.get("labels") or [],
        run_as_user_id=user["id"] if user else "",
        query_ownership_type="User" if user else "Organization",
    )


class Alerts(AlertsBlueprint):
    """Humio alerts.

    Attributes:
        client: Shared GraphQL transport.
    """

    def __init__(self, client: GraphQLClient) -> None:
        self.client = client

    def list(self, repository: str) -> list[Alert]:
        data = self.client.query(LIST_ALERTS_QUERY, {"SearchDomainName": repository})
        search_domain = data.get("searchDomain") or {}
        return [_alert_from_response(a) for a in search_domain.get("alerts") or []]

    def get(self, repository: str, name: str) -> Alert:
        for alert in self.list(repository):
            if alert.name == name:
                return alert
        raise AlertNotFoundError(f"alert not found: {name}")

    def create(self, repository: str, alert: Alert) -> Alert:
        """Create *alert* in *repository*.

        ``RunAsUserID`` and ``QueryOwnershipType`` are only sent when set,
        leaving the server to pick its defaults otherwise.

        Returns:
            A copy of *alert* with the new server ID.
        """
        variables: dict[str, Any] = {
            "SearchDomainName": repository,
            "Name": alert.name,
            "Description": alert.description,
            "QueryString": alert.query_string,
            "QueryStart": alert.query_start,
            "ThrottleTimeMillis": alert.throttle_time_millis,
            "ThrottleField": alert.throttle_field,
            "Enabled": alert.enabled,
            "Actions": alert.actions,
            "Labels": alert.labels,
        }
        if alert.run_as_user_id:
            variables["RunAsUserID"] = alert.run_as_user_id
        if alert.query_ownership_type:
            variables["QueryOwnershipType"] = alert.query_ownership_type

        data = self.client.query(CREATE_ALERT_MUTATION, variables)
        created = data.get("createAlert") or {}
        hp_logger.info(f"Created alert '{alert.name}'", resource="alert", operation="create", repository=repository)
        return alert.model_copy(update={"id": created.get("id", "")})

    def update(self, repository: str, alert: Alert) -> Alert:
        existing = self.get(repository, alert.name)
        return recreate(
            "alert", repository, alert.name, existing.id,
            self.delete_by_id,
            lambda: self.create(repository, alert),
        )

    def delete(self, repository: str, name: str) -> None:
        alert = self.get(repository, name)
        self.delete_by_id(repository, alert.id)

    def delete_by_id(self, repository: str, alert_id: str) -> None:
        self.client.query(
            DELETE_ALERT_MUTATION,
            {"SearchDomainName": repository, "AlertID": alert_id},
        )
        hp_logger.info(f"Deleted alert {alert_id}", resource="alert", operation="delete", repository=repository)
