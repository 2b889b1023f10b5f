"""``humio_alert``: an alert identified by ``REPOSITORY+NAME``."""

from __future__ import annotations

from humio_provider.base.alerts import AlertsBlueprint
from humio_provider.base.models import Alert
from humio_provider.resources.base import RepositoryScopedResource, compose_id
from humio_provider.resources.data import ResourceData


def alert_from_data(data: ResourceData) -> Alert:
    return Alert(
        name=data.get("name"),
        description=data.get("description") or "",
        query_string=data.get("query"),
        query_start=data.get("start"),
        throttle_field=data.get("throttle_field") or "",
        throttle_time_millis=data.get("throttle_time_millis"),
        enabled=data.get("enabled", True),
        actions=list(data.get("actions") or []),
        labels=list(data.get("labels") or []),
        run_as_user_id=data.get("run_as_user_id") or "",
        query_ownership_type=data.get("query_ownership_type") or "",
    )


def data_from_alert(alert: Alert, data: ResourceData) -> None:
    data.set("name", alert.name)
    data.set("description", alert.description)
    data.set("query", alert.query_string)
    data.set("start", alert.query_start)
    data.set("throttle_field", alert.throttle_field)
    data.set("throttle_time_millis", alert.throttle_time_millis)
    data.set("enabled", alert.enabled)
    data.set("actions", alert.actions)
    data.set("labels", alert.labels)
    data.set("run_as_user_id", alert.run_as_user_id)
    data.set("query_ownership_type", alert.query_ownership_type)


class AlertResource(RepositoryScopedResource):
    resource_type = "alert"
    service: AlertsBlueprint

    def create(self, data: ResourceData) -> None:
        repository = data.get("repository")
        with self._operation("create", repository):
            alert = self.service.create(repository, alert_from_data(data))
        data.set_id(compose_id(repository, alert.name))
        self.read(data)

    def read(self, data: ResourceData) -> None:
        repository, name = self._locate(data)
        with self._operation("read", repository):
            alert = self.service.get(repository, name)
        data_from_alert(alert, data)

    def update(self, data: ResourceData) -> None:
        repository = data.get("repository")
        with self._operation("update", repository):
            self.service.update(repository, alert_from_data(data))
        self.read(data)

    def delete(self, data: ResourceData) -> None:
        repository, name = self._locate(data)
        with self._operation("delete", repository):
            self.service.delete(repository, name)
        data.set_id("")
