"""``humio_action``: a notification sink identified by ``REPOSITORY+NAME``.

The settings of the action's type are flattened into the attribute map
under their own names (``recipients``, ``url``, ``use_proxy``, ...).
List-of-object settings (Slack ``fields``, webhook ``headers``) stay
lists of plain dicts.
"""

from __future__ import annotations

from humio_provider.base.actions import ActionsBlueprint
from humio_provider.base.exceptions import UnsupportedActionTypeError
from humio_provider.base.models import ACTION_SETTINGS, Action
from humio_provider.resources.base import RepositoryScopedResource, compose_id
from humio_provider.resources.data import ResourceData


def action_from_data(data: ResourceData) -> Action:
    action_type = data.get("type") or ""
    entry = ACTION_SETTINGS.get(action_type)
    if entry is None:
        raise UnsupportedActionTypeError(action_type)
    attribute, settings_model = entry
    settings = settings_model(**{
        field: data.get(field)
        for field in settings_model.model_fields
        if data.get(field) is not None
    })
    return Action(name=data.get("name"), type=action_type, **{attribute: settings})


def data_from_action(action: Action, data: ResourceData) -> None:
    data.set("name", action.name)
    data.set("type", action.type)
    settings = action.settings
    if settings is not None:
        for field, value in settings.model_dump().items():
            data.set(field, value)


class ActionResource(RepositoryScopedResource):
    resource_type = "action"
    service: ActionsBlueprint

    def create(self, data: ResourceData) -> None:
        repository = data.get("repository")
        with self._operation("create", repository):
            action = self.service.create(repository, action_from_data(data))
        data.set_id(compose_id(repository, action.name))
        self.read(data)

    def read(self, data: ResourceData) -> None:
        repository, name = self._locate(data)
        with self._operation("read", repository):
            action = self.service.get(repository, name)
        data_from_action(action, data)

    def update(self, data: ResourceData) -> None:
        repository = data.get("repository")
        with self._operation("update", repository):
            self.service.update(repository, action_from_data(data))
        self.read(data)

    def delete(self, data: ResourceData) -> None:
        repository, name = self._locate(data)
        with self._operation("delete", repository):
            self.service.delete(repository, name)
        data.set_id("")
