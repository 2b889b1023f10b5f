"""``humio_repository``: a repository identified by its name."""

from __future__ import annotations

from humio_provider.base.models import Repository
from humio_provider.base.repositories import RepositoriesBlueprint
from humio_provider.resources.base import Resource
from humio_provider.resources.data import ResourceData

DELETE_REASON = "Deleted by humio-provider"


def repository_from_data(data: ResourceData) -> Repository:
    return Repository(
        name=data.get("name"),
        description=data.get("description") or "",
        retention_days=float(data.get("retention_days") or 0.0),
    )


class RepositoryResource(Resource):
    """Repositories support field-level updates, so nothing is recreated."""

    resource_type = "repository"
    service: RepositoriesBlueprint

    def create(self, data: ResourceData) -> None:
        with self._operation("create", data.get("name")):
            repository = repository_from_data(data)
            self.service.create(repository.name)
            self.service.update_description(repository.name, repository.description)
            self.service.update_retention(repository.name, repository.retention_days)
        data.set_id(repository.name)
        self.read(data)

    def read(self, data: ResourceData) -> None:
        name = data.id or data.get("name")
        with self._operation("read", name):
            repository = self.service.get(name)
        data.set("name", repository.name)
        data.set("description", repository.description)
        # retention_days is only written back when declared
        if data.has("retention_days"):
            data.set("retention_days", repository.retention_days)

    def update(self, data: ResourceData) -> None:
        with self._operation("update", data.get("name")):
            repository = repository_from_data(data)
            self.service.update(repository)
        self.read(data)

    def delete(self, data: ResourceData) -> None:
        name = data.id or data.get("name")
        with self._operation("delete", name):
            self.service.delete(name, DELETE_REASON)
        data.set_id("")
