"""``humio_ingest_token``: identified by ``REPOSITORY+NAME``.

``token`` is computed by the server and only ever written to the map.
"""

from __future__ import annotations

from humio_provider.base.ingest_tokens import IngestTokensBlueprint
from humio_provider.resources.base import RepositoryScopedResource, compose_id
from humio_provider.resources.data import ResourceData


class IngestTokenResource(RepositoryScopedResource):
    resource_type = "ingest_token"
    service: IngestTokensBlueprint

    def create(self, data: ResourceData) -> None:
        repository = data.get("repository")
        with self._operation("create", repository):
            token = self.service.create(repository, data.get("name"), data.get("parser") or "")
        data.set_id(compose_id(repository, token.name))
        self.read(data)

    def read(self, data: ResourceData) -> None:
        repository, name = self._locate(data)
        with self._operation("read", repository):
            token = self.service.get(repository, name)
        data.set("name", token.name)
        data.set("parser", token.assigned_parser)
        data.set("token", token.token)

    def update(self, data: ResourceData) -> None:
        repository = data.get("repository")
        with self._operation("update", repository):
            self.service.update(repository, data.get("name"), data.get("parser") or "")
        self.read(data)

    def delete(self, data: ResourceData) -> None:
        repository, name = self._locate(data)
        with self._operation("delete", repository):
            self.service.delete(repository, name)
        data.set_id("")
