"""``humio_parser``: identified by ``REPOSITORY+NAME``."""

from __future__ import annotations

from humio_provider.base.models import Parser
from humio_provider.base.parsers import ParsersBlueprint
from humio_provider.resources.base import RepositoryScopedResource, compose_id
from humio_provider.resources.data import ResourceData


def parser_from_data(data: ResourceData) -> Parser:
    return Parser(
        name=data.get("name"),
        script=data.get("script"),
        fields_to_tag=list(data.get("fields_to_tag") or []),
        test_cases=list(data.get("test_cases") or []),
    )


class ParserResource(RepositoryScopedResource):
    resource_type = "parser"
    service: ParsersBlueprint

    def create(self, data: ResourceData) -> None:
        repository = data.get("repository")
        with self._operation("create", repository):
            parser = self.service.create(repository, parser_from_data(data))
        data.set_id(compose_id(repository, parser.name))
        self.read(data)

    def read(self, data: ResourceData) -> None:
        repository, name = self._locate(data)
        with self._operation("read", repository):
            parser = self.service.get(repository, name)
        data.set("name", parser.name)
        data.set("script", parser.script)
        data.set("fields_to_tag", parser.fields_to_tag)
        data.set("test_cases", parser.test_cases)

    def update(self, data: ResourceData) -> None:
        repository = data.get("repository")
        with self._operation("update", repository):
            self.service.update(repository, parser_from_data(data))
        self.read(data)

    def delete(self, data: ResourceData) -> None:
        repository, name = self._locate(data)
        with self._operation("delete", repository):
            self.service.delete(repository, name)
        data.set_id("")
