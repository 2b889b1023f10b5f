"""Parser service blueprint."""

from abc import ABC, abstractmethod

from humio_provider.base.models import Parser


class ParsersBlueprint(ABC):
    """Abstract interface for user-defined parsers."""

    @abstractmethod
    def list(self, repository: str) -> list[Parser]:
        """List non built-in parsers (``id`` and ``name`` only)."""

    @abstractmethod
    def get(self, repository: str, name: str) -> Parser:
        """Fetch a parser with its script, tagged fields and test cases.

        Raises:
            ParserNotFoundError: If no parser has that name.
        """

    @abstractmethod
    def create(self, repository: str, parser: Parser) -> Parser:
        """Create a parser and return it with its server-assigned ID."""

    @abstractmethod
    def update(self, repository: str, parser: Parser) -> Parser:
        """Replace the parser named ``parser.name`` via delete-then-create."""

    @abstractmethod
    def delete(self, repository: str, name: str) -> None:
        """Delete a parser by name."""

    @abstractmethod
    def delete_by_id(self, repository: str, parser_id: str) -> None:
        """Delete a parser by its server-assigned ID."""
