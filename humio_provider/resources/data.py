"""
Flat attribute map handed over by the infrastructure-as-code host.

A :class:`ResourceData` holds the declared attributes of one resource
instance plus the stable identifier the host stores in its state. An
empty ``id`` means the resource does not exist remotely.
"""

from __future__ import annotations

from typing import Any, Iterator


class ResourceData:
    """Mutable attribute map plus identifier for one resource instance."""

    def __init__(self, attributes: dict[str, Any] | None = None, id: str = "") -> None:
        self._attributes: dict[str, Any] = dict(attributes or {})
        self.id = id

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def get_ok(self, key: str) -> tuple[Any, bool]:
        """Return the value and whether it is set to something non-empty.

        ``None``, ``""``, ``0``, ``False`` and empty collections count as
        unset, matching how the host treats zero values.
        """
        value = self._attributes.get(key)
        return value, bool(value)

    def set(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    def set_id(self, id: str) -> None:
        self.id = id

    def has(self, key: str) -> bool:
        return key in self._attributes

    def to_dict(self) -> dict[str, Any]:
        return dict(self._attributes)

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __repr__(self) -> str:
        return f"ResourceData(id={self.id!r}, attributes={sorted(self._attributes)})"
