"""``humio_user`` data source: the user owning the API token."""

from __future__ import annotations

from humio_provider.base.users import UsersBlueprint
from humio_provider.resources.data import ResourceData


class UserDataSource:
    """Read-only; the ID is the user's server ID."""

    resource_type = "user"

    def __init__(self, service: UsersBlueprint) -> None:
        self.service = service

    def read(self, data: ResourceData) -> None:
        user = self.service.get_current()
        data.set_id(user.id)
        data.set("username", user.username)
        data.set("full_name", user.full_name)
        data.set("email", user.email or "")
        data.set("is_root", user.is_root)
