"""Typed records for every Humio resource.

These are the flat local representations the mappers translate to and
from the nested GraphQL shapes. Only required-field presence is checked
here; everything else is left to the remote API.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Repository(BaseModel):
    id: str = ""
    name: str
    description: str = ""
    retention_days: float = Field(default=0.0, description="0 means unlimited retention")


class Alert(BaseModel):
    id: str = ""
    name: str
    description: str = ""
    query_string: str
    query_start: str
    throttle_field: str = ""
    throttle_time_millis: int
    enabled: bool = True
    actions: list[str] = Field(default_factory=list)
    labels: list[str] = Field(default_factory=list)
    run_as_user_id: str = ""
    query_ownership_type: str = ""


# ── Actions ───────────────────────────────────────────────────────────

ACTION_TYPE_EMAIL = "EmailAction"
ACTION_TYPE_HUMIO_REPO = "HumioRepoAction"
ACTION_TYPE_OPS_GENIE = "OpsGenieAction"
ACTION_TYPE_PAGER_DUTY = "PagerDutyAction"
ACTION_TYPE_SLACK = "SlackAction"
ACTION_TYPE_SLACK_POST_MESSAGE = "SlackPostMessageAction"
ACTION_TYPE_VICTOR_OPS = "VictorOpsAction"
ACTION_TYPE_WEBHOOK = "WebhookAction"


class EmailAction(BaseModel):
    recipients: list[str] = Field(default_factory=list)
    subject_template: str = ""
    body_template: str = ""
    use_proxy: bool = False


class HumioRepoAction(BaseModel):
    ingest_token: str


class OpsGenieAction(BaseModel):
    api_url: str
    genie_key: str
    use_proxy: bool = False


class PagerDutyAction(BaseModel):
    routing_key: str
    severity: str
    use_proxy: bool = False


class SlackField(BaseModel):
    field_name: str
    value: str


class SlackAction(BaseModel):
    url: str
    fields: list[SlackField] = Field(default_factory=list)
    use_proxy: bool = False


class SlackPostMessageAction(BaseModel):
    api_token: str
    channels: list[str] = Field(default_factory=list)
    fields: list[SlackField] = Field(default_factory=list)
    use_proxy: bool = False


class VictorOpsAction(BaseModel):
    message_type: str
    notify_url: str
    use_proxy: bool = False


class HttpHeader(BaseModel):
    header: str
    value: str


class WebhookAction(BaseModel):
    method: str = "POST"
    url: str
    headers: list[HttpHeader] = Field(default_factory=list)
    body_template: str = ""
    ignore_ssl: bool = False
    use_proxy: bool = False


# Action type discriminant -> (Action attribute, settings model)
ACTION_SETTINGS: dict[str, tuple[str, type[BaseModel]]] = {
    ACTION_TYPE_EMAIL: ("email", EmailAction),
    ACTION_TYPE_HUMIO_REPO: ("humio_repo", HumioRepoAction),
    ACTION_TYPE_OPS_GENIE: ("ops_genie", OpsGenieAction),
    ACTION_TYPE_PAGER_DUTY: ("pager_duty", PagerDutyAction),
    ACTION_TYPE_SLACK: ("slack", SlackAction),
    ACTION_TYPE_SLACK_POST_MESSAGE: ("slack_post_message", SlackPostMessageAction),
    ACTION_TYPE_VICTOR_OPS: ("victor_ops", VictorOpsAction),
    ACTION_TYPE_WEBHOOK: ("webhook", WebhookAction),
}


class Action(BaseModel):
    """A notification sink.

    ``type`` is the GraphQL ``__typename``; exactly one of the settings
    attributes is expected to be populated, the one matching ``type``.
    """

    id: str = ""
    name: str
    type: str
    email: EmailAction | None = None
    humio_repo: HumioRepoAction | None = None
    ops_genie: OpsGenieAction | None = None
    pager_duty: PagerDutyAction | None = None
    slack: SlackAction | None = None
    slack_post_message: SlackPostMessageAction | None = None
    victor_ops: VictorOpsAction | None = None
    webhook: WebhookAction | None = None

    @property
    def settings(self) -> BaseModel | None:
        """The settings block matching ``type``, if any."""
        entry = ACTION_SETTINGS.get(self.type)
        if entry is None:
            return None
        return getattr(self, entry[0])


class IngestToken(BaseModel):
    name: str
    token: str = ""
    assigned_parser: str = ""


class Parser(BaseModel):
    id: str = ""
    name: str
    script: str
    fields_to_tag: list[str] = Field(default_factory=list)
    test_cases: list[str] = Field(default_factory=list)


class User(BaseModel):
    """The authenticated user, decoded straight from ``currentUser``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    full_name: str = Field(default="", alias="fullName")
    email: str | None = None
    is_root: bool = Field(default=False, alias="isRoot")
