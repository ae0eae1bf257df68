"""Setup issue reported by the setup engine."""

from pydantic import Field

from atrium.domain.model.common import DomainModel


class SetupIssue(DomainModel):
    """A configuration or environment problem an administrator should fix."""

    key: str
    name: str
    short_name: str
    summary: str
    message: str
    is_fatal: bool = False
    config_keys: list[str] = Field(default_factory=list)
