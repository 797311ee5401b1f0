"""Selection, submission and notification models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dynforms.typing.enums import NotificationLevel, SubmissionStatus
from dynforms.typing.models.template import FormTemplate, Record


class Selection(BaseModel):
    """Currently chosen template, if any."""

    model_config = ConfigDict(frozen=True)

    template: FormTemplate | None = None

    @property
    def template_id(self) -> str | None:
        """Identifier of the selected template."""
        return self.template.id if self.template is not None else None

    @property
    def is_empty(self) -> bool:
        """Whether no template is selected."""
        return self.template is None


class SubmissionPackage(BaseModel):
    """Completed record handed to the workflow consumer."""

    model_config = ConfigDict(frozen=True)

    template: FormTemplate = Field(exclude=True)
    data: Record

    @computed_field(alias="templateId")  # type: ignore[prop-decorator]
    @property
    def template_id(self) -> str:
        """Identifier of the template the record was filled from."""
        return self.template.id

    @computed_field(alias="templateName")  # type: ignore[prop-decorator]
    @property
    def template_name(self) -> str:
        """Display name of the template."""
        return self.template.name

    def to_payload(self) -> dict[str, object]:
        """Return the wire form `{templateId, templateName, data}`."""
        return self.model_dump(mode="json", by_alias=True)


class Notification(BaseModel):
    """User-facing message emitted by the engine."""

    model_config = ConfigDict(frozen=True)

    level: NotificationLevel
    title: str
    message: str


class SubmissionOutcome(BaseModel):
    """Result of one submit attempt."""

    model_config = ConfigDict(frozen=True)

    status: SubmissionStatus
    package: SubmissionPackage | None = None
    missing_required: list[str] = Field(default_factory=list)

    @property
    def submitted(self) -> bool:
        """Whether the package reached the consumer."""
        return self.status == SubmissionStatus.SUBMITTED
