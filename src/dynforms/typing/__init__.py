"""Typing-centric domain modules."""

from dynforms.typing.enums import FormKind, InputType, NotificationLevel, SubmissionStatus, WidgetKind
from dynforms.typing.models import (
    FieldSpec,
    FormKindProfile,
    FormTemplate,
    Notification,
    Record,
    RenderableWidget,
    SavedForm,
    Selection,
    SubmissionOutcome,
    SubmissionPackage,
)
from dynforms.typing.protocol import DialogHost, Notifier, SubmissionSink, TemplateSource

__all__ = [
    "DialogHost",
    "FieldSpec",
    "FormKind",
    "FormKindProfile",
    "FormTemplate",
    "InputType",
    "Notification",
    "NotificationLevel",
    "Notifier",
    "Record",
    "RenderableWidget",
    "SavedForm",
    "Selection",
    "SubmissionOutcome",
    "SubmissionPackage",
    "SubmissionSink",
    "SubmissionStatus",
    "TemplateSource",
    "WidgetKind",
]
