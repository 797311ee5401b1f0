"""Core domain model exports."""

from dynforms.typing.models.profile import PROFILES, FormKindProfile, profile_for
from dynforms.typing.models.submission import (
    Notification,
    Selection,
    SubmissionOutcome,
    SubmissionPackage,
)
from dynforms.typing.models.template import (
    FieldSpec,
    FieldValue,
    FormTemplate,
    Record,
    SavedForm,
    TemplateChoice,
)
from dynforms.typing.models.widget import ChangeHandler, RenderableWidget, SelectOption

__all__ = [
    "PROFILES",
    "ChangeHandler",
    "FieldSpec",
    "FieldValue",
    "FormKindProfile",
    "FormTemplate",
    "Notification",
    "Record",
    "RenderableWidget",
    "SavedForm",
    "SelectOption",
    "Selection",
    "SubmissionOutcome",
    "SubmissionPackage",
    "TemplateChoice",
    "profile_for",
]
