"""Form session engine.

A `FormEngine` is one dialog's worth of state: which template is selected and
the record being filled in. It wires the binder, the widget resolver and the
submission pipeline together, and is parametrized by a filter strategy and a
wording profile so one implementation serves every form kind.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypedDict, Unpack

from dynforms import logger
from dynforms.binder import RecordBinder, RecordObserver
from dynforms.filtering import TemplateFilter, apply_filter, filter_for_kind
from dynforms.notifications import LogNotifier
from dynforms.pipeline import SubmissionPipeline
from dynforms.sinks import LoggingSink
from dynforms.typing.enums import FormKind, SubmissionStatus
from dynforms.typing.models import (
    FormKindProfile,
    FormTemplate,
    Record,
    RenderableWidget,
    Selection,
    SubmissionOutcome,
    TemplateChoice,
    profile_for,
)
from dynforms.widgets import FieldWidgetResolver, missing_native_required

if TYPE_CHECKING:
    from dynforms.typing.models import ChangeHandler, FieldValue
    from dynforms.typing.protocol import DialogHost, Notifier, SubmissionSink, TemplateSource


class EngineOptions(TypedDict, total=False):
    """Collaborators and switches shared by every engine factory."""

    profile: FormKindProfile
    sink: SubmissionSink
    notifier: Notifier
    dialog: DialogHost
    resolver: FieldWidgetResolver
    native_validation: bool


class FormEngine:
    """Selection, record and submission for one form dialog."""

    def __init__(
        self,
        source: TemplateSource,
        *,
        kind: FormKind = FormKind.PROCEDURE,
        template_filter: TemplateFilter | None = None,
        profile: FormKindProfile | None = None,
        sink: SubmissionSink | None = None,
        notifier: Notifier | None = None,
        dialog: DialogHost | None = None,
        resolver: FieldWidgetResolver | None = None,
        native_validation: bool = True,
    ) -> None:
        self.source = source
        self.kind = kind
        self.template_filter = template_filter or filter_for_kind(kind)
        self.profile = profile or profile_for(kind)
        self.dialog = dialog
        self.resolver = resolver or FieldWidgetResolver()
        self.native_validation = native_validation
        self.binder = RecordBinder(self.templates)
        self.pipeline = SubmissionPipeline(
            sink=sink or LoggingSink(),
            notifier=notifier or LogNotifier(),
            profile=self.profile,
            reset=self.binder.clear,
            dialog=dialog,
        )

    @classmethod
    def for_saved_forms(cls, library: TemplateSource, kind: FormKind, **options: Unpack[EngineOptions]) -> FormEngine:
        """Build an engine over the saved-form library with its fuzzy classifier."""
        return cls(library, kind=kind, template_filter=filter_for_kind(kind, saved_forms=True), **options)

    # Catalogue side

    def templates(self) -> list[FormTemplate]:
        """Templates this session offers, in catalogue order."""
        return apply_filter(self.source.list(), self.template_filter)

    def choices(self) -> list[TemplateChoice]:
        """Selector entries; a single disabled entry when nothing is available."""
        templates = self.templates()
        if not templates:
            return [TemplateChoice(value="", label=self.profile.empty_label, disabled=True)]
        return [TemplateChoice(value=template.id, label=_choice_label(template)) for template in templates]

    # Selection and record

    @property
    def selection(self) -> Selection:
        return self.binder.selection

    @property
    def template(self) -> FormTemplate | None:
        return self.binder.template

    @property
    def record(self) -> Record:
        return self.binder.record

    @property
    def submit_enabled(self) -> bool:
        """Whether the submit affordance is active."""
        return self.pipeline.validator.can_submit(self.selection)

    def select(self, template_id: str | None) -> FormTemplate | None:
        """Select a template; switching templates always rebuilds the record."""
        if self.binder.template is not None and template_id != self.binder.template.id:
            self.binder.clear()
        return self.binder.select(template_id)

    def set_field_value(self, identifier: str, value: FieldValue) -> bool:
        return self.binder.set_field_value(identifier, value)

    def clear(self) -> None:
        self.binder.clear()

    def subscribe(self, observer: RecordObserver) -> Callable[[], None]:
        return self.binder.subscribe(observer)

    def summary(self) -> str | None:
        """Description and field count of the selected template."""
        template = self.template
        if template is None:
            return None
        return f"Description: {template.description}\nChamps: {len(template.fields)} champs configurés"

    # Rendering

    def widgets(self) -> list[RenderableWidget]:
        """Widgets for the selected template, re-read from the current record."""
        template = self.template
        if template is None:
            return []
        return self.resolver.resolve_all(template.fields, self.binder.record, self._change_handler)

    def _change_handler(self, identifier: str) -> ChangeHandler:
        def _on_change(value: FieldValue) -> None:
            self.binder.set_field_value(identifier, value)

        return _on_change

    # Lifecycle

    def submit(self) -> SubmissionOutcome:
        """Submit the current record.

        With native validation on, blank natively required inputs block the
        submit event before the pipeline runs, as a browser would.

        Returns:
            SubmissionOutcome: What happened to the attempt.
        """
        if self.native_validation:
            missing = missing_native_required(self.widgets())
            if missing:
                logger.info(
                    "Submission blocked by required inputs",
                    template_id=self.selection.template_id,
                    missing=missing,
                )
                return SubmissionOutcome(status=SubmissionStatus.BLOCKED, missing_required=missing)
        return self.pipeline.submit(self.selection, self.binder.record)

    def close(self) -> None:
        """Dismiss the dialog; nothing of the session survives."""
        if self.dialog is not None:
            self.dialog.close()
        self.binder.clear()


def _choice_label(template: FormTemplate) -> str:
    if template.category:
        return f"{template.name} ({template.category})"
    return template.name


def build_engine(
    kind: FormKind,
    *,
    catalogue: TemplateSource | None = None,
    library: TemplateSource | None = None,
    **options: Unpack[EngineOptions],
) -> FormEngine:
    """Build an engine on the saved-form library when given, else on the catalogue.

    Raises:
        ValueError: If neither source is given.
    """
    if library is not None:
        return FormEngine.for_saved_forms(library, kind, **options)
    if catalogue is None:
        raise ValueError("A catalogue or a saved-form library is required")  # noqa: TRY003
    return FormEngine(catalogue, kind=kind, **options)
