"""Selection and record state for one form session."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from dynforms import logger
from dynforms.typing.enums import WidgetKind
from dynforms.typing.models import FieldSpec, FieldValue, FormTemplate, Record, Selection

if TYPE_CHECKING:
    from dynforms.typing.protocol import TemplateSource

RecordObserver = Callable[[Selection, Record], None]


def empty_value(field: FieldSpec) -> FieldValue:
    """Return the initial record value for `field`.

    Checkbox values are always booleans; every other kind holds a string,
    seeded from the field default when one is declared.
    """
    if field.type == WidgetKind.CHECKBOX:
        return field.default_value if isinstance(field.default_value, bool) else False
    if isinstance(field.default_value, str):
        return field.default_value
    return ""


def build_record(template: FormTemplate) -> Record:
    """Build a fresh record keyed by every field identifier, in field order."""
    return {field.identifier: empty_value(field) for field in template.fields}


class RecordBinder:
    """Own the selected template and the record shaped by it.

    Templates are resolved against the source each time, so the binder always
    sees the current filtered set. The record is rebuilt on every selection and
    never merged with the previous one.
    """

    def __init__(self, source: TemplateSource | Callable[[], Sequence[FormTemplate]]) -> None:
        self._source = source
        self._selection = Selection()
        self._record: Record = {}
        self._observers: list[RecordObserver] = []

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def template(self) -> FormTemplate | None:
        return self._selection.template

    @property
    def record(self) -> Record:
        """Snapshot of the current record."""
        return dict(self._record)

    def templates(self) -> Sequence[FormTemplate]:
        """Return the templates selection resolves against."""
        if callable(self._source):
            return self._source()
        return self._source.list()

    def subscribe(self, observer: RecordObserver) -> Callable[[], None]:
        """Register an observer called after every state change.

        Returns:
            Callable[[], None]: Function removing the observer.
        """
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def select(self, template_id: str | None) -> FormTemplate | None:
        """Select a template by id and rebuild the record.

        Unknown or empty ids deselect.

        Args:
            template_id (str | None): Template identifier.

        Returns:
            FormTemplate | None: Selected template, or None after deselection.
        """
        template = self._resolve(template_id)
        if template is None:
            if template_id:
                logger.info("Unknown template id, clearing selection", template_id=template_id)
            self._selection = Selection()
            self._record = {}
        else:
            self._selection = Selection(template=template)
            self._record = build_record(template)
            logger.debug("Template selected", template_id=template.id, fields=len(template.fields))
        self._notify()
        return template

    def set_field_value(self, identifier: str, value: FieldValue) -> bool:
        """Set one record value.

        Args:
            identifier (str): Field identifier of the selected template.
            value (FieldValue): New value; bool for checkboxes, str otherwise.

        Returns:
            bool: True when the value was stored, False when it was ignored.
        """
        template = self._selection.template
        if template is None:
            return False

        field = template.get_field(identifier)
        if field is None:
            logger.warning("Ignoring value for unknown field", template_id=template.id, identifier=identifier)
            return False

        expected_type = bool if isinstance(self._record[identifier], bool) else str
        if not isinstance(value, expected_type):
            logger.warning(
                "Ignoring value with unexpected type",
                template_id=template.id,
                identifier=identifier,
                value_type=type(value).__name__,
            )
            return False

        self._record[identifier] = value
        self._notify()
        return True

    def clear(self) -> None:
        """Drop the selection and the record."""
        self.select(None)

    def _resolve(self, template_id: str | None) -> FormTemplate | None:
        if not template_id:
            return None
        for template in self.templates():
            if template.id == template_id:
                return template
        return None

    def _notify(self) -> None:
        snapshot = self.record
        for observer in list(self._observers):
            observer(self._selection, snapshot)
