"""Field widget resolution."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from dynforms.typing.enums import InputType, WidgetKind
from dynforms.typing.models import RenderableWidget, SelectOption

if TYPE_CHECKING:
    from dynforms.typing.models import ChangeHandler, FieldSpec, FieldValue

TEXTAREA_ROWS = 3
GRID_COLUMNS = 2
_SINGLE_LINE_TYPES = frozenset(member.value for member in InputType)


def widget_kind_for(field: FieldSpec) -> WidgetKind:
    """Map a field's declared type to a widget family.

    Unknown types, and selects without options, fall back to a text input.

    Args:
        field (FieldSpec): Field descriptor.

    Returns:
        WidgetKind: Widget family.
    """
    if field.type == WidgetKind.TEXTAREA:
        return WidgetKind.TEXTAREA
    if field.type == WidgetKind.SELECT and field.options:
        return WidgetKind.SELECT
    if field.type == WidgetKind.CHECKBOX:
        return WidgetKind.CHECKBOX
    return WidgetKind.TEXT


def input_type_for(field: FieldSpec) -> InputType:
    """Return the single-line input kind, defaulting to plain text."""
    if field.type in _SINGLE_LINE_TYPES:
        return InputType(field.type)
    return InputType.TEXT


def select_placeholder(field: FieldSpec) -> str:
    """Return the selector prompt, derived from the label when absent."""
    return field.placeholder or f"Sélectionner {field.label.lower()}"


class FieldWidgetResolver:
    """Stateless dispatcher from field specs to renderable widgets."""

    def resolve(self, field: FieldSpec, current_value: FieldValue, on_change: ChangeHandler) -> RenderableWidget:
        """Describe the widget editing `field`.

        Args:
            field (FieldSpec): Field descriptor.
            current_value (FieldValue): Value held by the record.
            on_change (ChangeHandler): Called synchronously with each edit.

        Returns:
            RenderableWidget: Widget description bound to `on_change`.
        """
        kind = widget_kind_for(field)
        common = {
            "identifier": field.identifier,
            "kind": kind,
            "caption": field.label,
            "required_marker": field.required,
            "on_change": on_change,
        }

        match kind:
            case WidgetKind.TEXTAREA:
                return RenderableWidget(
                    **common,
                    value=_as_text(current_value),
                    placeholder=field.placeholder,
                    native_required=field.required,
                    rows=TEXTAREA_ROWS,
                    column_span=GRID_COLUMNS,
                )
            case WidgetKind.SELECT:
                return RenderableWidget(
                    **common,
                    value=_as_text(current_value),
                    placeholder=select_placeholder(field),
                    options=[SelectOption(value=option, label=option) for option in field.options],
                )
            case WidgetKind.CHECKBOX:
                return RenderableWidget(
                    **common,
                    value=current_value if isinstance(current_value, bool) else False,
                    toggle_caption=field.placeholder or field.label,
                )
            case _:
                return RenderableWidget(
                    **common,
                    value=_as_text(current_value),
                    placeholder=field.placeholder,
                    native_required=field.required,
                    input_type=input_type_for(field),
                )

    def resolve_all(
        self,
        fields: Iterable[FieldSpec],
        record: dict[str, FieldValue],
        on_change_for: Callable[[str], ChangeHandler],
    ) -> list[RenderableWidget]:
        """Resolve every field in render order.

        `on_change_for(identifier)` must return the change handler of that field.
        """
        return [
            self.resolve(field, record.get(field.identifier, ""), on_change_for(field.identifier)) for field in fields
        ]


def missing_native_required(widgets: Iterable[RenderableWidget]) -> list[str]:
    """Return identifiers of natively required widgets left blank.

    This mirrors the constraint check a runtime with native form validation
    performs before letting a submit event through.
    """
    return [widget.identifier for widget in widgets if widget.native_required and widget.is_empty]


def _as_text(value: FieldValue) -> str:
    return value if isinstance(value, str) else ""
