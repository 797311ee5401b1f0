"""Renderable widget descriptions."""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from dynforms.typing.enums import InputType, WidgetKind
from dynforms.typing.models.template import FieldValue

ChangeHandler = Callable[[FieldValue], None]


class SelectOption(BaseModel):
    """One entry of a closed-choice selector."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class RenderableWidget(BaseModel):
    """Everything a host needs to draw and edit one field.

    The widget carries the current value for display only; edits go through
    `change`, which forwards to the record owner.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    identifier: str
    kind: WidgetKind
    caption: str
    required_marker: bool = False
    native_required: bool = False
    value: FieldValue
    placeholder: str | None = None
    input_type: InputType | None = None
    rows: int | None = None
    column_span: int = 1
    options: list[SelectOption] = Field(default_factory=list)
    toggle_caption: str | None = None
    on_change: ChangeHandler = Field(exclude=True, repr=False)

    @property
    def row_caption(self) -> str:
        """Caption shown above the widget, with a marker on required fields."""
        return f"{self.caption} *" if self.required_marker else self.caption

    @property
    def is_empty(self) -> bool:
        """Whether a text-like value is blank."""
        return isinstance(self.value, str) and not self.value.strip()

    def change(self, value: FieldValue) -> None:
        """Report an edit to the record owner."""
        self.on_change(value)
