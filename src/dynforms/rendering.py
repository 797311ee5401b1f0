"""Plain-text rendering of form sessions for terminals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dynforms.typing.enums import WidgetKind

if TYPE_CHECKING:
    from dynforms.engine import FormEngine
    from dynforms.typing.models import RenderableWidget


def render_widget(widget: RenderableWidget) -> str:
    """Render one widget as a single line."""
    match widget.kind:
        case WidgetKind.CHECKBOX:
            mark = "x" if widget.value is True else " "
            body = f"[{mark}] {widget.toggle_caption}"
        case WidgetKind.SELECT:
            values = " | ".join(option.label for option in widget.options)
            body = f"{_display(widget)}  ({values})"
        case WidgetKind.TEXTAREA:
            body = f"{_display(widget)}  [{widget.rows} lignes]"
        case _:
            body = f"{_display(widget)}  [{widget.input_type}]"
    return f"{widget.row_caption} ({widget.identifier}): {body}"


def render_choices(engine: FormEngine) -> str:
    """Render the template selector."""
    lines = [engine.profile.selector_label]
    for choice in engine.choices():
        prefix = "  -" if choice.disabled else f"  {choice.value}:"
        lines.append(f"{prefix} {choice.label}")
    return "\n".join(lines)


def render_form(engine: FormEngine) -> str:
    """Render the selected template and its widgets."""
    lines = [engine.profile.dialog_title]
    summary = engine.summary()
    if summary is None:
        lines.append(engine.profile.selector_placeholder)
        return "\n".join(lines)

    lines.append(summary)
    lines.append("")
    lines.append(engine.profile.details_title)
    lines.extend(f"  {render_widget(widget)}" for widget in engine.widgets())
    return "\n".join(lines)


def _display(widget: RenderableWidget) -> str:
    if widget.value:
        return str(widget.value)
    return f"<{widget.placeholder or ''}>"
