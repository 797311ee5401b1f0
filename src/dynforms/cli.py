"""CLI entry point for Dynforms."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from dynforms import __version__, logger
from dynforms.catalogue import JsonCatalogue, SavedFormLibrary, load_default_catalogue
from dynforms.engine import FormEngine, build_engine
from dynforms.exceptions import PackageError
from dynforms.logging import configure_logging
from dynforms.notifications import CollectingNotifier
from dynforms.rendering import render_choices, render_form
from dynforms.settings import Settings, get_settings
from dynforms.sinks import build_sink
from dynforms.typing.enums import FormKind, SubmissionStatus, WidgetKind
from dynforms.widgets import widget_kind_for

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dynforms.typing.models import FieldSpec, FieldValue
    from dynforms.typing.protocol import SubmissionSink, TemplateSource

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "oui", "o", "on", "x"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "non", "off", ""})


def _form_kind_from_cli(value: str) -> FormKind:
    """Convert `--kind` CLI value into a form kind.

    Raises:
        argparse.ArgumentTypeError: If value is not supported.
    """
    try:
        return FormKind(value)
    except ValueError as exc:
        supported = ", ".join(member.value for member in FormKind)
        raise argparse.ArgumentTypeError(f"--kind must be one of: {supported}") from exc  # noqa: TRY003


def _assignment_from_cli(value: str) -> tuple[str, str]:
    """Split a `--set key=value` argument.

    Raises:
        argparse.ArgumentTypeError: If no `=` separates key and value.
    """
    key, sep, raw = value.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"--set expects key=value, got: {value}")  # noqa: TRY003
    return key.strip(), raw


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--kind", type=_form_kind_from_cli, default=FormKind.PROCEDURE)
    parser.add_argument("--catalogue", type=Path, default=None, dest="catalogue_path")
    parser.add_argument("--library", type=Path, default=None, dest="library_path")


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="dynforms")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List the templates offered for a form kind")
    _add_source_arguments(list_parser)

    show_parser = subparsers.add_parser("show", help="Show the form generated for a template")
    _add_source_arguments(show_parser)
    show_parser.add_argument("--template-id", required=True, dest="template_id")

    fill_parser = subparsers.add_parser("fill", help="Fill in a template and submit it")
    _add_source_arguments(fill_parser)
    fill_parser.add_argument("--template-id", required=True, dest="template_id")
    fill_parser.add_argument(
        "--set",
        type=_assignment_from_cli,
        action="append",
        default=[],
        dest="assignments",
        metavar="KEY=VALUE",
    )
    fill_parser.add_argument("--interactive", action="store_true")
    fill_parser.add_argument(
        "--output",
        nargs="?",
        const="",
        default=None,
        dest="output",
        metavar="PATH",
        help="Write the submission as JSON under PATH (RESULTS_DIR when PATH is omitted)",
    )

    return parser


def _resolve_source(args: argparse.Namespace, settings: Settings) -> tuple[TemplateSource | None, TemplateSource | None]:
    """Return (catalogue, library) for this run; CLI paths override settings."""
    library_path = args.library_path or settings.library_path
    if library_path is not None:
        return None, SavedFormLibrary(library_path)
    catalogue_path = args.catalogue_path or settings.catalogue_path
    if catalogue_path is not None:
        return JsonCatalogue(catalogue_path), None
    return load_default_catalogue(), None


def _output_dir(args: argparse.Namespace, settings: Settings) -> Path | None:
    """Return the JSON output directory; a bare `--output` means RESULTS_DIR."""
    output = getattr(args, "output", None)
    if output is None:
        return None
    return Path(output or settings.results_dir)


def coerce_cli_value(field: FieldSpec, raw: str) -> FieldValue:
    """Turn text typed on the command line into a record value.

    Raises:
        ValueError: If a checkbox value is not a recognised yes/no word, or a
            select value is not one of its options.
    """
    kind = widget_kind_for(field)
    if kind == WidgetKind.SELECT and raw and raw not in field.options:
        message = f"Expected one of {', '.join(field.options)} for '{field.identifier}', got: {raw}"
        raise ValueError(message)
    if kind != WidgetKind.CHECKBOX:
        return raw
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected yes/no for '{field.identifier}', got: {raw}")  # noqa: TRY003


def _apply_assignments(engine: FormEngine, assignments: Sequence[tuple[str, str]]) -> list[str]:
    """Apply `--set` values; return the keys that were rejected."""
    template = engine.template
    rejected: list[str] = []
    for key, raw in assignments:
        field = template.get_field(key) if template is not None else None
        if field is None:
            rejected.append(key)
            continue
        try:
            value = coerce_cli_value(field, raw)
        except ValueError:
            rejected.append(key)
            continue
        if not engine.set_field_value(key, value):
            rejected.append(key)
    return rejected


def _prompt_fields(engine: FormEngine) -> None:
    """Ask for each field value on stdin, keeping current values on empty input."""
    template = engine.template
    if template is None:
        return
    for widget in engine.widgets():
        field = template.get_field(widget.identifier)
        if field is None:
            continue
        hint = widget.toggle_caption if widget.kind == WidgetKind.CHECKBOX else widget.placeholder
        prompt = f"{widget.row_caption}{f' [{hint}]' if hint else ''}: "
        while True:
            raw = input(prompt)
            if not raw and widget.kind != WidgetKind.CHECKBOX:
                break
            try:
                widget.change(coerce_cli_value(field, raw))
            except ValueError as exc:
                print(exc)
                continue
            break


def _run_fill(engine: FormEngine, args: argparse.Namespace, notifier: CollectingNotifier) -> int:
    if engine.select(args.template_id) is None:
        logger.error("Template not available for this kind", template_id=args.template_id, kind=engine.kind.to_str())
        print(render_choices(engine))
        return 1

    rejected = _apply_assignments(engine, args.assignments)
    if rejected:
        logger.warning("Ignored field assignments", fields=rejected)
    if args.interactive:
        _prompt_fields(engine)

    outcome = engine.submit()
    for notification in notifier.drain():
        print(f"{notification.title}: {notification.message}")
    if outcome.status == SubmissionStatus.BLOCKED:
        print(f"Champs obligatoires manquants: {', '.join(outcome.missing_required)}")
    return 0 if outcome.submitted else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        int: Exit code (0 for success, 1 for error, 130 when interrupted).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in {"list", "show", "fill"}:
        parser.print_help()
        return 0

    notifier = CollectingNotifier()
    sink: SubmissionSink | None = None
    try:
        catalogue, library = _resolve_source(args, settings)
        sink = build_sink(settings, output_dir=_output_dir(args, settings))
        engine = build_engine(
            args.kind,
            catalogue=catalogue,
            library=library,
            sink=sink,
            notifier=notifier,
            native_validation=settings.native_validation,
        )

        if args.command == "list":
            print(render_choices(engine))
            return 0
        if args.command == "show":
            if engine.select(args.template_id) is None:
                print(render_choices(engine))
                return 1
            print(render_form(engine))
            return 0
        return _run_fill(engine, args, notifier)
    except PackageError:
        logger.exception("Command failed")
        return 1
    except KeyboardInterrupt:
        logger.info("Aborted by user")
        return 130
    finally:
        if sink is not None:
            sink.close()


if __name__ == "__main__":
    raise SystemExit(main())
