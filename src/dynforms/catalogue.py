"""Template catalogues and the saved-form library."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from importlib import resources
from pathlib import Path
from typing import TypeVar, cast

from pydantic import ValidationError

from dynforms import logger
from dynforms.exceptions import CatalogueError
from dynforms.typing.models import FormTemplate, SavedForm

_DEFAULT_CATALOGUE = "catalogue.json"

T = TypeVar("T", bound=FormTemplate)


class StaticCatalogue:
    """In-memory, read-only template catalogue."""

    def __init__(self, templates: Iterable[FormTemplate]) -> None:
        self._templates: tuple[FormTemplate, ...] = tuple(templates)

    def list(self) -> Sequence[FormTemplate]:
        """Return templates in catalogue order."""
        return self._templates


class JsonCatalogue(StaticCatalogue):
    """Curated catalogue read once from a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(_load_templates(path, FormTemplate))
        logger.info("Template catalogue loaded", path=str(path), templates=len(self.list()))


class SavedFormLibrary(StaticCatalogue):
    """User-authored forms read from a JSON file.

    Entries are loosely shaped: the type tag and the category may be missing.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(_load_templates(path, SavedForm))
        logger.info("Saved-form library loaded", path=str(path), forms=len(self.list()))


def load_default_catalogue() -> StaticCatalogue:
    """Return the catalogue shipped with the package.

    Returns:
        StaticCatalogue: Packaged sample templates.
    """
    payload = resources.files("dynforms.data").joinpath(_DEFAULT_CATALOGUE).read_text(encoding="utf-8")
    return StaticCatalogue(_parse_templates(json.loads(payload), FormTemplate, source=_DEFAULT_CATALOGUE))


def _load_templates(path: Path, model: type[T]) -> list[T]:
    """Read and validate templates from a JSON file.

    Args:
        path (Path): Catalogue file.
        model (type[T]): Template model to validate entries against.

    Raises:
        CatalogueError: If the file is missing, not JSON, or holds invalid templates.

    Returns:
        list[T]: Templates in file order.
    """
    if not path.is_file():
        raise CatalogueError(message=f"Catalogue path is not a file: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogueError(message=f"Catalogue is not valid JSON: {path} ({exc})") from exc
    return _parse_templates(payload, model, source=str(path))


def _parse_templates(payload: object, model: type[T], *, source: str) -> list[T]:
    """Validate a catalogue payload.

    Both a bare list and an object with a "templates" (or "forms") list are
    accepted.

    Args:
        payload (object): Decoded JSON.
        model (type[T]): Template model.
        source (str): Origin used in error messages.

    Raises:
        CatalogueError: If the payload shape or an entry is invalid.

    Returns:
        list[T]: Validated templates.
    """
    entries = payload
    if isinstance(payload, dict):
        payload_obj = cast("dict[str, object]", payload)
        entries = payload_obj.get("templates", payload_obj.get("forms"))
    if not isinstance(entries, list):
        raise CatalogueError(message=f"Catalogue must hold a list of templates: {source}")

    templates: list[T] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        try:
            template = model.model_validate(entry)
        except ValidationError as exc:
            raise CatalogueError(message=f"Invalid template at index {index} in {source}: {exc}") from exc
        if template.id in seen:
            raise CatalogueError(message=f"Duplicate template id '{template.id}' in {source}")
        seen.add(template.id)
        templates.append(template)
    return templates
