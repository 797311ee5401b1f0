"""Catalogue filtering by form kind."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, ConfigDict, Field

from dynforms.typing.enums import FormKind

if TYPE_CHECKING:
    from dynforms.typing.models import FormTemplate
    from dynforms.typing.protocol import TemplateSource

PROCEDURE_CATEGORIES: frozenset[str] = frozenset(
    {
        "État Civil",
        "Urbanisme",
        "Commerce",
        "Emploi",
        "Santé",
        "Éducation",
        "Transport",
        "Fiscalité",
    },
)
LEGAL_CATEGORY = "Textes Juridiques"
LEGAL_TYPE_MARKER = "juridique"


class TemplateFilter(Protocol):
    """Strategy selecting the templates a session offers."""

    def accepts(self, template: FormTemplate) -> bool:
        """Return whether `template` belongs to the filtered set."""


class ProcedureFilter(BaseModel):
    """Keep templates whose category is an administrative-procedure category."""

    model_config = ConfigDict(frozen=True)

    categories: frozenset[str] = Field(default=PROCEDURE_CATEGORIES)

    def accepts(self, template: FormTemplate) -> bool:
        return template.category in self.categories


class LegalTextFilter(BaseModel):
    """Keep every template a `ProcedureFilter` with the same categories rejects."""

    model_config = ConfigDict(frozen=True)

    categories: frozenset[str] = Field(default=PROCEDURE_CATEGORIES)

    def accepts(self, template: FormTemplate) -> bool:
        return template.category not in self.categories


class SavedFormLegalFilter(BaseModel):
    """Best-effort legal-text classifier for saved forms.

    A form qualifies when its category is exactly the legal category, or when
    its type tag mentions the legal marker (case-insensitive). A procedure
    category always wins over the type tag. Missing type or category never
    raises.
    """

    model_config = ConfigDict(frozen=True)

    legal_category: str = LEGAL_CATEGORY
    type_marker: str = LEGAL_TYPE_MARKER
    procedure_categories: frozenset[str] = Field(default=PROCEDURE_CATEGORIES)

    def accepts(self, template: FormTemplate) -> bool:
        category = getattr(template, "category", None) or ""
        if category in self.procedure_categories:
            return False
        if category == self.legal_category:
            return True
        type_tag = getattr(template, "type", None) or ""
        return self.type_marker.lower() in type_tag.lower()


class CategoryMatchFilter(BaseModel):
    """Keep templates whose category matches free text, ignoring case."""

    model_config = ConfigDict(frozen=True)

    category: str

    def accepts(self, template: FormTemplate) -> bool:
        return (template.category or "").strip().casefold() == self.category.strip().casefold()


def filter_for_kind(kind: FormKind, *, saved_forms: bool = False) -> TemplateFilter:
    """Return the filter strategy for a form kind.

    Args:
        kind (FormKind): Requested kind.
        saved_forms (bool): Whether the source is the loosely shaped saved-form library.

    Returns:
        TemplateFilter: Strategy instance.
    """
    if kind == FormKind.PROCEDURE:
        return ProcedureFilter()
    if saved_forms:
        return SavedFormLegalFilter()
    return LegalTextFilter()


def apply_filter(templates: Sequence[FormTemplate], template_filter: TemplateFilter) -> list[FormTemplate]:
    """Return accepted templates, keeping source order."""
    return [template for template in templates if template_filter.accepts(template)]


def filter_by_kind(catalogue: TemplateSource, kind: FormKind) -> list[FormTemplate]:
    """Return the curated-catalogue templates relevant to `kind`.

    Procedure and legal-text results partition the catalogue.

    Args:
        catalogue (TemplateSource): Curated catalogue.
        kind (FormKind): Requested kind.

    Returns:
        list[FormTemplate]: Templates in catalogue order; possibly empty.
    """
    return apply_filter(catalogue.list(), filter_for_kind(kind))
