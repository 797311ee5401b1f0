from __future__ import annotations

from dynforms.catalogue import StaticCatalogue, load_default_catalogue
from dynforms.filtering import (
    PROCEDURE_CATEGORIES,
    CategoryMatchFilter,
    LegalTextFilter,
    ProcedureFilter,
    SavedFormLegalFilter,
    apply_filter,
    filter_by_kind,
    filter_for_kind,
)
from dynforms.typing.enums import FormKind
from dynforms.typing.models import FormTemplate, SavedForm


def _template(template_id: str, category: str) -> FormTemplate:
    return FormTemplate(id=template_id, name=template_id, category=category)


def test_procedure_and_legal_text_partition_the_catalogue() -> None:
    catalogue = StaticCatalogue(
        [
            _template("a", "État Civil"),
            _template("b", "Textes Juridiques"),
            _template("c", "Fiscalité"),
            _template("d", ""),
            _template("e", "Décrets"),
        ],
    )

    procedures = filter_by_kind(catalogue, FormKind.PROCEDURE)
    legal = filter_by_kind(catalogue, FormKind.LEGAL_TEXT)

    assert [t.id for t in procedures] == ["a", "c"]
    assert [t.id for t in legal] == ["b", "d", "e"]
    assert not {t.id for t in procedures} & {t.id for t in legal}
    assert {t.id for t in procedures} | {t.id for t in legal} == {t.id for t in catalogue.list()}


def test_partition_holds_on_packaged_catalogue() -> None:
    catalogue = load_default_catalogue()

    procedures = filter_by_kind(catalogue, FormKind.PROCEDURE)
    legal = filter_by_kind(catalogue, FormKind.LEGAL_TEXT)

    assert len(procedures) + len(legal) == len(catalogue.list())
    assert all(t.category in PROCEDURE_CATEGORIES for t in procedures)


def test_empty_catalogue_filters_to_empty_list() -> None:
    assert filter_by_kind(StaticCatalogue([]), FormKind.PROCEDURE) == []


def test_saved_form_legal_filter_matches_category_or_type_marker() -> None:
    legal_filter = SavedFormLegalFilter()

    assert legal_filter.accepts(SavedForm(id="1", name="1", category="Textes Juridiques"))
    assert legal_filter.accepts(SavedForm(id="2", name="2", type="TEXTES_JURIDIQUES"))
    assert legal_filter.accepts(SavedForm(id="3", name="3", type="Acte juridique", category="Divers"))
    assert not legal_filter.accepts(SavedForm(id="4", name="4", type="rapport", category="Divers"))


def test_saved_form_legal_filter_tolerates_missing_fields() -> None:
    assert not SavedFormLegalFilter().accepts(SavedForm(id="1", name="1"))
    assert not SavedFormLegalFilter().accepts(FormTemplate(id="2", name="2"))


def test_saved_form_legal_filter_lets_procedure_category_win() -> None:
    form = SavedForm(id="1", name="1", category="Urbanisme", type="juridique")

    assert not SavedFormLegalFilter().accepts(form)


def test_category_match_filter_ignores_case_and_spaces() -> None:
    templates = [_template("a", "Textes Juridiques"), _template("b", "Commerce")]

    assert [t.id for t in apply_filter(templates, CategoryMatchFilter(category=" textes juridiques "))] == ["a"]


def test_filter_for_kind_selects_strategy() -> None:
    assert isinstance(filter_for_kind(FormKind.PROCEDURE), ProcedureFilter)
    assert isinstance(filter_for_kind(FormKind.LEGAL_TEXT), LegalTextFilter)
    assert isinstance(filter_for_kind(FormKind.LEGAL_TEXT, saved_forms=True), SavedFormLegalFilter)
    assert isinstance(filter_for_kind(FormKind.PROCEDURE, saved_forms=True), ProcedureFilter)


def test_apply_filter_keeps_duplicates_and_order() -> None:
    template = _template("a", "Commerce")

    assert apply_filter([template, template], ProcedureFilter()) == [template, template]
