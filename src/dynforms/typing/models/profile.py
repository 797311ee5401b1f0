"""Per-kind wording for form sessions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from dynforms.typing.enums import FormKind


class FormKindProfile(BaseModel):
    """Titles and messages shown by a session for one form kind."""

    model_config = ConfigDict(frozen=True)

    kind: FormKind
    dialog_title: str
    details_title: str
    submit_label: str
    empty_label: str
    success_title: str
    success_message: str
    error_title: str = "Erreur"
    error_message: str = "Veuillez sélectionner un formulaire depuis la bibliothèque."
    selector_label: str = "Formulaire depuis la bibliothèque *"
    selector_placeholder: str = "Sélectionner un formulaire depuis la bibliothèque"

    def success_text(self, template_name: str) -> str:
        """Render the confirmation message for a submitted template."""
        return self.success_message.format(name=template_name)


PROFILES: dict[FormKind, FormKindProfile] = {
    FormKind.PROCEDURE: FormKindProfile(
        kind=FormKind.PROCEDURE,
        dialog_title="Ajouter une nouvelle procédure administrative",
        details_title="Détails de la procédure administrative",
        submit_label="Ajouter la procédure",
        empty_label="Aucun formulaire de procédure administrative disponible dans la bibliothèque",
        success_title="Procédure ajoutée",
        success_message='La procédure basée sur "{name}" a été ajoutée avec succès.',
    ),
    FormKind.LEGAL_TEXT: FormKindProfile(
        kind=FormKind.LEGAL_TEXT,
        dialog_title="Ajouter un nouveau texte juridique",
        details_title="Détails du texte juridique",
        submit_label="Ajouter le texte",
        empty_label="Aucun formulaire de texte juridique disponible dans la bibliothèque",
        success_title="Texte juridique ajouté",
        success_message='Le texte basé sur "{name}" a été ajouté avec succès.',
    ),
}


def profile_for(kind: FormKind) -> FormKindProfile:
    """Return the wording profile for `kind`."""
    return PROFILES[kind]
