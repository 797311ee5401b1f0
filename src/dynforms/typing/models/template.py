"""Template-centric domain models."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

FieldValue = str | bool
Record = dict[str, FieldValue]


class FieldSpec(BaseModel):
    """Single template field definition."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    identifier: str = Field(validation_alias=AliasChoices("identifier", "name", "id"))
    label: str
    type: str = "text"
    required: bool = False
    placeholder: str | None = None
    options: list[str] = Field(default_factory=list)
    default_value: FieldValue | None = Field(
        default=None,
        validation_alias=AliasChoices("default_value", "defaultValue"),
    )


class FormTemplate(BaseModel):
    """Reusable schema describing one kind of document or request."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    name: str
    description: str = ""
    category: str = ""
    fields: list[FieldSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_identifiers(self) -> FormTemplate:
        """Reject templates declaring the same field identifier twice.

        Raises:
            ValueError: If two fields share an identifier.

        Returns:
            FormTemplate: The validated template.
        """
        seen: set[str] = set()
        for field in self.fields:
            if field.identifier in seen:
                raise ValueError(f"Duplicate field identifier '{field.identifier}' in template '{self.id}'")  # noqa: TRY003
            seen.add(field.identifier)
        return self

    @property
    def identifiers(self) -> list[str]:
        """Field identifiers in render order."""
        return [field.identifier for field in self.fields]

    def get_field(self, identifier: str) -> FieldSpec | None:
        """Return the field with `identifier`, if any."""
        for candidate in self.fields:
            if candidate.identifier == identifier:
                return candidate
        return None


class SavedForm(FormTemplate):
    """Custom template kept in the saved-form library.

    Saved forms are user-authored, so the type tag and even the category may
    be missing.
    """

    type: str | None = None
    category: str | None = None  # type: ignore[assignment]


class TemplateChoice(BaseModel):
    """Entry of the template selector."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    disabled: bool = False
