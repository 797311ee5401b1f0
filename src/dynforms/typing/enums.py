"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class FormKind(_EnumMixin):
    """Kind of document a form session adds."""

    PROCEDURE = "procedure"
    LEGAL_TEXT = "legal-text"


class WidgetKind(_EnumMixin):
    """Closed set of input-widget families."""

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"


class InputType(_EnumMixin):
    """Single-line input kinds a text widget may carry."""

    TEXT = "text"
    DATE = "date"
    NUMBER = "number"
    EMAIL = "email"
    TEL = "tel"
    URL = "url"
    PASSWORD = "password"  # noqa: S105
    TIME = "time"
    DATETIME_LOCAL = "datetime-local"
    MONTH = "month"
    WEEK = "week"
    SEARCH = "search"
    COLOR = "color"


class NotificationLevel(_EnumMixin):
    """User-facing notification severity."""

    INFO = "info"
    ERROR = "error"


class SubmissionStatus(_EnumMixin):
    """Outcome of one submit attempt."""

    SUBMITTED = "submitted"
    BLOCKED = "blocked"
    NO_TEMPLATE = "no_template"
    FAILED = "failed"
