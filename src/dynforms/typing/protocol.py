"""Collaborator interfaces."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dynforms.typing.models import FormTemplate, SubmissionPackage


class TemplateSource(Protocol):
    """Read-only supplier of templates."""

    def list(self) -> Sequence[FormTemplate]:
        """Return available templates in catalogue order.

        Returns:
            Sequence[FormTemplate]: Templates.
        """


class Notifier(Protocol):
    """User-facing notification channel."""

    def info(self, title: str, message: str) -> None:
        """Report a success."""

    def error(self, title: str, message: str) -> None:
        """Report a recoverable failure."""


class SubmissionSink(Protocol):
    """Workflow or persistence consumer of completed records."""

    def deliver(self, package: SubmissionPackage) -> bool:
        """Accept a package.

        Args:
            package: Completed template and record.

        Returns:
            bool: True when the consumer accepted the package.
        """

    def close(self) -> None:
        """Release resources held by the consumer."""


class DialogHost(Protocol):
    """Dialog hosting the form."""

    def close(self) -> None:
        """Dismiss the dialog."""
