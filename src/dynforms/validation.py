"""Submission gating."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dynforms.typing.models import Selection


class SubmissionValidator:
    """Check the preconditions of the submission pipeline.

    Per-field required values are enforced by the native input constraints
    carried on each widget; the validator only guards the template selection.
    """

    @staticmethod
    def can_submit(selection: Selection) -> bool:
        """Return whether a template is selected."""
        return selection.template is not None
