"""Hand-off of completed records to the workflow consumer."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from dynforms import logger
from dynforms.exceptions import DeliveryError
from dynforms.typing.enums import SubmissionStatus
from dynforms.typing.models import SubmissionOutcome, SubmissionPackage
from dynforms.validation import SubmissionValidator

if TYPE_CHECKING:
    from dynforms.typing.models import FormKindProfile, Record, Selection
    from dynforms.typing.protocol import DialogHost, Notifier, SubmissionSink

_FAILURE_MESSAGE = "L'enregistrement du formulaire a échoué. Veuillez réessayer."


class SubmissionPipeline:
    """Validate, package and emit one submission.

    On success the dialog is closed and `reset` is called so the owning
    session returns to its empty state. Failures leave the session untouched.
    """

    def __init__(
        self,
        *,
        sink: SubmissionSink,
        notifier: Notifier,
        profile: FormKindProfile,
        reset: Callable[[], None],
        dialog: DialogHost | None = None,
        validator: SubmissionValidator | None = None,
    ) -> None:
        self.sink = sink
        self.notifier = notifier
        self.profile = profile
        self.dialog = dialog
        self.validator = validator or SubmissionValidator()
        self._reset = reset

    def submit(self, selection: Selection, record: Record) -> SubmissionOutcome:
        """Emit the selected template and its record.

        Args:
            selection (Selection): Current selection.
            record (Record): Current record.

        Returns:
            SubmissionOutcome: What happened to the attempt.
        """
        if not self.validator.can_submit(selection) or selection.template is None:
            self.notifier.error(self.profile.error_title, self.profile.error_message)
            return SubmissionOutcome(status=SubmissionStatus.NO_TEMPLATE)

        template = selection.template
        package = SubmissionPackage(template=template, data=dict(record))

        try:
            accepted = self.sink.deliver(package)
        except DeliveryError:
            logger.exception("Submission delivery failed", template_id=template.id)
            accepted = False

        if not accepted:
            self.notifier.error(self.profile.error_title, _FAILURE_MESSAGE)
            return SubmissionOutcome(status=SubmissionStatus.FAILED, package=package)

        logger.info("Submission delivered", template_id=template.id, kind=self.profile.kind.to_str())
        self.notifier.info(self.profile.success_title, self.profile.success_text(template.name))
        if self.dialog is not None:
            self.dialog.close()
        self._reset()
        return SubmissionOutcome(status=SubmissionStatus.SUBMITTED, package=package)
