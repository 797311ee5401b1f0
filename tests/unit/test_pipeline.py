from __future__ import annotations

from typing import TYPE_CHECKING

from dynforms.exceptions import DeliveryError
from dynforms.pipeline import SubmissionPipeline
from dynforms.typing.enums import FormKind, NotificationLevel, SubmissionStatus
from dynforms.typing.models import FormTemplate, Notification, Selection, SubmissionPackage, profile_for

if TYPE_CHECKING:
    from dynforms.notifications import CollectingNotifier


def _pipeline(sink, notifier, dialog, resets: list[int]) -> SubmissionPipeline:
    return SubmissionPipeline(
        sink=sink,
        notifier=notifier,
        profile=profile_for(FormKind.PROCEDURE),
        reset=lambda: resets.append(1),
        dialog=dialog,
    )


def test_submit_without_template_reports_error(sink, notifier: CollectingNotifier, dialog) -> None:
    resets: list[int] = []

    outcome = _pipeline(sink, notifier, dialog, resets).submit(Selection(), {})

    assert outcome.status == SubmissionStatus.NO_TEMPLATE
    assert sink.packages == []
    assert dialog.closed == 0
    assert resets == []
    assert notifier.drain() == [
        Notification(
            level=NotificationLevel.ERROR,
            title="Erreur",
            message="Veuillez sélectionner un formulaire depuis la bibliothèque.",
        ),
    ]


def test_submit_emits_package_notifies_closes_and_resets(
    sink,
    notifier: CollectingNotifier,
    dialog,
    commerce_template: FormTemplate,
) -> None:
    resets: list[int] = []

    outcome = _pipeline(sink, notifier, dialog, resets).submit(Selection(template=commerce_template), {"name": "Acme"})

    assert outcome.submitted
    assert sink.packages == [SubmissionPackage(template=commerce_template, data={"name": "Acme"})]
    assert outcome.package == sink.packages[0]
    assert dialog.closed == 1
    assert resets == [1]
    [notification] = notifier.drain()
    assert notification.level == NotificationLevel.INFO
    assert notification.title == "Procédure ajoutée"
    assert "Registre du commerce" in notification.message


def test_rejected_delivery_keeps_state(
    rejecting_sink,
    notifier: CollectingNotifier,
    dialog,
    commerce_template: FormTemplate,
) -> None:
    resets: list[int] = []

    outcome = _pipeline(rejecting_sink, notifier, dialog, resets).submit(
        Selection(template=commerce_template),
        {"name": "Acme"},
    )

    assert outcome.status == SubmissionStatus.FAILED
    assert dialog.closed == 0
    assert resets == []
    assert [n.level for n in notifier.drain()] == [NotificationLevel.ERROR]


def test_delivery_error_is_reported_not_raised(
    mocker,
    notifier: CollectingNotifier,
    dialog,
    commerce_template: FormTemplate,
) -> None:
    failing_sink = mocker.Mock()
    failing_sink.deliver.side_effect = DeliveryError(message="down")
    resets: list[int] = []

    outcome = _pipeline(failing_sink, notifier, dialog, resets).submit(Selection(template=commerce_template), {"name": "x"})

    assert outcome.status == SubmissionStatus.FAILED
    assert resets == []
    assert notifier.drain()[0].level == NotificationLevel.ERROR


def test_pipeline_without_dialog_still_resets(sink, notifier: CollectingNotifier, commerce_template: FormTemplate) -> None:
    resets: list[int] = []

    outcome = _pipeline(sink, notifier, None, resets).submit(Selection(template=commerce_template), {"name": "x"})

    assert outcome.submitted
    assert resets == [1]
