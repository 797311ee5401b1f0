from __future__ import annotations

from dynforms.typing.models import FormTemplate, Selection
from dynforms.validation import SubmissionValidator


def test_cannot_submit_without_template() -> None:
    assert SubmissionValidator.can_submit(Selection()) is False


def test_can_submit_with_template(commerce_template: FormTemplate) -> None:
    assert SubmissionValidator().can_submit(Selection(template=commerce_template)) is True
