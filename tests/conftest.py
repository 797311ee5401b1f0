"""Pytest marker auto-assignment by folder, plus shared form fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from dynforms import logger
from dynforms.catalogue import StaticCatalogue
from dynforms.notifications import CollectingNotifier
from dynforms.typing.models import FieldSpec, FormTemplate, SubmissionPackage


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


class RecordingSink:
    """Sink keeping delivered packages."""

    def __init__(self, *, accept: bool = True) -> None:
        self.accept = accept
        self.closed = False
        self.packages: list[SubmissionPackage] = []

    def deliver(self, package: SubmissionPackage) -> bool:
        self.packages.append(package)
        return self.accept

    def close(self) -> None:
        self.closed = True


class RecordingDialog:
    """Dialog host counting close calls."""

    def __init__(self) -> None:
        self.closed = 0

    def close(self) -> None:
        self.closed += 1


@pytest.fixture
def commerce_template() -> FormTemplate:
    return FormTemplate(
        id="T1",
        name="Registre du commerce",
        description="Immatriculation",
        category="Commerce",
        fields=[FieldSpec(identifier="name", label="Name", type="text", required=True)],
    )


@pytest.fixture
def mixed_template() -> FormTemplate:
    return FormTemplate(
        id="mixed",
        name="Projet de loi",
        description="Texte",
        category="Textes Juridiques",
        fields=[
            FieldSpec(identifier="title", label="Intitulé", required=True),
            FieldSpec(identifier="body", label="Contenu", type="textarea"),
            FieldSpec(identifier="domain", label="Domaine", type="select", options=["Civil", "Pénal"]),
            FieldSpec(identifier="in_force", label="En vigueur", type="checkbox"),
            FieldSpec(identifier="published", label="Publication", type="date", default_value="2024-01-01"),
        ],
    )


@pytest.fixture
def catalogue(commerce_template: FormTemplate, mixed_template: FormTemplate) -> StaticCatalogue:
    return StaticCatalogue([commerce_template, mixed_template])


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def dialog() -> RecordingDialog:
    return RecordingDialog()


@pytest.fixture
def notifier() -> CollectingNotifier:
    return CollectingNotifier()


@pytest.fixture
def rejecting_sink() -> RecordingSink:
    return RecordingSink(accept=False)
