from __future__ import annotations

from dynforms import logger as package_logger
from dynforms.logging import configure_logging, get_logger
from dynforms.settings import Settings
from dynforms.sinks import LoggingSink
from dynforms.typing.models import FormTemplate, SubmissionPackage


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(LOG_JSON=False, LOG_LEVEL="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_json_logs_use_message_key(capsys) -> None:
    configure_logging(settings=Settings(LOG_JSON=True, LOG_LEVEL="INFO"), force=True)
    get_logger("tests").info("Formulaire envoyé", template_id="T1")

    captured = capsys.readouterr()
    assert '"message": "Formulaire envoyé"' in captured.err
    assert '"template_id": "T1"' in captured.err


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))


def test_form_data_is_masked_by_default(capsys) -> None:
    configure_logging(settings=Settings(LOG_JSON=True, LOG_LEVEL="INFO"), force=True)
    get_logger("tests").info("Formulaire reçu", data={"email": "jean@exemple.dz", "activite": "", "en_vigueur": True})

    err = capsys.readouterr().err
    assert "jean@exemple.dz" not in err
    assert '"data": {"email": "***", "activite": "", "en_vigueur": true}' in err


def test_form_data_is_logged_when_enabled(capsys) -> None:
    configure_logging(settings=Settings(LOG_JSON=True, LOG_LEVEL="INFO", LOG_FORM_DATA=True), force=True)
    get_logger("tests").info("Formulaire reçu", data={"email": "jean@exemple.dz"})

    assert '"email": "jean@exemple.dz"' in capsys.readouterr().err


def test_logging_sink_masks_submitted_values(capsys, commerce_template: FormTemplate) -> None:
    configure_logging(settings=Settings(LOG_JSON=True, LOG_LEVEL="INFO"), force=True)

    assert LoggingSink().deliver(SubmissionPackage(template=commerce_template, data={"name": "Acme"}))

    err = capsys.readouterr().err
    assert '"templateId": "T1"' in err
    assert '"name": "***"' in err
    assert "Acme" not in err
