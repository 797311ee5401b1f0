"""Consumers of submitted packages."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from dynforms import logger
from dynforms.exceptions import DeliveryError
from dynforms.settings import build_httpx_client_kwargs

if TYPE_CHECKING:
    from dynforms.settings import Settings
    from dynforms.typing.models import SubmissionPackage
    from dynforms.typing.protocol import SubmissionSink


class LoggingSink:
    """Placeholder consumer: log the package and accept it."""

    def deliver(self, package: SubmissionPackage) -> bool:
        logger.info("Submission received", **package.to_payload())
        return True

    def close(self) -> None:
        pass


class JsonFileSink:
    """Write each package to its own JSON file."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.written: list[Path] = []

    def path_for(self, package: SubmissionPackage) -> Path:
        """Build the output path for a package.

        Args:
            package (SubmissionPackage): Submitted package.

        Returns:
            Path: Next free `<template-id>-<n>.json` path under the root.
        """
        safe_id = re.sub(r"[^a-z0-9._-]+", "-", package.template_id.lower()).strip("-") or "form"
        index = 1
        while (candidate := self.root / f"{safe_id}-{index}.json").exists():
            index += 1
        return candidate

    def deliver(self, package: SubmissionPackage) -> bool:
        """Write the package under the root.

        Raises:
            DeliveryError: If the root cannot be created or the file cannot be written.
        """
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            path = self.path_for(package)
            path.write_text(json.dumps(package.to_payload(), indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            raise DeliveryError(message=f"Cannot write submission under {self.root}", exc=exc) from exc
        self.written.append(path)
        logger.info("Submission persisted", path=str(path), template_id=package.template_id)
        return True

    def close(self) -> None:
        pass


class HttpWorkflowSink:
    """POST packages as JSON to a workflow endpoint."""

    def __init__(self, url: str, *, client: httpx.Client) -> None:
        self.url = url
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpWorkflowSink:
        """Build a sink on `settings.workflow_url`.

        Raises:
            DeliveryError: If no workflow URL is configured.
        """
        if not settings.workflow_url:
            raise DeliveryError(message="WORKFLOW_URL is not configured")
        return cls(settings.workflow_url, client=httpx.Client(**build_httpx_client_kwargs(settings)))

    def deliver(self, package: SubmissionPackage) -> bool:
        """Send the package.

        Returns:
            bool: True on a 2xx answer, False on any other status.

        Raises:
            DeliveryError: If the endpoint cannot be reached.
        """
        try:
            response = self._client.post(self.url, json=package.to_payload())
        except httpx.HTTPError as exc:
            raise DeliveryError(message=f"Workflow endpoint unreachable: {self.url}", exc=exc) from exc

        if response.is_success:
            return True
        logger.warning(
            "Workflow endpoint rejected submission",
            url=self.url,
            status_code=response.status_code,
            template_id=package.template_id,
        )
        return False

    def close(self) -> None:
        self._client.close()


def build_sink(settings: Settings, *, output_dir: Path | None = None) -> SubmissionSink:
    """Select the consumer configured for this run.

    An explicit output directory wins, then a workflow URL; otherwise
    submissions are only logged.
    """
    if output_dir is not None:
        return JsonFileSink(output_dir)
    if settings.workflow_url:
        return HttpWorkflowSink.from_settings(settings)
    return LoggingSink()
