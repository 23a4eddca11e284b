"""Transifex translation-ready webhook handler."""

import json
import logging
from collections.abc import Mapping
from urllib.parse import parse_qsl

from pydantic import ValidationError

from txgh_sync.config import Config
from txgh_sync.exceptions import RemoteCallError, SignatureError
from txgh_sync.infrastructure.transifex_client import TransifexClient
from txgh_sync.models.schemas import TranslationReadyEvent, WebhookOutcome
from txgh_sync.services.commit_orchestrator import CommitOrchestrator
from txgh_sync.services.path_mapper import PathMapper
from txgh_sync.services.translation_fetcher import TranslationFetcher
from txgh_sync.utils.signatures import verify_transifex_signature

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-tx-signature-v2"
URL_HEADER = "x-tx-url"
DATE_HEADER = "date"


class TranslationReadyHandler:
    """Commits the single translation file named by a Transifex notification."""

    def __init__(
        self,
        transifex_client: TransifexClient,
        mapper: PathMapper,
        fetcher: TranslationFetcher,
        orchestrator: CommitOrchestrator,
        config: Config,
    ):
        self._transifex = transifex_client
        self._mapper = mapper
        self._fetcher = fetcher
        self._orchestrator = orchestrator
        self._config = config

    def handle(self, body: bytes, headers: Mapping[str, str], request_url: str) -> WebhookOutcome:
        headers = {key.lower(): value for key, value in headers.items()}

        try:
            self._verify(body, headers, request_url)
            event = self._parse(body, headers.get("content-type", ""))
        except SignatureError as e:
            logger.warning("Rejected Transifex webhook: %s", e)
            return WebhookOutcome(status_code=400, status="rejected", detail=str(e))
        except (ValueError, ValidationError) as e:
            logger.warning("Malformed Transifex webhook: %s", e)
            return WebhookOutcome(status_code=400, status="rejected", detail="malformed payload")

        if event.project != self._config.tx_project_slug:
            logger.warning("Webhook for unknown project %s", event.project)
            return WebhookOutcome(status_code=400, status="rejected", detail="unknown project")

        if event.language == self._config.tx_resource_lang:
            return WebhookOutcome(status_code=400, status="rejected", detail="source language")

        try:
            return self._sync(event)
        except RemoteCallError as e:
            logger.error(
                "Failed to sync %s/%s: %s", event.resource, event.language, e, exc_info=True
            )
            return WebhookOutcome(status_code=500, status="error", detail=str(e))

    def _verify(self, body: bytes, headers: dict[str, str], request_url: str) -> None:
        url = headers.get(URL_HEADER) or self._config.tx_webhook_url or request_url
        date = headers.get(DATE_HEADER, "")
        if not verify_transifex_signature(
            self._config.tx_webhook_secret, url, date, body, headers.get(SIGNATURE_HEADER)
        ):
            raise SignatureError("signature mismatch")

    @staticmethod
    def _parse(body: bytes, content_type: str) -> TranslationReadyEvent:
        text = body.decode("utf-8")
        if "application/x-www-form-urlencoded" in content_type:
            data = dict(parse_qsl(text))
        else:
            data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("payload is not an object")
        return TranslationReadyEvent(**data)

    def _sync(self, event: TranslationReadyEvent) -> WebhookOutcome:
        owner, repo = self._config.github_owner, self._config.github_repo

        lookup = self._transifex.get_resource(event.resource)
        if not lookup.is_found:
            raise RemoteCallError(f"resource {event.resource} not found", status_code=404)

        source_path = lookup.resource.name
        if not self._mapper.matches(source_path):
            logger.info("Resource %s (%s) is not managed, ignoring", event.resource, source_path)
            return WebhookOutcome(status_code=200, status="ignored", detail=source_path)

        artifact = self._fetcher.fetch(source_path, event.resource, event.language)

        if self._fetcher.is_unchanged(
            owner, repo, self._orchestrator.branch, artifact.path, artifact.content
        ):
            logger.info("%s is already up to date", artifact.path)
            return WebhookOutcome(status_code=200, status="skipped", detail=artifact.path)

        self._orchestrator.commit_file(
            owner, repo, artifact.path, artifact.content, event.language
        )
        return WebhookOutcome(status_code=200, status="committed", detail=artifact.path)
