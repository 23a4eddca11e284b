"""Transifex API (v2) client built on httpx."""

import logging
from typing import Any

import httpx

from txgh_sync.exceptions import RemoteCallError
from txgh_sync.models.schemas import ResourceLookup, TxResource

logger = logging.getLogger(__name__)


class TransifexClient:
    """Handles Transifex project, resource and translation operations."""

    def __init__(self, client: httpx.Client, project_slug: str):
        self._client = client
        self._project_slug = project_slug

    @property
    def project_slug(self) -> str:
        return self._project_slug

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise RemoteCallError(f"Transifex {method} {url} failed: {e}") from e

        if response.is_error:
            raise RemoteCallError(
                f"Transifex {method} {url} returned {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def _project_url(self, suffix: str = "") -> str:
        return f"/api/2/project/{self._project_slug}/{suffix}"

    def get_resource(self, slug: str) -> ResourceLookup:
        """Look up a resource; a 404 is reported as not found rather than raised."""
        try:
            response = self._request("GET", self._project_url(f"resource/{slug}/"))
        except RemoteCallError as e:
            if e.status_code == 404:
                return ResourceLookup.not_found()
            raise

        data = response.json()
        return ResourceLookup.found(
            TxResource(
                slug=data.get("slug", slug),
                name=data.get("name", ""),
                i18n_type=data.get("i18n_type"),
            )
        )

    def create_resource(self, slug: str, name: str, i18n_type: str, content: str) -> None:
        self._request(
            "POST",
            self._project_url("resources/"),
            json={"slug": slug, "name": name, "i18n_type": i18n_type, "content": content},
        )
        logger.info("Created resource %s (%s)", slug, name)

    def update_source_content(self, slug: str, content: str) -> dict[str, Any]:
        """Replace the source strings of a resource. Returns Transifex's change summary."""
        response = self._request(
            "PUT",
            self._project_url(f"resource/{slug}/content/"),
            json={"content": content},
        )
        return response.json() if response.content else {}

    def get_project_languages(self) -> list[str]:
        """Language codes of the project's translation teams."""
        response = self._request("GET", self._project_url(), params={"details": ""})
        return list(response.json().get("teams", []))

    def get_translation(self, slug: str, language: str) -> str:
        response = self._request("GET", self._project_url(f"resource/{slug}/translation/{language}/"))
        return response.json()["content"]
