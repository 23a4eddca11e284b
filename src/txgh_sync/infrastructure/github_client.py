"""GitHub REST API client built on httpx."""

import base64
import logging
from typing import Any
from urllib.parse import quote

import httpx

from txgh_sync.exceptions import RemoteCallError
from txgh_sync.models.schemas import TreeEntry

logger = logging.getLogger(__name__)


class GitHubClient:
    """Handles the GitHub git-data, status and contents API operations."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise RemoteCallError(f"GitHub {method} {url} failed: {e}") from e

        if response.is_error:
            raise RemoteCallError(
                f"GitHub {method} {url} returned {response.status_code}",
                status_code=response.status_code,
            )
        return response

    # Git data

    def get_tree(self, owner: str, repo: str, tree_sha: str, recursive: bool = True) -> list[TreeEntry]:
        """List a tree; with ``recursive`` every nested entry is returned by full path."""
        params = {"recursive": "1"} if recursive else None
        response = self._request("GET", f"/repos/{owner}/{repo}/git/trees/{tree_sha}", params=params)
        data = response.json()
        if data.get("truncated"):
            raise RemoteCallError(f"GitHub tree {tree_sha} listing was truncated")
        return [TreeEntry(**entry) for entry in data.get("tree", [])]

    def get_blob(self, owner: str, repo: str, blob_sha: str) -> str:
        """Fetch a blob and decode it to text."""
        response = self._request("GET", f"/repos/{owner}/{repo}/git/blobs/{blob_sha}")
        data = response.json()
        encoding = data.get("encoding", "base64")
        if encoding == "base64":
            return base64.b64decode(data["content"]).decode("utf-8")
        return data["content"]

    def create_tree(
        self, owner: str, repo: str, base_tree: str, files: dict[str, str]
    ) -> str:
        """Create a tree layered on ``base_tree`` with one inline blob per path."""
        tree = [
            {"path": path, "mode": "100644", "type": "blob", "content": content}
            for path, content in files.items()
        ]
        response = self._request(
            "POST",
            f"/repos/{owner}/{repo}/git/trees",
            json={"base_tree": base_tree, "tree": tree},
        )
        return response.json()["sha"]

    def create_commit(
        self, owner: str, repo: str, message: str, tree_sha: str, parents: list[str]
    ) -> str:
        response = self._request(
            "POST",
            f"/repos/{owner}/{repo}/git/commits",
            json={"message": message, "tree": tree_sha, "parents": parents},
        )
        return response.json()["sha"]

    def update_ref(self, owner: str, repo: str, ref: str, sha: str, force: bool = True) -> None:
        """Point ``ref`` (e.g. "heads/main") at ``sha``."""
        self._request(
            "PATCH",
            f"/repos/{owner}/{repo}/git/refs/{ref}",
            json={"sha": sha, "force": force},
        )
        logger.info("Updated ref %s -> %s", ref, sha)

    def get_ref_sha(self, owner: str, repo: str, ref: str) -> str:
        response = self._request("GET", f"/repos/{owner}/{repo}/git/ref/{ref}")
        return response.json()["object"]["sha"]

    def get_commit_tree_sha(self, owner: str, repo: str, commit_sha: str) -> str:
        response = self._request("GET", f"/repos/{owner}/{repo}/git/commits/{commit_sha}")
        return response.json()["tree"]["sha"]

    # Statuses

    def create_status(
        self,
        owner: str,
        repo: str,
        sha: str,
        state: str,
        description: str,
        context: str,
    ) -> None:
        self._request(
            "POST",
            f"/repos/{owner}/{repo}/statuses/{sha}",
            json={"state": state, "description": description, "context": context},
        )

    # Contents

    def get_file_sha(self, owner: str, repo: str, path: str, ref: str) -> str | None:
        """Return the blob sha stored at ``path`` on ``ref``, or None if there is no file."""
        try:
            response = self._request(
                "GET",
                f"/repos/{owner}/{repo}/contents/{quote(path)}",
                params={"ref": ref},
            )
        except RemoteCallError as e:
            if e.status_code == 404:
                return None
            raise

        data = response.json()
        if isinstance(data, list):
            # A directory lives at this path
            return None
        return data.get("sha")

    def put_file(
        self,
        owner: str,
        repo: str,
        path: str,
        content: str,
        message: str,
        branch: str,
        sha: str | None = None,
    ) -> str:
        """Create or update a file; ``sha`` must be the current blob sha when updating."""
        payload = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "branch": branch,
        }
        if sha:
            payload["sha"] = sha

        response = self._request("PUT", f"/repos/{owner}/{repo}/contents/{quote(path)}", json=payload)
        commit_sha = response.json()["commit"]["sha"]
        logger.info("%s %s on %s (%s)", "Updated" if sha else "Created", path, branch, commit_sha)
        return commit_sha
