"""Commit status reporting on the pushed head commit."""

import logging

from txgh_sync.config import Config
from txgh_sync.exceptions import RemoteCallError
from txgh_sync.infrastructure.github_client import GitHubClient
from txgh_sync.models.schemas import CommitState

logger = logging.getLogger(__name__)


class StatusReporter:
    """Posts pipeline progress as commit statuses.

    Statuses only mirror the pipeline; failing to post one never changes its outcome.
    """

    def __init__(self, github_client: GitHubClient, config: Config):
        self._github = github_client
        self._context = config.status_context

    def report(self, owner: str, repo: str, sha: str, state: CommitState, description: str) -> bool:
        try:
            self._github.create_status(
                owner,
                repo,
                sha,
                state=state.value,
                description=description,
                context=self._context,
            )
        except RemoteCallError as e:
            logger.error("Failed to set %s status on %s: %s", state.value, sha, e)
            return False

        logger.info("Status %s on %s: %s", state.value, sha, description)
        return True
