"""Writes translation files back to the GitHub branch."""

import logging

from txgh_sync.config import Config
from txgh_sync.infrastructure.github_client import GitHubClient

logger = logging.getLogger(__name__)


class CommitOrchestrator:
    """Commits translations to the configured branch."""

    def __init__(self, github_client: GitHubClient, config: Config):
        self._github = github_client
        self._branch = config.github_branch
        self._message = config.commit_message

    @property
    def branch(self) -> str:
        return self._branch

    def commit_all(
        self,
        owner: str,
        repo: str,
        head_sha: str,
        head_tree_sha: str,
        pending: dict[str, str],
    ) -> str | None:
        """Commit all pending files as one commit on top of ``head_sha``.

        Returns the new commit sha, or None when there was nothing to commit.
        """
        if not pending:
            logger.info("No translation changes, nothing to commit")
            return None

        tree_sha = self._github.create_tree(owner, repo, base_tree=head_tree_sha, files=pending)
        commit_sha = self._github.create_commit(
            owner, repo, message=self._message, tree_sha=tree_sha, parents=[head_sha]
        )
        self._github.update_ref(owner, repo, ref=f"heads/{self._branch}", sha=commit_sha, force=True)

        logger.info("Committed %d translation file(s) as %s", len(pending), commit_sha)
        return commit_sha

    def commit_file(self, owner: str, repo: str, path: str, content: str, lang: str) -> str:
        """Write a single file to the branch through the contents API."""
        current_sha = self._github.get_file_sha(owner, repo, path, self._branch)
        return self._github.put_file(
            owner,
            repo,
            path=path,
            content=content,
            message=f"{self._message} ({lang})",
            branch=self._branch,
            sha=current_sha,
        )
