"""Push event handler: upload changed sources, then commit back translations."""

import logging
import re
from typing import Any, Callable, TypeVar

from txgh_sync.config import Config
from txgh_sync.exceptions import Stage, StageFailure
from txgh_sync.infrastructure.github_client import GitHubClient
from txgh_sync.models.schemas import CommitState, PushCommit, PushEvent, SyncResult
from txgh_sync.services.change_detector import ChangeDetector
from txgh_sync.services.commit_orchestrator import CommitOrchestrator
from txgh_sync.services.resource_uploader import ResourceUploader
from txgh_sync.services.status_reporter import StatusReporter
from txgh_sync.services.translation_fetcher import TranslationFetcher

logger = logging.getLogger(__name__)

T = TypeVar("T")

STARTED_DESCRIPTION = "The process has started."
COMPLETED_DESCRIPTION = "All processes are completed."


class PushHandler:
    """Runs the sync pipeline for one push, strictly one stage after another."""

    def __init__(
        self,
        github_client: GitHubClient,
        detector: ChangeDetector,
        uploader: ResourceUploader,
        fetcher: TranslationFetcher,
        orchestrator: CommitOrchestrator,
        status_reporter: StatusReporter,
        config: Config,
    ):
        self._github = github_client
        self._detector = detector
        self._uploader = uploader
        self._fetcher = fetcher
        self._orchestrator = orchestrator
        self._status = status_reporter
        self._all_update = config.tx_all_update
        self._branch = config.github_branch
        self._branch_filter = re.compile(config.github_branch)
        self._bot_filter = re.compile(config.bot_pusher_pattern)

    def should_handle(self, event: PushEvent) -> bool:
        """Skip pushes made by bots and pushes to other branches."""
        if self._bot_filter.search(event.pusher.name):
            logger.info("Ignoring push by bot %s", event.pusher.name)
            return False

        if not self._branch_filter.search(event.branch):
            logger.info("Ignoring push to %s (configured branch: %s)", event.branch, self._branch)
            return False

        if event.head_commit is None:
            logger.info("Ignoring push to %s without a head commit", event.branch)
            return False

        return True

    def handle(self, event: PushEvent) -> SyncResult:
        """Run the full pipeline for a push. Raises StageFailure on the first failing stage."""
        logger.info(
            "Handling push to %s/%s %s (%d commit(s))",
            event.owner,
            event.repo,
            event.branch,
            len(event.commits),
        )
        return self._sync(
            owner=event.owner,
            repo=event.repo,
            head_sha=event.head_sha,
            head_tree_sha=event.head_tree_sha,
            commits=event.commits,
            full=self._all_update,
        )

    def run_resync(self, owner: str, repo: str) -> SyncResult:
        """Re-upload every resource and re-sync translations for the branch head."""
        head_sha = self._github.get_ref_sha(owner, repo, f"heads/{self._branch}")
        head_tree_sha = self._github.get_commit_tree_sha(owner, repo, head_sha)
        logger.info("Full resync of %s/%s %s at %s", owner, repo, self._branch, head_sha)
        return self._sync(owner, repo, head_sha, head_tree_sha, commits=[], full=True)

    def _sync(
        self,
        owner: str,
        repo: str,
        head_sha: str,
        head_tree_sha: str,
        commits: list[PushCommit],
        full: bool,
    ) -> SyncResult:
        self._status.report(owner, repo, head_sha, CommitState.PENDING, STARTED_DESCRIPTION)

        def run(stage: Stage, func: Callable[..., T], *args: Any) -> T:
            return self._run_stage(owner, repo, head_sha, stage, func, *args)

        if full:
            uploaded = run(Stage.UPLOAD_ALL, self._upload_full, owner, repo, head_tree_sha)
        else:
            changed = self._detector.detect_incremental(commits)
            uploaded = run(Stage.UPLOAD, self._uploader.upload_all, owner, repo, changed)

        resources = run(Stage.LIST_RESOURCES, self._list_resources, owner, repo, head_tree_sha)
        languages = run(Stage.LIST_LANGUAGES, self._fetcher.target_languages)
        pending = run(Stage.DOWNLOAD, self._fetcher.collect, owner, repo, head_sha, resources, languages)
        commit_sha = run(
            Stage.COMMIT, self._orchestrator.commit_all, owner, repo, head_sha, head_tree_sha, pending
        )

        self._status.report(owner, repo, head_sha, CommitState.SUCCESS, COMPLETED_DESCRIPTION)

        result = SyncResult(
            head_sha=head_sha,
            uploaded=uploaded,
            resources=len(resources),
            languages=languages,
            committed_paths=list(pending),
            commit_sha=commit_sha,
        )
        logger.info(
            "Sync of %s complete: %d uploaded, %d resource(s), %d language(s), %d file(s) committed",
            head_sha,
            len(result.uploaded),
            result.resources,
            len(result.languages),
            len(result.committed_paths),
        )
        return result

    def _run_stage(
        self,
        owner: str,
        repo: str,
        head_sha: str,
        stage: Stage,
        func: Callable[..., T],
        *args: Any,
    ) -> T:
        try:
            return func(*args)
        except Exception as e:
            logger.error("Stage %s failed for %s: %s", stage.value, head_sha, e, exc_info=True)
            self._status.report(owner, repo, head_sha, CommitState.FAILURE, stage.description)
            raise StageFailure(stage) from e

    def _upload_full(self, owner: str, repo: str, head_tree_sha: str) -> list[str]:
        entries = self._github.get_tree(owner, repo, head_tree_sha, recursive=True)
        resources = self._detector.detect_full(entries, head_tree_sha)
        return self._uploader.upload_all(owner, repo, resources)

    def _list_resources(self, owner: str, repo: str, head_tree_sha: str) -> dict[str, str]:
        entries = self._github.get_tree(owner, repo, head_tree_sha, recursive=True)
        return self._detector.scan_resources(entries)
