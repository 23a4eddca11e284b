"""Detection of source files that need to be synchronized."""

import logging

from txgh_sync.models.schemas import PushCommit, TreeEntry
from txgh_sync.services.path_mapper import PathMapper

logger = logging.getLogger(__name__)


class ChangeDetector:
    """Selects managed source files from push commits or full tree listings."""

    def __init__(self, mapper: PathMapper):
        self._mapper = mapper

    def detect_incremental(self, commits: list[PushCommit]) -> dict[str, str]:
        """Map each added or modified source file to the tree id of its commit.

        Commits are processed in order, so a path touched by several commits
        keeps the tree id of the last one.
        """
        resources: dict[str, str] = {}
        for commit in commits:
            logger.debug("Processing commit %s", commit.id)
            for path in [*commit.added, *commit.modified]:
                if self._mapper.matches(path):
                    resources[path] = commit.tree_id

        logger.info("Detected %d changed resource file(s) in %d commit(s)", len(resources), len(commits))
        return resources

    def detect_full(self, entries: list[TreeEntry], tree_id: str) -> dict[str, str]:
        """Map every source file in a tree listing to that tree's id."""
        resources = {
            entry.path: tree_id
            for entry in entries
            if entry.type == "blob" and self._mapper.matches(entry.path)
        }
        logger.info("Found %d resource file(s) in tree %s", len(resources), tree_id)
        return resources

    def scan_resources(self, entries: list[TreeEntry]) -> dict[str, str]:
        """Map every source file in a tree listing to its resource slug."""
        return {
            entry.path: self._mapper.slug_of(entry.path)
            for entry in entries
            if entry.type == "blob" and self._mapper.matches(entry.path)
        }
