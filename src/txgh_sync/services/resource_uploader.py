"""Uploads source files from GitHub to Transifex resources."""

import logging

from txgh_sync.config import Config
from txgh_sync.exceptions import RemoteCallError
from txgh_sync.infrastructure.github_client import GitHubClient
from txgh_sync.infrastructure.transifex_client import TransifexClient
from txgh_sync.models.schemas import TreeEntry
from txgh_sync.services.path_mapper import PathMapper

logger = logging.getLogger(__name__)


class ResourceUploader:
    """Creates or updates one Transifex resource per source file."""

    def __init__(
        self,
        github_client: GitHubClient,
        transifex_client: TransifexClient,
        mapper: PathMapper,
        config: Config,
    ):
        self._github = github_client
        self._transifex = transifex_client
        self._mapper = mapper
        self._resource_type = config.tx_resource_type

    def upload_all(self, owner: str, repo: str, resources: dict[str, str]) -> list[str]:
        """Upload every ``path -> tree sha`` pair. Returns the uploaded paths.

        Each tree is listed once; entries are matched by exact path.
        """
        trees: dict[str, dict[str, TreeEntry]] = {}
        uploaded = []

        for path, tree_sha in resources.items():
            if tree_sha not in trees:
                entries = self._github.get_tree(owner, repo, tree_sha, recursive=True)
                trees[tree_sha] = {entry.path: entry for entry in entries}

            entry = trees[tree_sha].get(path)
            if entry is None:
                logger.warning("%s not found in tree %s, skipping", path, tree_sha)
                continue

            content = self._github.get_blob(owner, repo, entry.sha)
            self.upload_resource(path, content)
            uploaded.append(path)

        logger.info("Uploaded %d/%d resource file(s)", len(uploaded), len(resources))
        return uploaded

    def upload_resource(self, path: str, content: str) -> str:
        """Ensure the resource exists, then push its source content. Returns the slug.

        Only the final content update is allowed to fail the upload; the
        content is pushed even right after a create.
        """
        slug = self._mapper.slug_of(path)

        try:
            lookup = self._transifex.get_resource(slug)
            if not lookup.is_found:
                logger.info("Resource %s not found, creating it for %s", slug, path)
                self._transifex.create_resource(
                    slug=slug,
                    name=path,
                    i18n_type=self._resource_type,
                    content=content,
                )
        except RemoteCallError as e:
            logger.warning("Could not look up or create resource %s: %s", slug, e)

        self._transifex.update_source_content(slug, content)
        logger.info("Updated resource %s from %s", slug, path)
        return slug
