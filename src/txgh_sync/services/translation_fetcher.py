"""Downloads translations and keeps only the ones that change the branch."""

import logging

from txgh_sync.config import Config
from txgh_sync.exceptions import RemoteCallError
from txgh_sync.infrastructure.github_client import GitHubClient
from txgh_sync.infrastructure.transifex_client import TransifexClient
from txgh_sync.models.schemas import TranslationArtifact
from txgh_sync.services.path_mapper import PathMapper
from txgh_sync.utils.git_hash import git_blob_sha

logger = logging.getLogger(__name__)


class TranslationFetcher:
    """Builds the pending ``output path -> content`` map for a commit."""

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
        self._languages = config.tx_languages
        self._verify_existing = config.tx_verify_existing

    def target_languages(self) -> list[str]:
        """Configured languages, or the project's team languages, minus the source language."""
        if self._languages:
            languages = list(self._languages)
        else:
            languages = self._transifex.get_project_languages()
            logger.info("Project languages from Transifex: %s", ", ".join(languages))

        source_lang = self._mapper.source_lang
        return list(dict.fromkeys(lang for lang in languages if lang != source_lang))

    def fetch(self, path: str, slug: str, lang: str) -> TranslationArtifact:
        content = self._transifex.get_translation(slug, lang)
        return TranslationArtifact(path=self._mapper.output_path_of(path, lang), content=content)

    def is_unchanged(self, owner: str, repo: str, ref: str, path: str, content: str) -> bool:
        """True when ``ref`` already stores exactly ``content`` at ``path``.

        A failed lookup counts as changed.
        """
        try:
            stored_sha = self._github.get_file_sha(owner, repo, path, ref)
        except RemoteCallError as e:
            logger.debug("Could not read %s on %s: %s", path, ref, e)
            return False
        return stored_sha is not None and stored_sha == git_blob_sha(content)

    def collect(
        self,
        owner: str,
        repo: str,
        ref: str,
        resources: dict[str, str],
        languages: list[str],
    ) -> dict[str, str]:
        """Download every (resource, language) translation that differs from ``ref``.

        Two pairs mapping to the same output path keep the later content.
        """
        pending: dict[str, str] = {}
        source_lang = self._mapper.source_lang

        for path, slug in resources.items():
            logger.info("Fetching translations of %s (%s)", path, slug)
            for lang in languages:
                if lang == source_lang:
                    continue

                artifact = self.fetch(path, slug, lang)
                if self._verify_existing and self.is_unchanged(
                    owner, repo, ref, artifact.path, artifact.content
                ):
                    logger.debug("%s is up to date, skipping", artifact.path)
                    continue

                pending[artifact.path] = artifact.content

        logger.info("%d translation file(s) to commit", len(pending))
        return pending
