"""Dependency injection container for the application."""

import httpx
from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from txgh_sync.config import Config, load_config
from txgh_sync.infrastructure.github_client import GitHubClient
from txgh_sync.infrastructure.transifex_client import TransifexClient


def _create_github_http(config: Config) -> httpx.Client:
    """httpx client preconfigured for the GitHub REST API."""
    return httpx.Client(
        base_url=config.github_api_url,
        timeout=config.http_timeout,
        headers={
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {config.github_token}",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "txgh-sync",
        },
    )


def _create_transifex_http(config: Config) -> httpx.Client:
    """httpx client preconfigured for the Transifex API."""
    return httpx.Client(
        base_url=config.tx_base_url,
        timeout=config.http_timeout,
        auth=(config.tx_username, config.tx_password),
        headers={"User-Agent": "txgh-sync"},
    )


def _create_path_mapper(config: Config):
    """Factory for PathMapper to avoid circular import."""
    from txgh_sync.services.path_mapper import PathMapper

    return PathMapper(config)


def _create_change_detector(mapper):
    from txgh_sync.services.change_detector import ChangeDetector

    return ChangeDetector(mapper)


def _create_resource_uploader(github_client, transifex_client, mapper, config):
    from txgh_sync.services.resource_uploader import ResourceUploader

    return ResourceUploader(github_client, transifex_client, mapper, config)


def _create_translation_fetcher(github_client, transifex_client, mapper, config):
    from txgh_sync.services.translation_fetcher import TranslationFetcher

    return TranslationFetcher(github_client, transifex_client, mapper, config)


def _create_commit_orchestrator(github_client, config):
    from txgh_sync.services.commit_orchestrator import CommitOrchestrator

    return CommitOrchestrator(github_client, config)


def _create_status_reporter(github_client, config):
    from txgh_sync.services.status_reporter import StatusReporter

    return StatusReporter(github_client, config)


def _create_push_handler(github_client, detector, uploader, fetcher, orchestrator, status_reporter, config):
    """Factory for PushHandler to avoid circular import."""
    from txgh_sync.handlers.push import PushHandler

    return PushHandler(github_client, detector, uploader, fetcher, orchestrator, status_reporter, config)


def _create_translation_ready_handler(transifex_client, mapper, fetcher, orchestrator, config):
    """Factory for TranslationReadyHandler to avoid circular import."""
    from txgh_sync.handlers.translation_ready import TranslationReadyHandler

    return TranslationReadyHandler(transifex_client, mapper, fetcher, orchestrator, config)


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    config = providers.Singleton(load_config)

    # GitHub
    github_http = providers.Singleton(_create_github_http, config=config)

    github_client = providers.Singleton(
        GitHubClient,
        client=github_http,
    )

    # Transifex
    transifex_http = providers.Singleton(_create_transifex_http, config=config)

    transifex_client = providers.Singleton(
        TransifexClient,
        client=transifex_http,
        project_slug=config.provided.tx_project_slug,
    )

    # Services
    path_mapper = providers.Singleton(_create_path_mapper, config=config)

    change_detector = providers.Singleton(_create_change_detector, mapper=path_mapper)

    resource_uploader = providers.Singleton(
        _create_resource_uploader,
        github_client=github_client,
        transifex_client=transifex_client,
        mapper=path_mapper,
        config=config,
    )

    translation_fetcher = providers.Singleton(
        _create_translation_fetcher,
        github_client=github_client,
        transifex_client=transifex_client,
        mapper=path_mapper,
        config=config,
    )

    commit_orchestrator = providers.Singleton(
        _create_commit_orchestrator,
        github_client=github_client,
        config=config,
    )

    status_reporter = providers.Singleton(
        _create_status_reporter,
        github_client=github_client,
        config=config,
    )

    # Handlers
    push_handler = providers.Singleton(
        _create_push_handler,
        github_client=github_client,
        detector=change_detector,
        uploader=resource_uploader,
        fetcher=translation_fetcher,
        orchestrator=commit_orchestrator,
        status_reporter=status_reporter,
        config=config,
    )

    translation_ready_handler = providers.Singleton(
        _create_translation_ready_handler,
        transifex_client=transifex_client,
        mapper=path_mapper,
        fetcher=translation_fetcher,
        orchestrator=commit_orchestrator,
        config=config,
    )
