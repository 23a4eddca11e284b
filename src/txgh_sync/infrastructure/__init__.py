"""Infrastructure package."""

from txgh_sync.infrastructure.dependency_injection import DependenciesContainer
from txgh_sync.infrastructure.github_client import GitHubClient
from txgh_sync.infrastructure.transifex_client import TransifexClient

__all__ = [
    "DependenciesContainer",
    "GitHubClient",
    "TransifexClient",
]
