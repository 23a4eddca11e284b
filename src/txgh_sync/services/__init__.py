"""Services package."""

from txgh_sync.services.change_detector import ChangeDetector
from txgh_sync.services.commit_orchestrator import CommitOrchestrator
from txgh_sync.services.path_mapper import PathMapper
from txgh_sync.services.resource_uploader import ResourceUploader
from txgh_sync.services.status_reporter import StatusReporter
from txgh_sync.services.translation_fetcher import TranslationFetcher

__all__ = [
    "ChangeDetector",
    "CommitOrchestrator",
    "PathMapper",
    "ResourceUploader",
    "StatusReporter",
    "TranslationFetcher",
]
