"""Models package."""

from txgh_sync.models.schemas import (
    CommitState,
    LookupStatus,
    PushCommit,
    PushEvent,
    ResourceLookup,
    SyncResult,
    TranslationArtifact,
    TranslationReadyEvent,
    TreeEntry,
    TxResource,
    WebhookOutcome,
)

__all__ = [
    "CommitState",
    "LookupStatus",
    "PushCommit",
    "PushEvent",
    "ResourceLookup",
    "SyncResult",
    "TranslationArtifact",
    "TranslationReadyEvent",
    "TreeEntry",
    "TxResource",
    "WebhookOutcome",
]
