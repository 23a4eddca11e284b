"""Pydantic models for webhook payloads and sync results."""

from enum import Enum

from pydantic import BaseModel, Field


class PushCommit(BaseModel):
    """A single commit carried by a GitHub push event."""

    id: str
    tree_id: str
    added: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)


class Pusher(BaseModel):
    name: str = ""


class RepositoryOwner(BaseModel):
    name: str | None = None
    login: str | None = None


class Repository(BaseModel):
    name: str
    owner: RepositoryOwner


class HeadCommit(BaseModel):
    id: str
    tree_id: str


class PushEvent(BaseModel):
    """GitHub push event, reduced to the fields the bot reads."""

    ref: str
    pusher: Pusher
    repository: Repository
    commits: list[PushCommit] = Field(default_factory=list)
    head_commit: HeadCommit | None = None

    @property
    def branch(self) -> str:
        """Ref name without the leading "refs/" (e.g. "heads/main")."""
        return self.ref.removeprefix("refs/")

    @property
    def owner(self) -> str:
        return self.repository.owner.name or self.repository.owner.login or ""

    @property
    def repo(self) -> str:
        return self.repository.name

    @property
    def head_sha(self) -> str:
        return self.head_commit.id if self.head_commit else ""

    @property
    def head_tree_sha(self) -> str:
        return self.head_commit.tree_id if self.head_commit else ""


class TreeEntry(BaseModel):
    """One entry of a recursive git tree listing."""

    path: str
    sha: str
    type: str = "blob"
    mode: str = "100644"


class TxResource(BaseModel):
    """Transifex resource details."""

    slug: str
    name: str
    i18n_type: str | None = None


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


class ResourceLookup(BaseModel):
    """Result of looking up a resource by slug: found with details, or not found."""

    status: LookupStatus
    resource: TxResource | None = None

    @classmethod
    def found(cls, resource: TxResource) -> "ResourceLookup":
        return cls(status=LookupStatus.FOUND, resource=resource)

    @classmethod
    def not_found(cls) -> "ResourceLookup":
        return cls(status=LookupStatus.NOT_FOUND)

    @property
    def is_found(self) -> bool:
        return self.status == LookupStatus.FOUND


class TranslationArtifact(BaseModel):
    """A translated file ready to be written to the branch."""

    path: str
    content: str


class CommitState(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class TranslationReadyEvent(BaseModel):
    """Transifex notification that a resource translation is ready."""

    project: str
    resource: str
    language: str
    event: str | None = None


class SyncResult(BaseModel):
    """Summary of one push pipeline run."""

    head_sha: str
    uploaded: list[str] = Field(default_factory=list)
    resources: int = 0
    languages: list[str] = Field(default_factory=list)
    committed_paths: list[str] = Field(default_factory=list)
    commit_sha: str | None = None


class WebhookOutcome(BaseModel):
    """Result of handling a translation-ready notification."""

    status_code: int
    status: str
    detail: str = ""
