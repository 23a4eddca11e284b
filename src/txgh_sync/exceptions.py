"""Exception types raised across the sync pipeline."""

from enum import Enum


class SyncError(Exception):
    """Base class for sync bot errors."""


class RemoteCallError(SyncError):
    """A GitHub or Transifex API call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SignatureError(SyncError):
    """A webhook request failed signature verification."""


class Stage(str, Enum):
    """Push pipeline stages, each carrying its failure status description."""

    UPLOAD = "upload"
    UPLOAD_ALL = "upload_all"
    LIST_RESOURCES = "list_resources"
    LIST_LANGUAGES = "list_languages"
    DOWNLOAD = "download"
    COMMIT = "commit"

    @property
    def description(self) -> str:
        return _STAGE_DESCRIPTIONS[self]


_STAGE_DESCRIPTIONS = {
    Stage.UPLOAD: "Failed to upload to Transifex.",
    Stage.UPLOAD_ALL: "Failed to upload all resource files to Transifex.",
    Stage.LIST_RESOURCES: "Failed to acquire the path of the target file on GitHub.",
    Stage.LIST_LANGUAGES: "Failed to get the list of languages to be translated from Transifex.",
    Stage.DOWNLOAD: "Failed to download the translation file on Transifex.",
    Stage.COMMIT: "Failed to commit the translation file to GitHub.",
}


class StageFailure(SyncError):
    """A push pipeline stage failed; the failure status has already been posted."""

    def __init__(self, stage: Stage):
        super().__init__(stage.description)
        self.stage = stage
