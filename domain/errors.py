"""Errors raised while syncing Data Dragon data."""
from typing import Optional


class DataDragonSyncError(Exception):
    """Base class for every error a sync run can record."""


class FeedError(DataDragonSyncError):
    """The feed answered with a non-success status or could not be reached."""

    def __init__(self, status_text: str, url: str = "", status_code: Optional[int] = None):
        super().__init__(status_text)
        self.status_text = status_text
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        if self.url:
            return f"{self.status_text} ({self.url})"
        return self.status_text


class VersionResolutionError(DataDragonSyncError):
    pass


class UnknownVersionError(VersionResolutionError):
    def __init__(self, requested: str):
        super().__init__(f"Requested version not found: {requested}")
        self.requested = requested


class NoVersionAvailableError(VersionResolutionError):
    def __init__(self):
        super().__init__("No version being loaded: the feed returned no versions")


class StoreWriteError(DataDragonSyncError):
    """A document, batch or blob write failed."""


class UnconfirmedUpdateError(DataDragonSyncError):
    """A conditional update could not be confirmed against the stored revision."""

    def __init__(self, path: str, expected_revision: Optional[int] = None):
        super().__init__(f"Update of {path} not confirmed (expected revision {expected_revision})")
        self.path = path
        self.expected_revision = expected_revision


class SyncInProgressError(DataDragonSyncError):
    """Another run holds the load lease for this version."""

    def __init__(self, version: str, owner: str = ""):
        super().__init__(f"Version {version} is already being loaded by {owner or 'another run'}")
        self.version = version
        self.owner = owner
