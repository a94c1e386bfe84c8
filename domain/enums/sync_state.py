"""States of a single sync run."""
from enum import Enum


class SyncState(Enum):
    RESOLVING_VERSION = "resolving-version"
    CHECKING_LOADED = "checking-loaded"
    ALREADY_LOADED = "already-loaded"
    LOADING = "loading"
    DONE = "done"
