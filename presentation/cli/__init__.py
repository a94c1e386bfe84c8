"""Presentation CLI exports."""
from .sync_command import SyncCommand
from .versions_command import VersionsCommand

__all__ = [
    "SyncCommand",
    "VersionsCommand",
]
