"""Presentation layer - HTTP endpoint, scheduled hook and CLI."""
from .api import create_app
from .scheduler import daily_sync_hook
from .cli import SyncCommand, VersionsCommand

__all__ = [
    "create_app",
    "daily_sync_hook",
    "SyncCommand",
    "VersionsCommand",
]
