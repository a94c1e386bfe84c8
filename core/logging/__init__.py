"""Structured logging for sync runs."""
from .config import bootstrap_logging, shutdown_logging
from .context import context
from .logger import get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "context",
    "get_logger",
]
