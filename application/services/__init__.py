"""Application services root exports."""
from .version_resolver import resolve_version

__all__ = [
    "resolve_version",
]
