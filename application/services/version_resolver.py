"""Picks the version a sync run loads."""
from typing import Optional, Sequence

from domain.errors import NoVersionAvailableError, UnknownVersionError


def resolve_version(requested_version: Optional[str], available_versions: Sequence[str]) -> str:
    """
    Resolve the target version.

    Args:
        requested_version: Version asked for by the caller; empty means latest
        available_versions: Feed versions, newest first

    Returns:
        The requested version if the feed knows it, else the newest one.

    Raises:
        NoVersionAvailableError: the feed listed no versions
        UnknownVersionError: the requested version is not in the feed
    """
    if not available_versions:
        raise NoVersionAvailableError()
    if requested_version:
        if requested_version not in available_versions:
            raise UnknownVersionError(requested_version)
        return requested_version
    return available_versions[0]
