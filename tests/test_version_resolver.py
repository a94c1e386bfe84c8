"""Tests for picking the version a run loads."""
import pytest

from application.services import resolve_version
from domain.errors import NoVersionAvailableError, UnknownVersionError


class TestResolveVersion:
    def test_empty_request_picks_latest(self) -> None:
        assert resolve_version("", ["14.1", "14.0"]) == "14.1"

    def test_none_request_picks_latest(self) -> None:
        assert resolve_version(None, ["14.1", "14.0"]) == "14.1"

    def test_requested_version_in_feed(self) -> None:
        assert resolve_version("14.0", ["14.1", "14.0"]) == "14.0"

    def test_unknown_requested_version(self) -> None:
        with pytest.raises(UnknownVersionError) as exc_info:
            resolve_version("13.5", ["14.1", "14.0"])
        assert exc_info.value.requested == "13.5"

    def test_empty_feed(self) -> None:
        with pytest.raises(NoVersionAvailableError):
            resolve_version("", [])

    def test_empty_feed_with_request(self) -> None:
        with pytest.raises(NoVersionAvailableError):
            resolve_version("14.1", [])
