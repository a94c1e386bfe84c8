"""Tests for the filesystem blob store."""
import pytest

from domain.errors import StoreWriteError


class TestLocalBlobStore:
    async def test_upload_writes_file_and_metadata(self, blobs) -> None:
        await blobs.upload("items/1001.png", b"png-bytes", content_type="image/png", cache_control="public, max-age=86400")
        assert await blobs.exists("items/1001.png")
        assert blobs.read("items/1001.png") == b"png-bytes"
        meta = blobs.metadata("items/1001.png")
        assert meta["contentType"] == "image/png"
        assert meta["cacheControl"] == "public, max-age=86400"
        assert meta["size"] == 9

    async def test_upload_overwrites(self, blobs) -> None:
        await blobs.upload("champions/Aatrox.png", b"old")
        await blobs.upload("champions/Aatrox.png", b"new")
        assert blobs.read("champions/Aatrox.png") == b"new"

    async def test_missing_blob(self, blobs) -> None:
        assert not await blobs.exists("passives/none.png")
        assert blobs.metadata("passives/none.png") is None

    async def test_path_cannot_escape_root(self, blobs) -> None:
        with pytest.raises(StoreWriteError):
            await blobs.upload("../outside.png", b"x")
