"""Filesystem blob store for local runs and tests."""
import asyncio
import hashlib
import json
from pathlib import Path
from typing import Any, Dict, Optional

from domain.errors import StoreWriteError
from domain.interfaces import IBlobStore

_META_SUFFIX = ".meta.json"


class LocalBlobStore(IBlobStore):
    """
    Stores each blob as a file under `root`.

    Object metadata (content type, cache control, md5) is written next to the
    file as `<name>.meta.json`. Files are written to a temp name and renamed
    so a reader never sees a partial image.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, path: str) -> Path:
        target = (self.root / path.lstrip("/")).resolve()
        if self.root not in target.parents:
            raise StoreWriteError(f"Blob path escapes the store root: {path}")
        return target

    def _write(self, target: Path, data: bytes, metadata: Dict[str, Any]) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp = target.with_name(target.name + ".tmp")
            tmp.write_bytes(data)
            tmp.replace(target)
            target.with_name(target.name + _META_SUFFIX).write_text(json.dumps(metadata), encoding="utf-8")
        except OSError as exc:
            raise StoreWriteError(f"Failed to write blob {target}: {exc}") from exc

    async def upload(
        self, path: str, data: bytes, content_type: str = "", cache_control: str = ""
    ) -> None:
        target = self._resolve(path)
        metadata = {
            "contentType": content_type,
            "cacheControl": cache_control,
            "size": len(data),
            "md5": hashlib.md5(data).hexdigest(),
        }
        await asyncio.to_thread(self._write, target, data, metadata)

    async def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def read(self, path: str) -> bytes:
        return self._resolve(path).read_bytes()

    def metadata(self, path: str) -> Optional[Dict[str, Any]]:
        meta = self._resolve(path)
        meta = meta.with_name(meta.name + _META_SUFFIX)
        if not meta.is_file():
            return None
        return json.loads(meta.read_text(encoding="utf-8"))
