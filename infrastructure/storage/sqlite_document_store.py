"""Document store on SQLite.

Documents live in one table keyed by their full path
(`versions/14.1/champions/266`) with the parent collection indexed for
listing. Bodies are JSON text. Each write stamps a strictly increasing
`update_time` (ns) and bumps the document's `revision`; conditional writes
compare revisions inside the UPDATE so they cannot interleave.
"""
import asyncio
import json
import sqlite3
import threading
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from domain.errors import StoreWriteError, UnconfirmedUpdateError
from domain.interfaces import DocumentSnapshot, IDocumentStore, IWriteBatch, WriteResult

T = TypeVar("T")


def _split_document_path(path: str) -> Tuple[str, str]:
    parts = path.strip("/").split("/")
    if len(parts) < 2 or len(parts) % 2 or not all(parts):
        raise ValueError(f"Not a document path: {path!r}")
    return "/".join(parts[:-1]), "/".join(parts)


def _normalize_collection(collection: str) -> str:
    parts = collection.strip("/").split("/")
    if len(parts) % 2 == 0 or not all(parts):
        raise ValueError(f"Not a collection path: {collection!r}")
    return "/".join(parts)


def _encode(path: str, data: Dict[str, Any]) -> str:
    try:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise StoreWriteError(f"Document {path} is not JSON serialisable: {exc}") from exc


class SQLiteWriteBatch(IWriteBatch):
    """Queued full-replace writes, committed in one SQLite transaction."""

    def __init__(self, store: "SQLiteDocumentStore"):
        self._store = store
        self._writes: List[Tuple[str, Dict[str, Any]]] = []
        self._committed = False

    def set(self, path: str, data: Dict[str, Any]) -> "SQLiteWriteBatch":
        _split_document_path(path)
        self._writes.append((path, dict(data)))
        return self

    async def commit(self) -> List[WriteResult]:
        if self._committed:
            raise StoreWriteError("Batch has already been committed")
        self._committed = True
        return await self._store._run(self._store._commit_batch, list(self._writes))

    def __len__(self) -> int:
        return len(self._writes)


class SQLiteDocumentStore(IDocumentStore):
    """Lightweight document store on a single SQLite file."""

    def __init__(self, db_path: Path | str):
        self.db_path = db_path
        if str(db_path) != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(db_path), check_same_thread=False)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.execute("PRAGMA synchronous=NORMAL")
        self._lock = threading.Lock()
        self._last_time = 0
        self.write_count = 0
        self._create_tables()

    def _create_tables(self) -> None:
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS documents (path TEXT PRIMARY KEY, collection TEXT NOT NULL, data TEXT NOT NULL, update_time INTEGER NOT NULL, revision INTEGER NOT NULL)"
            )
            self._conn.execute("CREATE INDEX IF NOT EXISTS idx_documents_collection ON documents(collection)")

    async def _run(self, fn: Callable[..., T], *args: Any) -> T:
        def _locked() -> T:
            with self._lock:
                return fn(*args)
        return await asyncio.to_thread(_locked)

    def _tick(self) -> int:
        self._last_time = max(time.time_ns(), self._last_time + 1)
        return self._last_time

    # ── sync internals (called with the lock held) ─────────────────────

    def _get(self, path: str) -> Optional[DocumentSnapshot]:
        _, key = _split_document_path(path)
        row = self._conn.execute(
            "SELECT path, data, update_time, revision FROM documents WHERE path = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        return DocumentSnapshot(path=row[0], data=json.loads(row[1]), update_time=row[2], revision=row[3])

    def _list(self, collection: str) -> List[DocumentSnapshot]:
        rows = self._conn.execute(
            "SELECT path, data, update_time, revision FROM documents WHERE collection = ? ORDER BY path",
            (_normalize_collection(collection),),
        ).fetchall()
        return [DocumentSnapshot(path=r[0], data=json.loads(r[1]), update_time=r[2], revision=r[3]) for r in rows]

    def _write(self, path: str, data: Dict[str, Any], expected_revision: Optional[int]) -> WriteResult:
        collection, key = _split_document_path(path)
        body = _encode(key, data)
        row = self._conn.execute("SELECT revision FROM documents WHERE path = ?", (key,)).fetchone()
        ts = self._tick()
        if row is None:
            if expected_revision is not None:
                raise UnconfirmedUpdateError(key, expected_revision)
            self._conn.execute(
                "INSERT INTO documents(path, collection, data, update_time, revision) VALUES(?, ?, ?, ?, 1)",
                (key, collection, body, ts),
            )
            return WriteResult(path=key, update_time=ts, revision=1)

        current = row[0] if expected_revision is None else expected_revision
        cur = self._conn.execute(
            "UPDATE documents SET data = ?, update_time = ?, revision = revision + 1 WHERE path = ? AND revision = ?",
            (body, ts, key, current),
        )
        if cur.rowcount != 1:
            raise UnconfirmedUpdateError(key, expected_revision)
        return WriteResult(path=key, update_time=ts, revision=current + 1)

    def _set(self, path: str, data: Dict[str, Any], expected_revision: Optional[int]) -> WriteResult:
        try:
            with self._conn:
                result = self._write(path, data, expected_revision)
        except sqlite3.Error as exc:
            raise StoreWriteError(f"Failed to write {path}: {exc}") from exc
        self.write_count += 1
        return result

    def _create(self, path: str, data: Dict[str, Any]) -> Optional[WriteResult]:
        collection, key = _split_document_path(path)
        body = _encode(key, data)
        ts = self._tick()
        try:
            with self._conn:
                cur = self._conn.execute(
                    "INSERT OR IGNORE INTO documents(path, collection, data, update_time, revision) VALUES(?, ?, ?, ?, 1)",
                    (key, collection, body, ts),
                )
        except sqlite3.Error as exc:
            raise StoreWriteError(f"Failed to create {path}: {exc}") from exc
        if cur.rowcount != 1:
            return None
        self.write_count += 1
        return WriteResult(path=key, update_time=ts, revision=1)

    def _update(self, path: str, fields: Dict[str, Any], expected_revision: Optional[int]) -> WriteResult:
        existing = self._get(path)
        if existing is None:
            raise StoreWriteError(f"No document to update at {path}")
        if expected_revision is not None and existing.revision != expected_revision:
            raise UnconfirmedUpdateError(existing.path, expected_revision)
        merged = {**existing.data, **fields}
        return self._set(path, merged, existing.revision)

    def _delete(self, path: str) -> bool:
        _, key = _split_document_path(path)
        try:
            with self._conn:
                cur = self._conn.execute("DELETE FROM documents WHERE path = ?", (key,))
        except sqlite3.Error as exc:
            raise StoreWriteError(f"Failed to delete {path}: {exc}") from exc
        if cur.rowcount:
            self.write_count += 1
        return cur.rowcount > 0

    def _commit_batch(self, writes: List[Tuple[str, Dict[str, Any]]]) -> List[WriteResult]:
        if not writes:
            return []
        try:
            with self._conn:
                results = [self._write(path, data, None) for path, data in writes]
        except sqlite3.Error as exc:
            raise StoreWriteError(f"Batch of {len(writes)} writes failed: {exc}") from exc
        self.write_count += len(results)
        return results

    # ── IDocumentStore ─────────────────────────────────────────────────

    async def get(self, path: str) -> Optional[DocumentSnapshot]:
        return await self._run(self._get, path)

    async def list(self, collection: str) -> List[DocumentSnapshot]:
        return await self._run(self._list, collection)

    async def set(
        self, path: str, data: Dict[str, Any], expected_revision: Optional[int] = None
    ) -> WriteResult:
        return await self._run(self._set, path, data, expected_revision)

    async def create(self, path: str, data: Dict[str, Any]) -> Optional[WriteResult]:
        return await self._run(self._create, path, data)

    async def update(
        self, path: str, fields: Dict[str, Any], expected_revision: Optional[int] = None
    ) -> WriteResult:
        return await self._run(self._update, path, fields, expected_revision)

    async def delete(self, path: str) -> bool:
        return await self._run(self._delete, path)

    def batch(self) -> SQLiteWriteBatch:
        return SQLiteWriteBatch(self)

    async def close(self) -> None:
        await self._run(self._conn.close)
