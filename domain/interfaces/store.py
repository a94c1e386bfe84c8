"""Store interfaces the sync layer writes through."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DocumentSnapshot:
    """A document as read from the store.

    `update_time` is the store's write timestamp in nanoseconds; `revision`
    increments on every write and is what conditional writes are checked
    against.
    """

    path: str
    data: Dict[str, Any]
    update_time: int
    revision: int

    @property
    def id(self) -> str:
        return self.path.rsplit('/', 1)[-1]

    def get(self, field: str, default: Any = None) -> Any:
        return self.data.get(field, default)


@dataclass(frozen=True)
class WriteResult:
    path: str
    update_time: int
    revision: int


class IWriteBatch(ABC):
    """Set operations committed together or not at all."""

    @abstractmethod
    def set(self, path: str, data: Dict[str, Any]) -> 'IWriteBatch':
        """Queue a full replace of the document at `path`."""
        pass

    @abstractmethod
    async def commit(self) -> List[WriteResult]:
        """Apply every queued write in one transaction."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


class IDocumentStore(ABC):
    """Interface for a collection/document store.

    Paths alternate collection and document ids: `versions/14.1` is a
    document, `versions/14.1/champions` a collection.
    """

    @abstractmethod
    async def get(self, path: str) -> Optional[DocumentSnapshot]:
        pass

    @abstractmethod
    async def list(self, collection: str) -> List[DocumentSnapshot]:
        """All documents directly under `collection`."""
        pass

    @abstractmethod
    async def set(
        self, path: str, data: Dict[str, Any], expected_revision: Optional[int] = None
    ) -> WriteResult:
        """Replace the whole document, optionally only if its revision matches."""
        pass

    @abstractmethod
    async def create(self, path: str, data: Dict[str, Any]) -> Optional[WriteResult]:
        """Insert the document if absent; None when it already exists."""
        pass

    @abstractmethod
    async def update(
        self, path: str, fields: Dict[str, Any], expected_revision: Optional[int] = None
    ) -> WriteResult:
        """Merge `fields` into an existing document."""
        pass

    @abstractmethod
    async def delete(self, path: str) -> bool:
        pass

    @abstractmethod
    def batch(self) -> IWriteBatch:
        pass

    @abstractmethod
    async def close(self) -> None:
        pass


class IBlobStore(ABC):
    """Interface for the image object store."""

    @abstractmethod
    async def upload(
        self, path: str, data: bytes, content_type: str = '', cache_control: str = ''
    ) -> None:
        """Store `data` at `path` in one request, overwriting any existing object."""
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        pass

    async def close(self) -> None:
        return None
