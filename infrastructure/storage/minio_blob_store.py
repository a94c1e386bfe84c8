"""MinIO / S3 blob store."""
import asyncio
import logging
import threading
from io import BytesIO
from typing import Optional

from minio import Minio
from minio.error import S3Error

from domain.errors import StoreWriteError
from domain.interfaces import IBlobStore

logger = logging.getLogger(__name__)


class MinioBlobStore(IBlobStore):
    def __init__(
        self,
        endpoint: str,
        access_key: str,
        secret_key: str,
        bucket_name: str,
        secure: bool = False,
        region: Optional[str] = None,
        client: Optional[Minio] = None,
    ):
        """
        Initialize MinIO blob store

        Args:
            endpoint: MinIO server endpoint (e.g., 'localhost:9000')
            access_key: MinIO access key
            secret_key: MinIO secret key
            bucket_name: Bucket images are written to
            secure: Use HTTPS
            region: Bucket region, if the server needs one
            client: Pre-built client, mainly for tests
        """
        self.client = client or Minio(
            endpoint=endpoint,
            access_key=access_key,
            secret_key=secret_key,
            secure=secure,
            region=region,
        )
        self.bucket_name = bucket_name
        self._bucket_ready = False
        self._bucket_lock = threading.Lock()

    def _ensure_bucket_exists(self) -> None:
        with self._bucket_lock:
            if self._bucket_ready:
                return
            try:
                if not self.client.bucket_exists(self.bucket_name):
                    self.client.make_bucket(self.bucket_name)
                    logger.info(f"Created bucket: {self.bucket_name}")
            except S3Error as e:
                logger.error(f"Failed to create/check bucket {self.bucket_name}: {e}")
                raise StoreWriteError(f"Bucket {self.bucket_name} unavailable: {e}") from e
            self._bucket_ready = True

    def _put(self, path: str, data: bytes, content_type: str, cache_control: str) -> None:
        self._ensure_bucket_exists()
        try:
            # single PUT; images are far below the multipart threshold
            self.client.put_object(
                bucket_name=self.bucket_name,
                object_name=path,
                data=BytesIO(data),
                length=len(data),
                content_type=content_type or "application/octet-stream",
                metadata={"Cache-Control": cache_control} if cache_control else None,
            )
        except S3Error as e:
            logger.error(f"Failed to upload {path}: {e}")
            raise StoreWriteError(f"Failed to upload {path}: {e}") from e

    async def upload(
        self, path: str, data: bytes, content_type: str = "", cache_control: str = ""
    ) -> None:
        await asyncio.to_thread(self._put, path, data, content_type, cache_control)

    def _stat(self, path: str) -> bool:
        try:
            self.client.stat_object(self.bucket_name, path)
            return True
        except S3Error:
            return False

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._stat, path)
