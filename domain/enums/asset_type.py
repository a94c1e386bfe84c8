"""Image asset kinds served by the feed."""
from enum import Enum


class AssetType(Enum):
    """Image groups on the feed CDN.

    Provides:
    - feed_group: path segment under /cdn/{version}/img/
    - blob_prefix: namespace the image is stored under
    """

    CHAMPION = "champion"
    PASSIVE = "passive"
    ITEM = "item"

    @property
    def feed_group(self) -> str:
        return self.value

    @property
    def blob_prefix(self) -> str:
        return f"{self.value}s"

    def blob_path(self, file_name: str) -> str:
        return f"{self.blob_prefix}/{file_name}"
