"""Item entity parsed from `item.json`."""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .version import Summary


@dataclass
class Item:
    """An item record; the feed attributes are kept as-is plus its own key."""

    key: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.data.get('name', '')

    @property
    def image(self) -> str:
        return self.data.get('image', {}).get('full', f"{self.key}.png")

    @property
    def image_file(self) -> str:
        return f"{self.key}.png"

    def available_on(self, map_id: str) -> bool:
        return bool(self.data.get('maps', {}).get(map_id, False))

    def summary(self) -> Summary:
        return Summary(key=self.key, name=self.name, image=self.image)

    def to_document(self) -> Dict[str, Any]:
        return {**self.data, 'key': self.key}


def parse_item_index(payload: Dict[str, Any]) -> List[Item]:
    return [Item(key=str(key), data=dict(data)) for key, data in payload.get('data', {}).items()]
