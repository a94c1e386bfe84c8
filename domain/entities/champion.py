"""Champion entities parsed from `champion.json` and `champion/{id}.json`."""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .version import Summary


@dataclass
class ChampionIndexEntry:
    """One entry of the compact champion index."""

    id: str
    key: str
    name: str
    image: str

    @classmethod
    def from_feed(cls, data: Dict[str, Any]) -> 'ChampionIndexEntry':
        return cls(
            id=data['id'],
            key=str(data['key']),
            name=data['name'],
            image=data['image']['full'],
        )

    def summary(self) -> Summary:
        return Summary(key=self.key, name=self.name, image=self.image)


def parse_champion_index(payload: Dict[str, Any]) -> List[ChampionIndexEntry]:
    """Index entries in feed order."""
    return [ChampionIndexEntry.from_feed(entry) for entry in payload.get('data', {}).values()]


@dataclass
class Champion:
    """
    Full champion record.

    `key` is the numeric champion key. It survives renames (Nunu became
    "Nunu & Willump" with the same key), so documents are stored under it
    rather than under `id` or `name`.
    """

    id: str
    key: str
    name: str
    title: str
    image: Dict[str, Any]
    partype: str
    stats: Dict[str, Any]
    spells: List[Dict[str, Any]] = field(default_factory=list)
    passive: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_feed(cls, data: Dict[str, Any]) -> 'Champion':
        return cls(
            id=data['id'],
            key=str(data['key']),
            name=data['name'],
            title=data.get('title', ''),
            image=data.get('image', {}),
            partype=data.get('partype', ''),
            stats=data.get('stats', {}),
            spells=data.get('spells', []),
            passive=data.get('passive', {}),
        )

    @classmethod
    def from_detail(cls, champion_id: str, payload: Dict[str, Any]) -> 'Champion':
        """Parse the per-champion document, which nests the record under its id."""
        return cls.from_feed(payload['data'][champion_id])

    @property
    def image_file(self) -> str:
        return f"{self.id}.png"

    @property
    def passive_image_file(self) -> str:
        return self.passive['image']['full']

    def to_document(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'key': self.key,
            'name': self.name,
            'title': self.title,
            'image': self.image,
            'partype': self.partype,
            'stats': self.stats,
            # stored as an opaque JSON string; spell fields are not queryable
            'spells': json.dumps(self.spells, separators=(',', ':')),
            'passive': self.passive,
        }
