"""Version entity: one Data Dragon snapshot and its load flags."""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Summary:
    """Reduced champion/item projection embedded on the version document."""

    key: str
    name: str
    image: str

    def to_dict(self) -> Dict[str, str]:
        return {'key': self.key, 'name': self.name, 'image': self.image}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Summary':
        return cls(key=str(data['key']), name=data.get('name', ''), image=data.get('image', ''))


@dataclass
class VersionRecord:
    """Represents a Data Dragon version as stored in `versions/{version}`."""

    version: str
    loaded: bool = False
    enabled: bool = False
    champions: List[Summary] = field(default_factory=list)
    items: List[Summary] = field(default_factory=list)

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> 'VersionRecord':
        return cls(
            version=data['version'],
            loaded=bool(data.get('loaded', False)),
            enabled=bool(data.get('enabled', False)),
            champions=[Summary.from_dict(c) for c in data.get('champions', [])],
            items=[Summary.from_dict(i) for i in data.get('items', [])],
        )

    def to_document(self, include_summaries: bool = True) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            'version': self.version,
            'loaded': self.loaded,
            'enabled': self.enabled,
        }
        if include_summaries:
            doc['champions'] = [c.to_dict() for c in self.champions]
            doc['items'] = [i.to_dict() for i in self.items]
        return doc
