"""Flat reference records from the static developer docs."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class LeagueMap:
    map_id: int
    map_name: str
    notes: str = ''

    @classmethod
    def from_feed(cls, data: Dict[str, Any]) -> 'LeagueMap':
        return cls(map_id=int(data['mapId']), map_name=data['mapName'], notes=data.get('notes', ''))

    @property
    def document_id(self) -> str:
        return str(self.map_id)

    def to_document(self) -> Dict[str, Any]:
        return {'mapName': self.map_name, 'notes': self.notes}


@dataclass
class GameMode:
    game_mode: str
    description: str = ''

    @classmethod
    def from_feed(cls, data: Dict[str, Any]) -> 'GameMode':
        return cls(game_mode=data['gameMode'], description=data.get('description', ''))

    @property
    def document_id(self) -> str:
        return self.game_mode

    def to_document(self) -> Dict[str, Any]:
        return {'description': self.description}


@dataclass
class GameType:
    game_type: str
    description: str = ''

    @classmethod
    def from_feed(cls, data: Dict[str, Any]) -> 'GameType':
        # the feed spells it `gametype`, all lower case
        return cls(game_type=data['gametype'], description=data.get('description', ''))

    @property
    def document_id(self) -> str:
        return self.game_type

    def to_document(self) -> Dict[str, Any]:
        return {'description': self.description}
