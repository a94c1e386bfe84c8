"""Infrastructure repositories."""
from .game_data_repository import GameDataRepository, content_type_for

__all__ = [
    'GameDataRepository',
    'content_type_for',
]
