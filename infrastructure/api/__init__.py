"""Infrastructure API module."""
from .ddragon_client import DataDragonClient

__all__ = [
    'DataDragonClient',
]
