"""Application layer - Services and use cases."""
from .services import resolve_version
from .use_cases import SyncStaticDataUseCase

__all__ = [
    'resolve_version',
    'SyncStaticDataUseCase',
]
