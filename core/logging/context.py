"""Run-scoped log fields (version being synced, current stage)."""
from __future__ import annotations

import contextvars
from typing import Any, Dict

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("sync_log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


class context:
    """Bind fields for the duration of a ``with`` block.

    Nested blocks layer on top of the outer fields and restore them on exit,
    so ``with context(stage="items")`` inside ``with context(version=v)``
    logs both.
    """

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        current = dict(_context.get())
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False
