"""Outcome of one sync run."""
from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class SyncResult:
    """
    Always returned by a run, even a failed one.

    `loaded` and `enabled` reflect how far the run got; `error` holds the
    traceback of whatever stopped it, or '' on success.
    """

    version: str = ''
    loaded: bool = False
    enabled: bool = False
    error: str = ''

    @property
    def ok(self) -> bool:
        return not self.error

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
