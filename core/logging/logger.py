from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from .levels import LogLevel


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


Message = SupportsStr | Callable[[], SupportsStr]


class StructuredLogger:
    """Thin wrapper over a stdlib logger.

    Messages may be callables so expensive formatting only happens when the
    level is enabled. Keyword arguments become structured ``fields`` on the
    record::

        log.info("champion-added", champion="266")
    """

    def __init__(self, logger: logging.Logger, service: Optional[str] = None) -> None:
        self._logger = logger
        self._service = service

    def _log(self, level: int, msg: Message, exc_info: Any = None, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        message = msg() if callable(msg) else msg
        extra: dict[str, Any] = {"fields": fields}
        if self._service:
            extra["service"] = self._service
        self._logger.log(level, str(message), exc_info=exc_info, extra=extra)

    def debug(self, msg: Message, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, **fields)

    def info(self, msg: Message, **fields: Any) -> None:
        self._log(logging.INFO, msg, **fields)

    def success(self, msg: Message, **fields: Any) -> None:
        self._log(int(LogLevel.SUCCESS), msg, **fields)

    def warning(self, msg: Message, **fields: Any) -> None:
        self._log(logging.WARNING, msg, **fields)

    def error(self, msg: Message, exc_info: Any = None, **fields: Any) -> None:
        self._log(logging.ERROR, msg, exc_info=exc_info, **fields)


def get_logger(name: str, *, service: Optional[str] = None) -> StructuredLogger:
    return StructuredLogger(logging.getLogger(name), service=service)
