from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def register_levels() -> None:
    if logging.getLevelName(LogLevel.SUCCESS) == "Level 25":
        logging.addLevelName(LogLevel.SUCCESS, "SUCCESS")


def to_level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name == "SUCCESS":
        return int(LogLevel.SUCCESS)
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
