"""
Severity levels, ordered from least to most severe.
"""
from __future__ import annotations
from enum import IntEnum
from typing import Any

from levellog.core.errors import InvalidLevelError

class Level(IntEnum):
    TRACE = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4

    @property
    def label(self) -> str:
        """Name as it appears in emitted lines, e.g. 'Warn'."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "Level":
        if isinstance(value, cls):
            return value
        # bool is an int subclass; True/False are not ranks
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLevelError(value) from None
        if isinstance(value, str):
            key = value.strip().upper()
            key = _ALIASES.get(key, key)
            if key in cls.__members__:
                return cls[key]
        raise InvalidLevelError(value)

_ALIASES = {
    "DEBUG": "TRACE",
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}

__all__ = ["Level"]
