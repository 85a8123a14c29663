"""
Process-level logging context.

A LogContext owns the minimum severity threshold shared by every logger bound
to it. ``default_context`` is the one used when a logger is built without an
explicit context, so setting its minimum affects all such loggers at once.
"""
from __future__ import annotations
from typing import Any

from levellog.core.levels import Level

class LogContext:
    def __init__(self, minimum: Any = Level.TRACE, color: bool = True):
        self._minimum = Level.parse(minimum)
        self.color = color

    @property
    def minimum(self) -> Level:
        return self._minimum

    @minimum.setter
    def minimum(self, level: Any):
        self._minimum = Level.parse(level)

    def allows(self, level: Level) -> bool:
        return not self._minimum > level

    def reset(self):
        self._minimum = Level.TRACE
        self.color = True

    def __repr__(self) -> str:
        return f"LogContext(minimum={self._minimum.label}, color={self.color})"

default_context = LogContext()

def set_minimum(level: Any):
    default_context.minimum = level

def get_minimum() -> Level:
    return default_context.minimum
