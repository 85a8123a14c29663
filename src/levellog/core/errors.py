"""
Error classes for clearer exception sources.
"""
from __future__ import annotations
from typing import Any

class LevelLogError(Exception):
    """Base for internal errors."""

class InvalidLevelError(LevelLogError, ValueError):
    def __init__(self, value: Any):
        super().__init__(f"Unknown log level: {value!r}")
        self.value = value

class SinkWriteError(LevelLogError, OSError):
    def __init__(self, sink: Any, detail: str):
        super().__init__(f"Write to {sink!r} failed: {detail}")
        self.sink = sink
        self.detail = detail
