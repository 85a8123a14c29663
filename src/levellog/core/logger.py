"""
Leveled logger: one formatted, colorized line per call.

Lines look like ``Wed, 01 Jan 2020 00:00:00 GMT : (Warn@net) » link down``.
Error and Fatal go to stderr, everything else to stdout, unless the logger
was given its own sink. ``log`` is a coroutine; the per-level helpers schedule
it as a task on the running loop and hand the task back. A helper task that
is never awaited can lose its write failure.
"""
from __future__ import annotations
import asyncio
import inspect
import io
import sys
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any, Set

from levellog.core.colors import level_color
from levellog.core.context import LogContext, default_context
from levellog.core.errors import InvalidLevelError, SinkWriteError
from levellog.core.levels import Level

SEPARATOR = "»"

def timestamp() -> str:
    return format_datetime(datetime.now(timezone.utc), usegmt=True)

class LevelLogger:
    def __init__(self, level: Level = Level.INFO, prefix: str = "None",
                 sink: Any = None, context: LogContext | None = None):
        self._level = Level.parse(level)
        self._prefix = prefix
        self._sink = sink
        self._context = context if context is not None else default_context
        self._pending: Set[asyncio.Task] = set()

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def level(self) -> Level:
        return self._level

    @level.setter
    def level(self, value: Any):
        self._level = Level.parse(value)

    @property
    def sink(self) -> Any:
        return self._sink

    @property
    def context(self) -> LogContext:
        return self._context

    def format_line(self, message: str, level: Level) -> str:
        tag = f"{getattr(level, 'label', level)}@{self._prefix}"
        if self._context.color:
            tag = level_color(level)(tag)
        return f"{timestamp()} : ({tag}) {SEPARATOR} {message}\n"

    def _resolve_sink(self, level: Level) -> Any:
        if self._sink is not None:
            return self._sink
        elif level >= Level.ERROR:
            return sys.stderr
        else:
            return sys.stdout

    async def log(self, message: str, level: Level | None = None):
        """Write ``message`` at ``level`` (or the logger's own level)."""
        if level is None:
            level = self._level
        elif isinstance(level, str):
            level = Level.parse(level)
        elif not isinstance(level, Level):
            try:
                level = Level.parse(level)
            except InvalidLevelError:
                pass  # unknown ranks are still written, tagged in white
        if not self._context.allows(level):
            return
        sink = self._resolve_sink(level)
        line = self.format_line(message, level)
        await _write(sink, line.encode("utf-8"))

    def _spawn(self, message: str, level: Level) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self.log(message, level))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def trace(self, message: str) -> asyncio.Task: return self._spawn(message, Level.TRACE)
    def info(self, message: str) -> asyncio.Task: return self._spawn(message, Level.INFO)
    def warn(self, message: str) -> asyncio.Task: return self._spawn(message, Level.WARN)
    def error(self, message: str) -> asyncio.Task: return self._spawn(message, Level.ERROR)
    def fatal(self, message: str) -> asyncio.Task: return self._spawn(message, Level.FATAL)

    def __repr__(self) -> str:
        return f"LevelLogger(level={self._level.label}, prefix={self._prefix!r})"

async def _write(sink: Any, data: bytes):
    # Text console streams expose their byte layer as .buffer
    target = getattr(sink, "buffer", None)
    payload: Any = data
    if target is None:
        target = sink
        if isinstance(sink, io.TextIOBase):
            payload = data.decode("utf-8")
    try:
        if target is not sink:
            # push text already queued on the wrapper ahead of our bytes
            sink.flush()
        result = target.write(payload)
        if inspect.isawaitable(result):
            await result
        drain = getattr(target, "drain", None)
        if drain is not None:
            await drain()
        flush = getattr(target, "flush", None)
        if flush is not None:
            flushed = flush()
            if inspect.isawaitable(flushed):
                await flushed
    except (OSError, ValueError) as e:
        raise SinkWriteError(sink, str(e)) from e

