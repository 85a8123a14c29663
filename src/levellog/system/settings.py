from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping

from levellog.core.context import LogContext, default_context
from levellog.core.errors import InvalidLevelError
from levellog.core.levels import Level

@dataclass
class LogSettings:
    minimum: str = "TRACE"   # TRACE, INFO, WARN, ERROR, FATAL
    color: bool = True

    def normalize(self, strict: bool = False) -> "LogSettings":
        try:
            self.minimum = Level.parse(self.minimum).name
        except InvalidLevelError:
            if strict:
                raise
            self.minimum = "TRACE"
        if not isinstance(self.color, bool):
            self.color = True
        return self

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], strict: bool = False) -> "LogSettings":
        known = {f.name for f in fields(cls)}
        data = cls(**{k: v for k, v in mapping.items() if k in known})
        return data.normalize(strict=strict)

    def apply(self, context: LogContext | None = None) -> LogContext:
        """Push these values into a context; the default one if none given."""
        ctx = context if context is not None else default_context
        self.normalize()
        ctx.minimum = self.minimum
        ctx.color = self.color
        return ctx
