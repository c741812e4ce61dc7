"""Logger hooks for SQL layers, with slow-query detection."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any

from . import core


class LogLevel(IntEnum):
    SILENT = 1
    ERROR = 2
    WARN = 3
    INFO = 4


class RecordNotFoundError(LookupError):
    """Raised when a query finds no record."""

    def __init__(self, message: str = "record not found") -> None:
        super().__init__(message)


def _trim(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    digits = len(str(unit)) - 1
    frac_text = f"{frac:0{digits}d}".rstrip("0")
    return f"{whole}.{frac_text}" if frac_text else str(whole)


def _format_duration(seconds: float) -> str:
    ns = round(seconds * 1_000_000_000)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return f"{sign}{_trim(ns, 1_000)}µs"
    if ns < 1_000_000_000:
        return f"{sign}{_trim(ns, 1_000_000)}ms"
    hours, rest = divmod(ns, 3_600_000_000_000)
    minutes, rest = divmod(rest, 60_000_000_000)
    text = ""
    if hours:
        text += f"{hours}h"
    if hours or minutes:
        text += f"{minutes}m"
    return f"{sign}{text}{_trim(rest, 1_000_000_000)}s"


_TRACE_TEMPLATE = "err=%s elapsed=%s rows=%d sql=%s"


@dataclass(frozen=True)
class SqlLogger:
    """Routes SQL layer log calls to the global logger, filtered by level."""

    log_level: int = LogLevel.SILENT
    ignore_record_not_found_error: bool = False
    slow_threshold: float = 0.0

    def log_mode(self, level):
        """Return a copy using the given level."""
        return replace(self, log_level=level)

    def info(self, ctx, msg, *args):
        if self.log_level >= LogLevel.INFO:
            core.infof(ctx, msg, *args)

    def warn(self, ctx, msg, *args):
        if self.log_level >= LogLevel.WARN:
            core.warnf(ctx, msg, *args)

    def error(self, ctx, msg, *args):
        if self.log_level >= LogLevel.ERROR:
            core.errorf(ctx, msg, *args)

    def trace(
        self,
        ctx: Mapping[str, Any] | None,
        begin: float,
        fc: Callable[[], tuple[str, int]],
        err: BaseException | None,
    ) -> None:
        """Log a finished statement; ``begin`` is a ``time.monotonic()`` reading."""
        if self.log_level <= 0:
            return
        elapsed = time.monotonic() - begin
        err_text = str(err) if err is not None else ""
        if (
            err is not None
            and self.log_level >= LogLevel.ERROR
            and not (self.ignore_record_not_found_error and isinstance(err, RecordNotFoundError))
        ):
            log = core.errorf
        elif self.slow_threshold and elapsed > self.slow_threshold and self.log_level >= LogLevel.WARN:
            log = core.warnf
        elif self.log_level >= LogLevel.INFO:
            log = core.infof
        else:
            return
        sql, rows = fc()
        log(ctx, _TRACE_TEMPLATE, err_text, _format_duration(elapsed), rows, sql)