"""Process-wide structured logger with fields carried in a request context."""

from __future__ import annotations

import json
import logging
import re
import sys
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, NoReturn

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DEBUG = logging.DEBUG
INFO = logging.INFO
WARN = logging.WARNING
ERROR = logging.ERROR
PANIC = 45
FATAL = logging.CRITICAL

_LEVEL_NAMES = {
    DEBUG: "DEBUG",
    INFO: "INFO",
    WARN: "WARN",
    ERROR: "ERROR",
    PANIC: "PANIC",
    FATAL: "FATAL",
}


@dataclass
class Options:
    """Logger configuration."""

    filename: str
    ctx_fields: list[str] = field(default_factory=list)
    max_count: int = 0
    caller_enable: bool = False
    log_level: int = INFO
    close_console: bool = False


@dataclass
class _State:
    logger: logging.Logger | None = None
    ctx_fields: tuple[str, ...] = ()
    fields: dict[str, Any] = field(default_factory=dict)


_state = _State()


def _level_name(record: logging.LogRecord) -> str:
    return _LEVEL_NAMES.get(record.levelno, record.levelname)


def _timestamp(record: logging.LogRecord) -> str:
    return time.strftime(TIME_FORMAT, time.localtime(record.created))


def _short_caller(record: logging.LogRecord) -> str:
    path = Path(record.pathname)
    return f"{path.parent.name}/{path.name}:{record.lineno}"


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=str)


class _JsonFormatter(logging.Formatter):
    def __init__(self, caller: bool) -> None:
        super().__init__()
        self._caller = caller

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {"level": _level_name(record), "timestamp": _timestamp(record)}
        if self._caller:
            entry["file"] = _short_caller(record)
        entry["message"] = record.getMessage()
        entry.update(getattr(record, "fields", {}))
        return _dumps(entry)


class _ConsoleFormatter(logging.Formatter):
    def __init__(self, caller: bool) -> None:
        super().__init__()
        self._caller = caller

    def format(self, record: logging.LogRecord) -> str:
        parts = [_timestamp(record), _level_name(record)]
        if self._caller:
            parts.append(_short_caller(record))
        parts.append(record.getMessage())
        fields = getattr(record, "fields", {})
        if fields:
            parts.append(_dumps(fields))
        return "\t".join(parts)


class _FieldAdapter(logging.LoggerAdapter):
    """Logger bound to a fixed set of fields."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(kwargs.get("extra") or {})
        extra["fields"] = {**self.extra, **extra.get("fields", {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def with_fields(self, **fields: Any) -> _FieldAdapter:
        return _FieldAdapter(self.logger, {**self.extra, **fields})


def _file_handler(opt: Options) -> logging.Handler:
    handler = TimedRotatingFileHandler(
        opt.filename,
        when="midnight",
        backupCount=opt.max_count,
        encoding="utf-8",
    )
    handler.suffix = "%Y%m%d.log"
    handler.extMatch = re.compile(r"^\d{8}\.log$", re.ASCII)
    handler.setFormatter(_JsonFormatter(opt.caller_enable))
    handler.setLevel(opt.log_level)
    return handler


def init_log(opt: Options, **kwargs: Any) -> None:
    """Configure the global logger; keyword arguments become fields on every entry."""
    logger = logging.Logger("commonkit", opt.log_level)
    logger.propagate = False
    if not opt.close_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(_ConsoleFormatter(opt.caller_enable))
        console.setLevel(opt.log_level)
        logger.addHandler(console)
    logger.addHandler(_file_handler(opt))

    previous = _state.logger
    _state.logger = logger
    _state.ctx_fields = tuple(opt.ctx_fields)
    _state.fields = dict(kwargs)
    if previous is not None:
        for handler in previous.handlers:
            handler.close()


def _require() -> logging.Logger:
    if _state.logger is None:
        raise RuntimeError("logger is not initialised; call init_log first")
    return _state.logger


def _ctx_kv(ctx: Mapping[str, Any] | None) -> dict[str, str]:
    if not ctx:
        return {}
    return {key: str(ctx[key]) for key in _state.ctx_fields if ctx.get(key) is not None}


def _emit(level: int, ctx: Mapping[str, Any] | None, msg: str, fields: Mapping[str, Any]) -> None:
    logger = _require()
    merged = {**_state.fields, **_ctx_kv(ctx), **fields}
    logger.log(level, msg, extra={"fields": merged}, stacklevel=3)


def _sprintf(template: str, args: tuple[Any, ...]) -> str:
    if not args:
        return template
    try:
        return template % args
    except (TypeError, ValueError):
        return f"{template} %!(EXTRA {', '.join(map(repr, args))})"


def _pairs(args: tuple[Any, ...]) -> dict[str, Any]:
    it = iter(args)
    return {str(key): value for key, value in zip(it, it)}


def _exit() -> NoReturn:
    raise SystemExit(1)


def debug(ctx, msg, **kwargs):
    """Log at debug level with structured fields."""
    _emit(DEBUG, ctx, msg, kwargs)


def debugw(ctx, msg, *args):
    """Log at debug level with alternating key/value arguments."""
    _emit(DEBUG, ctx, msg, _pairs(args))


def info(ctx, msg, **kwargs):
    """Log at info level with structured fields."""
    _emit(INFO, ctx, msg, kwargs)


def infow(ctx, msg, *args):
    """Log at info level with alternating key/value arguments."""
    _emit(INFO, ctx, msg, _pairs(args))


def warn(ctx, msg, **kwargs):
    """Log at warn level with structured fields."""
    _emit(WARN, ctx, msg, kwargs)


def warnw(ctx, msg, *args):
    """Log at warn level with alternating key/value arguments."""
    _emit(WARN, ctx, msg, _pairs(args))


def error(ctx, msg, **kwargs):
    """Log at error level with structured fields."""
    _emit(ERROR, ctx, msg, kwargs)


def errorw(ctx, msg, *args):
    """Log at error level with alternating key/value arguments."""
    _emit(ERROR, ctx, msg, _pairs(args))


def fatal(ctx, msg, **kwargs):
    """Log at fatal level, then exit with status 1."""
    _emit(FATAL, ctx, msg, kwargs)
    _exit()


def panic(ctx, msg, **kwargs):
    """Log at panic level, then raise RuntimeError with the message."""
    _emit(PANIC, ctx, msg, kwargs)
    raise RuntimeError(msg)


def with_fields(**kwargs):
    """Return a logger that adds the given fields to every entry."""
    return _FieldAdapter(_require(), {**_state.fields, **kwargs})


def sync():
    """Flush every output of the global logger."""
    for handler in _require().handlers:
        handler.flush()


def debugf(ctx, template, *args):
    """Log a %-formatted message at debug level."""
    _emit(DEBUG, ctx, _sprintf(template, args), {})


def infof(ctx, template, *args):
    """Log a %-formatted message at info level."""
    _emit(INFO, ctx, _sprintf(template, args), {})


def with_infof(ctx, fields, template, *args):
    """Log a %-formatted message at info level with extra fields."""
    _emit(INFO, ctx, _sprintf(template, args), dict(fields))


def warnf(ctx, template, *args):
    """Log a %-formatted message at warn level."""
    _emit(WARN, ctx, _sprintf(template, args), {})


def errorf(ctx, template, *args):
    """Log a %-formatted message at error level."""
    _emit(ERROR, ctx, _sprintf(template, args), {})


def fatalf(ctx, template, *args):
    """Log a %-formatted message at fatal level, then exit with status 1."""
    _emit(FATAL, ctx, _sprintf(template, args), {})
    _exit()


def panicf(ctx, template, *args):
    """Log a %-formatted message at panic level, then raise RuntimeError."""
    message = _sprintf(template, args)
    _emit(PANIC, ctx, message, {})
    raise RuntimeError(message)