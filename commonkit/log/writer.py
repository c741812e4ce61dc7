"""A writable stream whose lines are sent to the global logger."""

from __future__ import annotations

import os
import threading
import weakref
from collections.abc import Iterator, Mapping
from typing import Any

from .core import errorf, infof

MAX_TOKEN_LENGTH = 65536 // 2
_READ_SIZE = 65536


def scan_lines_or_give_long(data: bytes, at_eof: bool) -> tuple[int, bytes | None]:
    """Split off one line, or a fixed-size chunk when a line grows too long."""
    if at_eof and not data:
        return 0, None
    newline = data.find(b"\n")
    if newline >= 0:
        return newline + 1, data[:newline].removesuffix(b"\r")
    if at_eof:
        return len(data), data.removesuffix(b"\r")
    if len(data) < MAX_TOKEN_LENGTH:
        return 0, None
    return MAX_TOKEN_LENGTH, data[:MAX_TOKEN_LENGTH]


def _tokens(fd: int) -> Iterator[bytes]:
    buffer = b""
    at_eof = False
    while True:
        advance, token = scan_lines_or_give_long(buffer, at_eof)
        if token is not None:
            yield token
        if advance:
            buffer = buffer[advance:]
            continue
        if at_eof:
            return
        chunk = os.read(fd, _READ_SIZE)
        if chunk:
            buffer += chunk
        else:
            at_eof = True


def _scan(ctx: Mapping[str, Any] | None, fd: int) -> None:
    try:
        for token in _tokens(fd):
            text = token.decode("utf-8", errors="replace")
            if not text.replace(" ", ""):
                continue
            infof(ctx, text)
    except OSError as exc:
        errorf(ctx, "Error while reading from Writer: %s", exc)
    finally:
        os.close(fd)


class _PipeWriter:
    """Write end of a pipe drained into the logger by a background thread."""

    def __init__(self, fd: int, reader: threading.Thread) -> None:
        self._fd = fd
        self._reader = reader
        self._closer = weakref.finalize(self, os.close, fd)

    @property
    def closed(self) -> bool:
        return not self._closer.alive

    def writable(self) -> bool:
        return True

    def write(self, data: str | bytes) -> int:
        if self.closed:
            raise ValueError("write to closed writer")
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        view = memoryview(raw)
        while view:
            view = view[os.write(self._fd, view):]
        return len(data)

    def flush(self) -> None:
        if self.closed:
            raise ValueError("flush of closed writer")

    def close(self) -> None:
        self._closer()
        self._reader.join()

    def __enter__(self) -> _PipeWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def safe_writer(ctx):
    """Return a writer whose non-blank lines are logged at info level."""
    read_fd, write_fd = os.pipe()
    reader = threading.Thread(target=_scan, args=(ctx, read_fd), daemon=True)
    reader.start()
    return _PipeWriter(write_fd, reader)