"""Request logging hook for search-engine HTTP transports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .core import errorf, infof


def _read_body(body: Any) -> bytes:
    if hasattr(body, "read"):
        seekable = getattr(body, "seekable", lambda: False)()
        position = body.tell() if seekable else None
        data = body.read()
        if position is not None:
            body.seek(position)
    else:
        data = body
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


@dataclass
class EsLogger:
    """Logs each line of outgoing request bodies when enabled."""

    request_enabled: bool = False
    response_enabled: bool = False

    def log_round_trip(self, request, response, err, t, ti):
        """Log the request body line by line; never raises for read failures."""
        if not self.request_body_enabled() or request is None:
            return None
        body = getattr(request, "body", None)
        if body is None:
            return None
        try:
            data = _read_body(body)
        except OSError as exc:
            errorf(None, "ES日志error: %s", exc)
            return None
        for raw in data.split(b"\n"):
            line = raw.removesuffix(b"\r").decode("utf-8", errors="replace")
            if line:
                infof(None, "ES日志: 请求参数: %s; 时间: %s; 消耗：%s", line, t, ti)
        return None

    def request_body_enabled(self):
        return self.request_enabled

    def response_body_enabled(self):
        return self.response_enabled