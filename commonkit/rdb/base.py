"""Connection holder shared by the redis command groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import Any

_SECOND = timedelta(seconds=1)
_MILLISECOND = timedelta(milliseconds=1)


class Mode(IntEnum):
    """Deployment kind: a single server or a cluster."""

    CLIENT = 1
    CLUSTER = 2


@dataclass
class Options:
    """Connection settings; timeouts are in seconds."""

    host: list[str] = field(default_factory=list)
    db: int = 0
    password: str | None = None
    mode: int = Mode.CLIENT
    write_timeout: float | None = None
    read_timeout: float | None = None


def _duration(value: timedelta | float | int) -> timedelta:
    if isinstance(value, timedelta):
        return value
    return timedelta(seconds=value)


class RedisBase:
    """Holds a standalone and/or cluster connection and picks one by mode.

    Any mode other than cluster uses the standalone connection.
    """

    def __init__(self, client: Any = None, cluster: Any = None, mode: int = Mode.CLIENT) -> None:
        self.client = client
        self.cluster = cluster
        self.mode = mode

    @property
    def _conn(self) -> Any:
        if self.mode == Mode.CLUSTER:
            conn, label = self.cluster, "cluster"
        else:
            conn, label = self.client, "standalone"
        if conn is None:
            raise RuntimeError(f"no {label} connection configured")
        return conn

    @staticmethod
    def _expiry(expiration: timedelta | float | int) -> dict[str, int]:
        """Expiry keyword arguments for SET; non-positive means none."""
        span = _duration(expiration)
        if span <= timedelta(0):
            return {}
        if span < _SECOND or span % _SECOND:
            if span < _MILLISECOND:
                return {"px": 1}
            return {"px": span // _MILLISECOND}
        return {"ex": span // _SECOND}

    @staticmethod
    def _seconds(expiration: timedelta | float | int) -> int:
        """Whole seconds, rounding a positive sub-second span up to one."""
        span = _duration(expiration)
        if timedelta(0) < span < _SECOND:
            return 1
        return int(span.total_seconds())