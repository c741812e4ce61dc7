"""Sorted set commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import RedisBase


@dataclass(frozen=True)
class Z:
    """A sorted set member with its score."""

    score: float
    member: Any


@dataclass(frozen=True)
class ZRangeBy:
    """Score bounds and an optional window for range-by-score queries.

    The window is applied when either ``offset`` or ``count`` is non-zero.
    """

    min: str = "-inf"
    max: str = "+inf"
    offset: int = 0
    count: int = 0

    def _limit(self) -> dict[str, int]:
        if self.offset or self.count:
            return {"start": self.offset, "num": self.count}
        return {}


def _scored(pairs) -> list[Z]:
    return [Z(score=float(score), member=member) for member, score in pairs]


class SortedSetCommands(RedisBase):
    """Scored membership and range operations on sorted set keys."""

    def zincr_by(self, key, increment, member):
        """Add to a member's score; returns the new score."""
        return float(self._conn.zincrby(key, increment, member))

    def zrevrange(self, key, start, stop):
        return list(self._conn.zrevrange(key, start, stop))

    def zrem(self, key, *args):
        return self._conn.zrem(key, *args)

    def zcard(self, key):
        return self._conn.zcard(key)

    def zscore(self, key, member):
        """Score of a member, or None when it is absent."""
        return self._conn.zscore(key, member)

    def zrank(self, key, member):
        """Rank by ascending score, or None when absent."""
        return self._conn.zrank(key, member)

    def zrevrank(self, key, member):
        """Rank by descending score, or None when absent."""
        return self._conn.zrevrank(key, member)

    def zrange(self, key, start, stop):
        return list(self._conn.zrange(key, start, stop))

    def zrange_with_scores(self, key, start, stop):
        return _scored(self._conn.zrange(key, start, stop, withscores=True))

    def zrevrange_with_scores(self, key, start, stop):
        return _scored(self._conn.zrevrange(key, start, stop, withscores=True))

    def zrange_by_score(self, key, opt):
        """Members with scores between ``opt.min`` and ``opt.max``, ascending."""
        return list(self._conn.zrangebyscore(key, opt.min, opt.max, **opt._limit()))

    def zadd(self, key, *args):
        """Add members given as ``Z`` values; returns how many were new."""
        if not args:
            raise ValueError("expected at least one member")
        scores = {}
        for z in args:
            if not isinstance(z, Z):
                raise TypeError(f"expected Z, got {type(z).__name__}")
            scores[z.member] = z.score
        return self._conn.zadd(key, scores)

    def zrevrange_by_score(self, key, opt):
        """Members with scores between ``opt.min`` and ``opt.max``, descending."""
        return list(self._conn.zrevrangebyscore(key, opt.max, opt.min, **opt._limit()))

    def zcount(self, key, min, max):
        return self._conn.zcount(key, min, max)