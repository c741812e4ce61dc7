"""List (queue) commands."""

from __future__ import annotations

from .base import RedisBase


class ListCommands(RedisBase):
    """Push, pop and trim operations on list keys."""

    def lpop(self, key):
        return self._conn.lpop(key)

    def rpop(self, key):
        return self._conn.rpop(key)

    def rpush(self, key, *args):
        """Append values; returns the new length."""
        return self._conn.rpush(key, *args)

    def lpush(self, key, *args):
        """Prepend values; returns the new length."""
        return self._conn.lpush(key, *args)

    def ltrim(self, key, start, stop):
        return self._conn.ltrim(key, start, stop)