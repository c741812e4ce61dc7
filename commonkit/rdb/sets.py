"""Set commands."""

from __future__ import annotations

from .base import RedisBase


class SetCommands(RedisBase):
    """Membership operations on set keys."""

    def sadd(self, key, *args):
        """Add members; returns how many were newly added."""
        return self._conn.sadd(key, *args)

    def smembers(self, key):
        """All members of the set."""
        return set(self._conn.smembers(key))

    def srem(self, key, *args):
        """Remove members; returns how many were removed."""
        return self._conn.srem(key, *args)

    def sismember(self, key, member):
        return bool(self._conn.sismember(key, member))

    def srandmember(self, key):
        """A random member, or None when the set is empty."""
        return self._conn.srandmember(key)

    def scard(self, key):
        return self._conn.scard(key)