"""String value commands."""

from __future__ import annotations

from .base import RedisBase


class StringCommands(RedisBase):
    """Get, set and counter operations on string keys."""

    def set(self, key, value, expiration=0):
        """Store a value; a positive expiration sets its time to live."""
        return self._conn.set(key, value, **self._expiry(expiration))

    def set_nx(self, key, value, expiration=0):
        """Store a value only if the key is absent; returns whether it was stored."""
        return bool(self._conn.set(key, value, nx=True, **self._expiry(expiration)))

    def get(self, key):
        """Value of a key, or None when it does not exist."""
        return self._conn.get(key)

    def mget(self, *args):
        """Values of several keys, with None for missing ones."""
        return self._conn.mget(list(args))

    def incr(self, key):
        return self._conn.incr(key)

    def incr_by(self, key, value):
        return self._conn.incrby(key, value)

    def incr_by_float(self, key, value):
        return self._conn.incrbyfloat(key, value)

    def get_set(self, key, value):
        """Store a value and return the previous one."""
        return self._conn.getset(key, value)

    def rename(self, key, new_key):
        return self._conn.rename(key, new_key)