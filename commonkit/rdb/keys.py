"""Generic key commands."""

from __future__ import annotations

from datetime import timedelta

from .base import RedisBase


class KeyCommands(RedisBase):
    """Scripting, deletion, existence and expiry of keys."""

    def eval(self, script, keys, *args):
        """Run a Lua script with the given keys and arguments."""
        keys = list(keys)
        return self._conn.eval(script, len(keys), *keys, *args)

    def delete(self, *args):
        """Delete keys; returns how many were removed."""
        return self._conn.delete(*args)

    def expire(self, key, expiration):
        """Set a key's time to live; returns whether the key exists."""
        return bool(self._conn.expire(key, self._seconds(expiration)))

    def exists(self, *args):
        """Count how many of the keys exist."""
        return self._conn.exists(*args)

    def ttl(self, key):
        """Remaining time to live; -1s means no expiry, -2s means no key."""
        return timedelta(seconds=self._conn.ttl(key))