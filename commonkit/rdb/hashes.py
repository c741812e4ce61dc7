"""Hash commands."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import RedisBase


def _field_values(args: tuple[Any, ...]) -> dict[Any, Any]:
    """Field/value pairs given as one mapping, one flat sequence, or alternating arguments."""
    if len(args) == 1:
        (only,) = args
        if isinstance(only, Mapping):
            pairs = dict(only)
            if not pairs:
                raise ValueError("expected at least one field/value pair")
            return pairs
        if isinstance(only, (list, tuple)):
            args = tuple(only)
    if not args or len(args) % 2:
        raise ValueError("expected field/value pairs")
    it = iter(args)
    return dict(zip(it, it))


class HashCommands(RedisBase):
    """Field-level operations on hash keys."""

    def hset(self, key, *args):
        """Set fields; returns how many fields were newly created."""
        return self._conn.hset(key, mapping=_field_values(args))

    def hset_nx(self, key, field, value):
        """Set a field only if it is absent; returns whether it was set."""
        return bool(self._conn.hsetnx(key, field, value))

    def hmset(self, key, *args):
        """Set fields; returns True once stored."""
        self._conn.hset(key, mapping=_field_values(args))
        return True

    def hexists(self, key, field):
        return bool(self._conn.hexists(key, field))

    def hgetall(self, key):
        """All fields and values of the hash."""
        return dict(self._conn.hgetall(key))

    def hget(self, key, field):
        """Value of a field, or None when it does not exist."""
        return self._conn.hget(key, field)

    def hmget(self, key, *args):
        """Values of several fields, with None for missing ones."""
        return list(self._conn.hmget(key, list(args)))

    def hdel(self, key, *args):
        """Remove fields; returns how many were removed."""
        return self._conn.hdel(key, *args)

    def hlen(self, key):
        return self._conn.hlen(key)

    def hincr_by(self, key, field, value):
        return self._conn.hincrby(key, field, value)

    def hincr_by_float(self, key, field, value):
        return self._conn.hincrbyfloat(key, field, value)

    def hscan(self, key, cursor, match, count):
        """One scan step; returns the next cursor and the fields found.

        An empty pattern and a non-positive count are left out of the command.
        """
        return self._conn.hscan(
            key,
            cursor=cursor,
            match=match or None,
            count=count if count > 0 else None,
        )

    def hkeys(self, key):
        return list(self._conn.hkeys(key))