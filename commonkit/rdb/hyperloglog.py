"""HyperLogLog commands."""

from __future__ import annotations

from .base import RedisBase


class HyperLogLogCommands(RedisBase):
    """Approximate distinct counting."""

    def pf_add(self, key, *args):
        """Add elements; returns 1 if the estimate changed."""
        return self._conn.pfadd(key, *args)

    def pf_count(self, *args):
        """Approximate number of distinct elements across the keys."""
        return self._conn.pfcount(*args)