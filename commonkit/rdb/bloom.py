"""Bloom filter module commands."""

from __future__ import annotations

from dataclasses import dataclass

from .base import RedisBase


@dataclass
class BFReserveOptions:
    """Parameters for creating a bloom filter."""

    capacity: int = 0
    error: float = 0.0
    expansion: int = 0
    non_scaling: bool = False


def _status(reply) -> str:
    if reply is True:
        return "OK"
    if isinstance(reply, bytes):
        return reply.decode("utf-8")
    return str(reply)


class BloomCommands(RedisBase):
    """Adding to, querying and creating bloom filters."""

    def bf_add(self, key, element):
        """Add an element; returns whether it was newly added."""
        return bool(self._conn.execute_command("BF.ADD", key, element))

    def bf_exists(self, key, element):
        """Whether the element may be in the filter."""
        return bool(self._conn.execute_command("BF.EXISTS", key, element))

    def bf_reserve_with_args(self, key, options):
        """Create a filter with the given options; returns the status reply."""
        args = ["BF.RESERVE", key]
        if options is not None:
            args += [options.error, options.capacity]
            if options.expansion != 0:
                args += ["EXPANSION", options.expansion]
            if options.non_scaling:
                args.append("NONSCALING")
        return _status(self._conn.execute_command(*args))

    def bf_card(self, key):
        """Number of items added to the filter."""
        return int(self._conn.execute_command("BF.CARD", key))