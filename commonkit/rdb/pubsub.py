"""Publish/subscribe commands."""

from __future__ import annotations

from .base import RedisBase


class PubSubCommands(RedisBase):
    """Publishing messages and subscribing to channels."""

    def publish(self, channel, message):
        """Send a message; returns the number of receivers."""
        return self._conn.publish(channel, message)

    def subscribe(self, *args):
        """Open a subscription, subscribed to the given channels if any."""
        subscription = self._conn.pubsub()
        if args:
            subscription.subscribe(*args)
        return subscription