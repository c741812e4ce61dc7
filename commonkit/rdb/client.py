"""Redis client covering every command group, for a single server or a cluster."""

from __future__ import annotations

from redis import Redis
from redis.cluster import ClusterNode, RedisCluster

from .base import Mode, Options
from .bloom import BloomCommands
from .hashes import HashCommands
from .hyperloglog import HyperLogLogCommands
from .keys import KeyCommands
from .lists import ListCommands
from .pubsub import PubSubCommands
from .sets import SetCommands
from .sortedsets import SortedSetCommands
from .strings import StringCommands

_DEFAULT_PORT = 6379
_CONNECT_TIMEOUT = 5.0


class RedisClient(
    KeyCommands,
    StringCommands,
    ListCommands,
    PubSubCommands,
    BloomCommands,
    HyperLogLogCommands,
    HashCommands,
    SetCommands,
    SortedSetCommands,
):
    """All command groups over one standalone or cluster connection."""


def _address(host: str) -> tuple[str, int]:
    name, sep, port = host.rpartition(":")
    if not sep or "]" in port:
        return host.strip("[]"), _DEFAULT_PORT
    return name.strip("[]"), int(port)


def _socket_timeout(opt: Options) -> float | None:
    timeouts = [t for t in (opt.read_timeout, opt.write_timeout) if t]
    return max(timeouts) if timeouts else None


def init_redis(opt):
    """Connect according to the options and check the connection with a ping.

    Any mode other than cluster connects to the first host alone.
    Connection failures propagate as the redis library's exceptions.
    """
    if not opt.host:
        raise ValueError("at least one host is required")
    timeout = _socket_timeout(opt)
    if opt.mode == Mode.CLUSTER:
        nodes = [ClusterNode(*_address(host)) for host in opt.host]
        cluster = RedisCluster(
            startup_nodes=nodes,
            password=opt.password,
            socket_timeout=timeout,
            socket_connect_timeout=_CONNECT_TIMEOUT,
        )
        cluster.ping()
        return RedisClient(cluster=cluster, mode=opt.mode)
    name, port = _address(opt.host[0])
    client = Redis(
        host=name,
        port=port,
        db=opt.db,
        password=opt.password,
        socket_timeout=timeout,
        socket_connect_timeout=_CONNECT_TIMEOUT,
    )
    client.ping()
    return RedisClient(client=client, mode=opt.mode)