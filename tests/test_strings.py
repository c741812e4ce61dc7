from datetime import timedelta

from commonkit.rdb.base import Mode
from commonkit.rdb.strings import StringCommands


class Recorder:
    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self.result

        return method


def test_set_with_whole_seconds():
    rec = Recorder(result=True)
    assert StringCommands(client=rec).set("k", "v", 10) is True
    assert rec.calls == [("set", ("k", "v"), {"ex": 10})]


def test_set_without_expiration():
    rec = Recorder(result=True)
    StringCommands(client=rec).set("k", "v", 0)
    assert rec.calls == [("set", ("k", "v"), {})]


def test_set_with_milliseconds():
    rec = Recorder(result=True)
    StringCommands(client=rec).set("k", "v", timedelta(milliseconds=1500))
    assert rec.calls == [("set", ("k", "v"), {"px": 1500})]


def test_set_nx_stored():
    rec = Recorder(result=True)
    assert StringCommands(client=rec).set_nx("k", "v", 5) is True
    assert rec.calls == [("set", ("k", "v"), {"nx": True, "ex": 5})]


def test_set_nx_not_stored():
    rec = Recorder(result=None)
    assert StringCommands(client=rec).set_nx("k", "v", 0) is False


def test_get_returns_value():
    rec = Recorder(result=b"v")
    assert StringCommands(client=rec).get("k") == b"v"
    assert rec.calls == [("get", ("k",), {})]


def test_mget_passes_list():
    rec = Recorder(result=[b"1", None])
    assert StringCommands(client=rec).mget("a", "b") == [b"1", None]
    assert rec.calls == [("mget", (["a", "b"],), {})]


def test_counters_forward():
    rec = Recorder(result=7)
    commands = StringCommands(client=rec)
    commands.incr("k")
    commands.incr_by("k", 3)
    commands.incr_by_float("k", 0.5)
    assert rec.calls == [
        ("incr", ("k",), {}),
        ("incrby", ("k", 3), {}),
        ("incrbyfloat", ("k", 0.5), {}),
    ]


def test_get_set_and_rename():
    rec = Recorder(result=b"old")
    commands = StringCommands(client=rec)
    assert commands.get_set("k", "new") == b"old"
    commands.rename("k", "k2")
    assert rec.calls[-1] == ("rename", ("k", "k2"), {})


def test_cluster_mode_routes_to_cluster():
    client, cluster = Recorder(), Recorder(result=b"v")
    assert StringCommands(client=client, cluster=cluster, mode=Mode.CLUSTER).get("k") == b"v"
    assert client.calls == []