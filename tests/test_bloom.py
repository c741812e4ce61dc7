from commonkit.rdb.base import Mode
from commonkit.rdb.bloom import BFReserveOptions, BloomCommands


class Recorder:
    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self.result

        return method


def test_bf_add_new_element():
    rec = Recorder(result=1)
    assert BloomCommands(client=rec).bf_add("bf", "x") is True
    assert rec.calls == [("execute_command", ("BF.ADD", "bf", "x"), {})]


def test_bf_exists_absent():
    rec = Recorder(result=0)
    assert BloomCommands(client=rec).bf_exists("bf", "x") is False
    assert rec.calls == [("execute_command", ("BF.EXISTS", "bf", "x"), {})]


def test_bf_reserve_with_all_options():
    rec = Recorder(result=b"OK")
    options = BFReserveOptions(capacity=1000, error=0.01, expansion=2, non_scaling=True)
    assert BloomCommands(client=rec).bf_reserve_with_args("bf", options) == "OK"
    assert rec.calls == [
        (
            "execute_command",
            ("BF.RESERVE", "bf", 0.01, 1000, "EXPANSION", 2, "NONSCALING"),
            {},
        )
    ]


def test_bf_reserve_omits_unset_options():
    rec = Recorder(result="OK")
    options = BFReserveOptions(capacity=500, error=0.1)
    BloomCommands(client=rec).bf_reserve_with_args("bf", options)
    assert rec.calls == [("execute_command", ("BF.RESERVE", "bf", 0.1, 500), {})]


def test_bf_reserve_without_options():
    rec = Recorder(result="OK")
    BloomCommands(client=rec).bf_reserve_with_args("bf", None)
    assert rec.calls == [("execute_command", ("BF.RESERVE", "bf"), {})]


def test_bf_card():
    rec = Recorder(result=7)
    assert BloomCommands(client=rec).bf_card("bf") == 7
    assert rec.calls == [("execute_command", ("BF.CARD", "bf"), {})]


def test_cluster_mode_routes_to_cluster():
    client, cluster = Recorder(), Recorder(result=1)
    BloomCommands(client=client, cluster=cluster, mode=Mode.CLUSTER).bf_add("bf", "x")
    assert client.calls == []
    assert len(cluster.calls) == 1