from unittest.mock import MagicMock

import pytest

from commonkit.rdb.base import Mode
from commonkit.rdb.hashes import HashCommands


@pytest.fixture
def conn():
    return MagicMock()


@pytest.fixture
def hashes(conn):
    return HashCommands(client=conn)


def test_hset_alternating_pairs(hashes, conn):
    conn.hset.return_value = 2
    assert hashes.hset("h", "a", 1, "b", 2) == 2
    conn.hset.assert_called_once_with("h", mapping={"a": 1, "b": 2})


def test_hset_mapping(hashes, conn):
    conn.hset.return_value = 1
    assert hashes.hset("h", {"a": "x"}) == 1
    assert conn.hset.call_args.kwargs["mapping"] == {"a": "x"}


def test_hset_flat_list(hashes, conn):
    conn.hset.return_value = 2
    assert hashes.hset("h", ["a", "x", "b", "y"]) == 2
    assert conn.hset.call_args.kwargs["mapping"] == {"a": "x", "b": "y"}


@pytest.mark.parametrize("args", [(), ("a",), ("a", 1, "b"), ({},)])
def test_hset_rejects_bad_pairs(hashes, args):
    with pytest.raises(ValueError):
        hashes.hset("h", *args)


def test_hmset_returns_true(hashes, conn):
    assert hashes.hmset("h", "a", 1) is True
    assert conn.hset.call_args.kwargs["mapping"] == {"a": 1}


def test_hset_nx_is_bool(hashes, conn):
    conn.hsetnx.return_value = 0
    assert hashes.hset_nx("h", "a", 1) is False
    conn.hsetnx.return_value = 1
    assert hashes.hset_nx("h", "a", 1) is True


def test_hexists_is_bool(hashes, conn):
    conn.hexists.return_value = 1
    assert hashes.hexists("h", "a") is True
    conn.hexists.assert_called_once_with("h", "a")


def test_hget_and_getall(hashes, conn):
    conn.hget.return_value = None
    conn.hgetall.return_value = {b"a": b"1"}
    assert hashes.hget("h", "missing") is None
    assert hashes.hgetall("h") == {b"a": b"1"}


def test_hmget_passes_field_list(hashes, conn):
    conn.hmget.return_value = [b"1", None]
    assert hashes.hmget("h", "a", "b") == [b"1", None]
    conn.hmget.assert_called_once_with("h", ["a", "b"])


def test_hdel_hlen_hkeys(hashes, conn):
    conn.hdel.return_value = 2
    conn.hlen.return_value = 5
    conn.hkeys.return_value = [b"a", b"b"]
    assert hashes.hdel("h", "a", "b") == 2
    conn.hdel.assert_called_once_with("h", "a", "b")
    assert hashes.hlen("h") == 5
    assert hashes.hkeys("h") == [b"a", b"b"]


def test_increments(hashes, conn):
    conn.hincrby.return_value = 7
    conn.hincrbyfloat.return_value = 1.5
    assert hashes.hincr_by("h", "n", 3) == 7
    conn.hincrby.assert_called_once_with("h", "n", 3)
    assert hashes.hincr_by_float("h", "f", 0.5) == 1.5
    conn.hincrbyfloat.assert_called_once_with("h", "f", 0.5)


def test_hscan_omits_empty_options(hashes, conn):
    conn.hscan.return_value = (0, {b"a": b"1"})
    assert hashes.hscan("h", 0, "", 0) == (0, {b"a": b"1"})
    conn.hscan.assert_called_once_with("h", cursor=0, match=None, count=None)


def test_hscan_passes_options(hashes, conn):
    conn.hscan.return_value = (12, {})
    assert hashes.hscan("h", 4, "a*", 10) == (12, {})
    conn.hscan.assert_called_once_with("h", cursor=4, match="a*", count=10)


def test_cluster_mode_uses_cluster_connection():
    standalone, cluster = MagicMock(), MagicMock()
    cluster.hlen.return_value = 9
    hashes = HashCommands(client=standalone, cluster=cluster, mode=Mode.CLUSTER)
    assert hashes.hlen("h") == 9
    standalone.hlen.assert_not_called()