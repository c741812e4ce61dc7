from unittest.mock import MagicMock

import pytest

from commonkit.rdb.sortedsets import SortedSetCommands, Z, ZRangeBy


@pytest.fixture
def conn():
    return MagicMock()


@pytest.fixture
def zsets(conn):
    return SortedSetCommands(client=conn)


def test_zadd_builds_score_mapping(zsets, conn):
    conn.zadd.return_value = 2
    assert zsets.zadd("z", Z(1.0, "a"), Z(2.5, "b")) == 2
    conn.zadd.assert_called_once_with("z", {"a": 1.0, "b": 2.5})


def test_zadd_requires_members(zsets):
    with pytest.raises(ValueError):
        zsets.zadd("z")


def test_zadd_rejects_non_z(zsets):
    with pytest.raises(TypeError):
        zsets.zadd("z", ("a", 1.0))


def test_zrange_with_scores_converts(zsets, conn):
    conn.zrange.return_value = [(b"a", 1.0), (b"b", 2.0)]
    assert zsets.zrange_with_scores("z", 0, -1) == [Z(1.0, b"a"), Z(2.0, b"b")]
    conn.zrange.assert_called_once_with("z", 0, -1, withscores=True)


def test_zrevrange_with_scores_converts(zsets, conn):
    conn.zrevrange.return_value = [(b"b", 2.0)]
    assert zsets.zrevrange_with_scores("z", 0, 0) == [Z(2.0, b"b")]
    conn.zrevrange.assert_called_once_with("z", 0, 0, withscores=True)


def test_plain_ranges(zsets, conn):
    conn.zrange.return_value = [b"a"]
    conn.zrevrange.return_value = [b"b"]
    assert zsets.zrange("z", 0, 1) == [b"a"]
    assert zsets.zrevrange("z", 0, 1) == [b"b"]


def test_range_by_score_without_window(zsets, conn):
    conn.zrangebyscore.return_value = [b"a"]
    assert zsets.zrange_by_score("z", ZRangeBy(min="1", max="5")) == [b"a"]
    conn.zrangebyscore.assert_called_once_with("z", "1", "5")


def test_range_by_score_with_window(zsets, conn):
    conn.zrangebyscore.return_value = [b"c", b"d"]
    result = zsets.zrange_by_score("z", ZRangeBy(min="(1", max="+inf", offset=2, count=3))
    assert result == [b"c", b"d"]
    conn.zrangebyscore.assert_called_once_with("z", "(1", "+inf", start=2, num=3)


def test_rev_range_by_score_swaps_bounds(zsets, conn):
    conn.zrevrangebyscore.return_value = [b"b", b"a"]
    assert zsets.zrevrange_by_score("z", ZRangeBy(min="0", max="9", count=2)) == [b"b", b"a"]
    conn.zrevrangebyscore.assert_called_once_with("z", "9", "0", start=0, num=2)


def test_default_bounds_cover_everything():
    opt = ZRangeBy()
    assert (opt.min, opt.max) == ("-inf", "+inf")


def test_score_rank_and_counts(zsets, conn):
    conn.zscore.return_value = None
    conn.zrank.return_value = 0
    conn.zrevrank.return_value = 4
    conn.zcard.return_value = 5
    conn.zcount.return_value = 3
    conn.zincrby.return_value = 4.0
    conn.zrem.return_value = 1
    assert zsets.zscore("z", "missing") is None
    assert zsets.zrank("z", "a") == 0
    assert zsets.zrevrank("z", "a") == 4
    assert zsets.zcard("z") == 5
    assert zsets.zcount("z", "-inf", "+inf") == 3
    conn.zcount.assert_called_once_with("z", "-inf", "+inf")
    assert zsets.zincr_by("z", 1.5, "a") == 4.0
    conn.zincrby.assert_called_once_with("z", 1.5, "a")
    assert zsets.zrem("z", "a") == 1