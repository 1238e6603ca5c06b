import time
from datetime import timedelta

import pytest

from pokedexcli.cache import Cache


@pytest.mark.parametrize(
    ("key", "val"),
    [("key1", b"val1"), ("key2", b"val2")],
)
def test_add_get(key, val):
    with Cache(60) as cache:
        cache.add(key, val)
        assert cache.get(key) == val


def test_reap():
    interval = 0.01
    with Cache(interval) as cache:
        cache.add("key1", b"val1")
        assert cache.get("key1") == b"val1"
        time.sleep(interval * 5)
        assert cache.get("key1") is None


def test_get_missing_key():
    with Cache(timedelta(minutes=1)) as cache:
        assert cache.get("missing") is None


def test_add_replaces_existing_value():
    with Cache(60) as cache:
        cache.add("key1", b"old")
        cache.add("key1", b"new")
        assert cache.get("key1") == b"new"
        assert len(cache) == 1


def test_fresh_entries_survive_reaping():
    with Cache(60) as cache:
        cache.add("key1", b"val1")
        cache._reap()
        assert "key1" in cache


def test_timedelta_interval_is_converted():
    with Cache(timedelta(milliseconds=250)) as cache:
        assert cache.interval == pytest.approx(0.25)


@pytest.mark.parametrize("interval", [0, -1, timedelta(0)])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)


def test_close_stops_reaper():
    cache = Cache(60)
    cache.close()
    assert not cache._reaper.is_alive()