# tests/test_cache.py
"""Tests for the Redis dictionary cache."""

from datetime import timedelta

import fakeredis
import pytest

from vocab.core.cache import DictionaryCache
from vocab.core.errors import CacheStorageError, CorruptCacheEntryError


TTL = timedelta(days=7)


@pytest.fixture
def cache(client, clock):
    return DictionaryCache(client, prefix="test:dict", now=clock)


def test_get_missing(cache):
    assert cache.get("hello") is None


def test_upsert_then_get(cache, clock):
    written = cache.upsert("hello", b'{"word": "hello"}', "fake", TTL)
    record = cache.get("hello")

    assert record == written
    assert record.payload == b'{"word": "hello"}'
    assert record.source == "fake"
    assert record.fetched_at == clock.current
    assert record.expires_at == clock.current + TTL


def test_valid_just_before_expiry(cache, clock):
    cache.upsert("hello", b"{}", "fake", TTL)
    clock.advance(days=7, microseconds=-1)
    assert cache.get("hello") is not None


def test_expired_at_exact_boundary(cache, clock):
    cache.upsert("hello", b"{}", "fake", TTL)
    clock.advance(days=7)
    assert cache.get("hello") is None


def test_expired_after_boundary(cache, clock):
    cache.upsert("hello", b"{}", "fake", TTL)
    clock.advance(days=8)
    assert cache.get("hello") is None


def test_upsert_overwrites_all_fields(cache, clock):
    cache.upsert("hello", b"old", "first", TTL)
    clock.advance(days=3)
    cache.upsert("hello", b"new", "second", timedelta(hours=1))

    record = cache.get("hello")
    assert record.payload == b"new"
    assert record.source == "second"
    assert record.fetched_at == clock.current
    assert record.expires_at == clock.current + timedelta(hours=1)


def test_upsert_rejects_non_positive_ttl(cache):
    with pytest.raises(ValueError):
        cache.upsert("hello", b"{}", "fake", timedelta(0))


def test_delete(cache):
    cache.upsert("hello", b"{}", "fake", TTL)
    cache.delete("hello")
    assert cache.get("hello") is None


def test_get_rejects_incomplete_record(cache, client):
    client.hset("test:dict:entry:hello", mapping={"payload": b"{}", "source": "fake"})
    with pytest.raises(CorruptCacheEntryError):
        cache.get("hello")


# === Purge ===

def test_purge_removes_only_expired(cache, clock, client):
    cache.upsert("old", b"{}", "fake", timedelta(hours=1))
    cache.upsert("fresh", b"{}", "fake", TTL)
    clock.advance(hours=2)

    assert cache.purge_expired() == 1
    assert not client.exists("test:dict:entry:old")
    assert client.exists("test:dict:entry:fresh")
    assert client.zscore("test:dict:expiry", "old") is None
    assert cache.get("fresh") is not None


def test_purge_nothing_expired(cache):
    cache.upsert("hello", b"{}", "fake", TTL)
    assert cache.purge_expired() == 0


def test_purge_keeps_record_rewritten_after_index_entry(cache, clock, client):
    # Index says expired, but the hash itself was rewritten with a later expiry.
    cache.upsert("hello", b"{}", "fake", TTL)
    client.zadd("test:dict:expiry", {"hello": (clock.current - timedelta(days=1)).timestamp()})

    assert cache.purge_expired() == 0
    assert cache.get("hello") is not None
    assert client.zscore("test:dict:expiry", "hello") == (clock.current + TTL).timestamp()


def test_purge_drops_dangling_index_members(cache, clock, client):
    client.zadd("test:dict:expiry", {"ghost": (clock.current - timedelta(days=1)).timestamp()})

    assert cache.purge_expired() == 0
    assert client.zscore("test:dict:expiry", "ghost") is None


def test_purge_removes_record_with_unreadable_expiry(cache, clock, client):
    client.hset("test:dict:entry:hello", mapping={
        "payload": b"{}",
        "source": "fake",
        "fetched_at": "0",
        "expires_at": "garbage",
    })
    client.zadd("test:dict:expiry", {"hello": (clock.current - timedelta(days=1)).timestamp()})

    assert cache.purge_expired() == 1
    assert not client.exists("test:dict:entry:hello")
    assert client.zscore("test:dict:expiry", "hello") is None


# === Storage faults ===

@pytest.fixture
def broken_cache(clock):
    server = fakeredis.FakeServer()
    server.connected = False
    return DictionaryCache(fakeredis.FakeRedis(server=server), prefix="test:dict", now=clock)


def test_get_storage_fault(broken_cache):
    with pytest.raises(CacheStorageError):
        broken_cache.get("hello")


def test_upsert_storage_fault(broken_cache):
    with pytest.raises(CacheStorageError):
        broken_cache.upsert("hello", b"{}", "fake", TTL)


def test_try_upsert_reports_fault(broken_cache):
    result = broken_cache.try_upsert("hello", b"{}", "fake", TTL)
    assert not result.ok
    assert result.record is None
    assert isinstance(result.error, CacheStorageError)


def test_try_upsert_success(cache):
    result = cache.try_upsert("hello", b"{}", "fake", TTL)
    assert result.ok
    assert result.record.key == "hello"


def test_purge_storage_fault(broken_cache):
    with pytest.raises(CacheStorageError):
        broken_cache.purge_expired()
