# src/vocab/core/cache.py
"""
Dictionary cache stored in Redis.

Each word gets one hash holding the serialized entry plus provenance and
expiry, and a sorted set indexes words by expiry so expired rows can be
swept:

    vocab:dict:entry:hello  -> {payload, source, fetched_at, expires_at}
    vocab:dict:expiry       -> zset {hello: <expires_at epoch>}

A record is valid only while now < expires_at. Expired rows read as a miss
whether or not the sweep has removed them yet.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

import redis

from vocab.core.errors import CacheStorageError, CorruptCacheEntryError


logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _from_epoch(value: float) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)


@dataclass(frozen=True)
class CacheRecord:
    key: str
    payload: bytes
    source: str
    fetched_at: datetime
    expires_at: datetime

    def is_valid(self, at: datetime) -> bool:
        return at < self.expires_at


@dataclass(frozen=True)
class CacheWriteResult:
    """Outcome of a best-effort cache write."""
    key: str
    record: CacheRecord | None = None
    error: CacheStorageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DictionaryCache:
    """Cache-aside store for normalized dictionary entries."""

    def __init__(
        self,
        client: redis.Redis,
        prefix: str = "vocab:dict",
        now: Callable[[], datetime] = utcnow,
    ):
        self.client = client
        self.prefix = prefix
        self._now = now

    def _entry_key(self, word: str) -> str:
        return f"{self.prefix}:entry:{word}"

    def _index_key(self) -> str:
        return f"{self.prefix}:expiry"

    def get(self, word: str) -> CacheRecord | None:
        """Return the record for word if it has not expired, else None."""
        try:
            row = self.client.hgetall(self._entry_key(word))
        except redis.RedisError as e:
            raise CacheStorageError(f"cache read failed for '{word}': {e}") from e

        if not row:
            return None

        try:
            record = CacheRecord(
                key=word,
                payload=row[b"payload"],
                source=row[b"source"].decode(),
                fetched_at=_from_epoch(float(row[b"fetched_at"])),
                expires_at=_from_epoch(float(row[b"expires_at"])),
            )
        except (KeyError, ValueError, UnicodeDecodeError) as e:
            raise CorruptCacheEntryError(word, e) from e

        if not record.is_valid(self._now()):
            return None
        return record

    def upsert(self, word: str, payload: bytes, source: str, ttl: timedelta) -> CacheRecord:
        """Write or fully replace the record for word in one transaction."""
        if ttl <= timedelta(0):
            raise ValueError(f"ttl must be positive, got {ttl}")

        fetched_at = self._now()
        expires_at = fetched_at + ttl
        key = self._entry_key(word)

        pipe = self.client.pipeline(transaction=True)
        pipe.delete(key)
        pipe.hset(key, mapping={
            "payload": payload,
            "source": source,
            "fetched_at": repr(fetched_at.timestamp()),
            "expires_at": repr(expires_at.timestamp()),
        })
        pipe.zadd(self._index_key(), {word: expires_at.timestamp()})
        try:
            pipe.execute()
        except redis.RedisError as e:
            raise CacheStorageError(f"cache write failed for '{word}': {e}") from e

        return CacheRecord(word, payload, source, fetched_at, expires_at)

    def try_upsert(self, word: str, payload: bytes, source: str, ttl: timedelta) -> CacheWriteResult:
        """Like upsert, but storage faults are returned instead of raised."""
        try:
            record = self.upsert(word, payload, source, ttl)
        except CacheStorageError as e:
            return CacheWriteResult(key=word, error=e)
        return CacheWriteResult(key=word, record=record)

    def delete(self, word: str) -> None:
        pipe = self.client.pipeline(transaction=True)
        pipe.delete(self._entry_key(word))
        pipe.zrem(self._index_key(), word)
        try:
            pipe.execute()
        except redis.RedisError as e:
            raise CacheStorageError(f"cache delete failed for '{word}': {e}") from e

    def purge_expired(self) -> int:
        """Delete records that expired before this call started.

        Each candidate is re-checked under WATCH, so a record rewritten while
        the sweep runs is left alone.
        """
        cutoff = self._now().timestamp()
        try:
            members = self.client.zrangebyscore(self._index_key(), "-inf", f"({cutoff!r}")
            purged = 0
            for member in members:
                word = member.decode() if isinstance(member, bytes) else member
                if self._purge_one(word, cutoff):
                    purged += 1
        except redis.RedisError as e:
            raise CacheStorageError(f"cache purge failed: {e}") from e

        if purged:
            logger.info("purged %d expired cache records", purged)
        return purged

    def _purge_one(self, word: str, cutoff: float) -> bool:
        key = self._entry_key(word)
        index = self._index_key()

        def purge(pipe) -> bool:
            raw = pipe.hget(key, "expires_at")
            pipe.multi()
            if raw is None:
                # hash already gone, drop the dangling index member
                pipe.zrem(index, word)
                return False
            try:
                expires_at = float(raw)
            except ValueError:
                # unreadable expiry can never be served, drop the record
                logger.warning("purging cache record '%s' with bad expiry %r", word, raw)
                pipe.delete(key)
                pipe.zrem(index, word)
                return True
            if expires_at >= cutoff:
                # rewritten since it was indexed, refresh the stale score
                pipe.zadd(index, {word: expires_at})
                return False
            pipe.delete(key)
            pipe.zrem(index, word)
            return True

        return self.client.transaction(purge, key, value_from_callable=True)
