# src/vocab/core/lookup.py
"""
Cache-aside dictionary lookup.

    validate -> cache get -> hit: decode and return
                          -> miss: fetch -> normalize -> cache write -> return

One synchronous pass, no retries. Cache writes are best-effort: a failed
write is logged and the freshly fetched entry is still returned.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from vocab.core.cache import CacheWriteResult, DictionaryCache
from vocab.core.errors import CorruptCacheEntryError, UpstreamError, WordValidationError
from vocab.core.models import NormalizedEntry, normalize_word
from vocab.core.provider import DictionaryProvider, normalize_entry


logger = logging.getLogger(__name__)

CACHE_TTL = timedelta(days=7)


@dataclass(frozen=True)
class LookupResult:
    entry: NormalizedEntry
    from_cache: bool
    cache_write: CacheWriteResult | None = None


class LookupService:
    def __init__(self, cache: DictionaryCache, provider: DictionaryProvider):
        self.cache = cache
        self.provider = provider

    def lookup(self, raw_word: str) -> NormalizedEntry:
        """Return the normalized entry for raw_word."""
        return self.resolve(raw_word).entry

    def resolve(self, raw_word: str) -> LookupResult:
        """Like lookup, but also reports whether the cache served the entry."""
        word = normalize_word(raw_word)
        if not word:
            raise WordValidationError("word cannot be empty")

        record = self.cache.get(word)
        if record is not None:
            try:
                entry = NormalizedEntry.from_json_bytes(record.payload)
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                raise CorruptCacheEntryError(word, e) from e
            logger.debug("cache hit for '%s'", word)
            return LookupResult(entry=entry, from_cache=True)

        logger.debug("cache miss for '%s'", word)
        entries = self.provider.fetch(word)
        if not entries:
            raise UpstreamError(f"empty response from dictionary API for '{word}'")

        # Homographs beyond the first entry are dropped.
        entry = normalize_entry(word, entries[0])

        write = self.cache.try_upsert(word, entry.to_json_bytes(), self.provider.source, CACHE_TTL)
        if not write.ok:
            logger.warning("failed to cache dictionary entry for '%s': %s", word, write.error)

        return LookupResult(entry=entry, from_cache=False, cache_write=write)
