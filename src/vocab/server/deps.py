"""
Shared dependencies for routes.

Clients are built once per process and handed to the stores and the lookup
service at construction time. Tests replace any of these through
app.dependency_overrides.
"""

from functools import lru_cache

import httpx
import redis
from fastapi import Depends

from vocab.core.cache import DictionaryCache
from vocab.core.lookup import LookupService
from vocab.core.provider import FreeDictionaryProvider
from vocab.core.settings import Settings
from vocab.core.wordbook import WordbookStore


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache
def get_redis() -> redis.Redis:
    settings = get_settings()
    return redis.Redis.from_url(
        settings.redis_url,
        socket_timeout=settings.redis_timeout_s,
        socket_connect_timeout=settings.redis_timeout_s,
    )


@lru_cache
def get_http_client() -> httpx.Client:
    return httpx.Client(timeout=get_settings().http_timeout_s)


def get_dictionary_cache(client: redis.Redis = Depends(get_redis)) -> DictionaryCache:
    return DictionaryCache(client, prefix=get_settings().cache_prefix)


def get_wordbook_store(client: redis.Redis = Depends(get_redis)) -> WordbookStore:
    return WordbookStore(client, prefix=get_settings().wordbook_prefix)


def get_provider(http: httpx.Client = Depends(get_http_client)) -> FreeDictionaryProvider:
    return FreeDictionaryProvider(http, base_url=get_settings().dict_api_url)


def get_lookup_service(
    cache: DictionaryCache = Depends(get_dictionary_cache),
    provider: FreeDictionaryProvider = Depends(get_provider),
) -> LookupService:
    return LookupService(cache, provider)
