"""
Cache maintenance routes: /api/cache
"""

from fastapi import APIRouter, Depends, HTTPException

from vocab.core.cache import DictionaryCache
from vocab.core.errors import CacheStorageError
from vocab.server.deps import get_dictionary_cache


router = APIRouter(prefix="/api/cache", tags=["cache"])


@router.post("/purge")
def purge_expired(cache: DictionaryCache = Depends(get_dictionary_cache)):
    """Delete expired cache records."""
    try:
        purged = cache.purge_expired()
    except CacheStorageError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"purged": purged}
