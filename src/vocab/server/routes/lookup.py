"""
Dictionary lookup route: /api/dict
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from vocab.core.errors import (
    CacheStorageError,
    CorruptCacheEntryError,
    UpstreamError,
    WordNotFoundError,
    WordValidationError,
)
from vocab.core.lookup import LookupService
from vocab.core.wordbook import DEFAULT_USER_ID, WordbookStore
from vocab.server.deps import get_lookup_service, get_wordbook_store


router = APIRouter(prefix="/api/dict", tags=["dict"])


@router.get("")
def lookup_word(
    word: str = Query(..., description="Word to look up"),
    user_id: str = DEFAULT_USER_ID,
    service: LookupService = Depends(get_lookup_service),
    wordbook: WordbookStore = Depends(get_wordbook_store),
):
    """Look up a word, serving from cache when possible."""
    try:
        result = service.resolve(word)
    except CorruptCacheEntryError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except WordValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except WordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except CacheStorageError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return {
        "entry": result.entry.to_dict(),
        "in_wordbook": wordbook.contains(user_id, result.entry.word),
        "cached": result.from_cache,
    }
