"""
Wordbook routes: /api/wordbook
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from vocab.core.errors import WordValidationError
from vocab.core.wordbook import DEFAULT_USER_ID, WordbookStore
from vocab.server.deps import get_wordbook_store


router = APIRouter(prefix="/api/wordbook", tags=["wordbook"])


class AddWordRequest(BaseModel):
    word: str
    short_definition: str


@router.get("")
def list_entries(user_id: str = DEFAULT_USER_ID, store: WordbookStore = Depends(get_wordbook_store)):
    """List saved words, newest first."""
    return {"entries": [e.to_dict() for e in store.list(user_id)]}


@router.post("", status_code=201)
def add_entry(
    req: AddWordRequest,
    user_id: str = DEFAULT_USER_ID,
    store: WordbookStore = Depends(get_wordbook_store),
):
    """Save a word, or update its short definition."""
    try:
        entry = store.add(user_id, req.word, req.short_definition)
    except WordValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"entry": entry.to_dict()}


@router.delete("/{word}")
def remove_entry(word: str, user_id: str = DEFAULT_USER_ID, store: WordbookStore = Depends(get_wordbook_store)):
    """Remove a word. Removing a missing word is not an error."""
    store.remove(user_id, word)
    return {"message": "word removed from wordbook"}
