# src/vocab/core/wordbook.py
"""
Personal word list, one Redis hash per user.

    vocab:wordbook:user:<user_id>  -> hash {word: json entry}
    vocab:wordbook:seq             -> id counter
"""

import json
from dataclasses import dataclass, asdict

import redis

from vocab.core.cache import utcnow
from vocab.core.errors import WordValidationError
from vocab.core.models import normalize_word


DEFAULT_USER_ID = "default"


@dataclass
class WordbookEntry:
    id: int
    user_id: str
    word: str
    short_definition: str
    created_at: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "WordbookEntry":
        return cls(
            id=int(data["id"]),
            user_id=data["user_id"],
            word=data["word"],
            short_definition=data["short_definition"],
            created_at=data["created_at"],
        )


class WordbookStore:
    def __init__(self, client: redis.Redis, prefix: str = "vocab:wordbook"):
        self.client = client
        self.prefix = prefix

    def _user_key(self, user_id: str) -> str:
        return f"{self.prefix}:user:{user_id}"

    def _seq_key(self) -> str:
        return f"{self.prefix}:seq"

    def add(self, user_id: str, word: str, short_definition: str) -> WordbookEntry:
        """Insert, or update the definition of an existing (user_id, word)."""
        word = normalize_word(word)
        if not word:
            raise WordValidationError("word cannot be empty")
        if not short_definition.strip():
            raise WordValidationError("short_definition cannot be empty")

        key = self._user_key(user_id)

        def upsert(pipe) -> WordbookEntry:
            existing = pipe.hget(key, word)
            if existing is not None:
                entry = WordbookEntry.from_dict(json.loads(existing))
                entry.short_definition = short_definition
            else:
                entry = WordbookEntry(
                    id=int(pipe.incr(self._seq_key())),
                    user_id=user_id,
                    word=word,
                    short_definition=short_definition,
                    created_at=utcnow().isoformat(),
                )
            pipe.multi()
            pipe.hset(key, word, json.dumps(entry.to_dict()))
            return entry

        return self.client.transaction(upsert, key, value_from_callable=True)

    def remove(self, user_id: str, word: str) -> bool:
        return bool(self.client.hdel(self._user_key(user_id), normalize_word(word)))

    def contains(self, user_id: str, word: str) -> bool:
        return bool(self.client.hexists(self._user_key(user_id), normalize_word(word)))

    def list(self, user_id: str) -> list[WordbookEntry]:
        """All entries for a user, newest first."""
        rows = self.client.hvals(self._user_key(user_id))
        entries = [WordbookEntry.from_dict(json.loads(r)) for r in rows]
        return sorted(entries, key=lambda e: (e.created_at, e.id), reverse=True)
