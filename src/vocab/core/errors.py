# src/vocab/core/errors.py
"""
Error taxonomy for dictionary lookups.

Callers can tell "this word does not exist" (WordNotFoundError) apart from
"we could not reach or understand the provider" (UpstreamError).
"""


class VocabError(Exception):
    """Base class for all lookup errors."""


class WordValidationError(VocabError):
    """Input or cached data failed validation."""


class CorruptCacheEntryError(WordValidationError):
    """A cached payload could not be decoded."""

    def __init__(self, word: str, cause: Exception):
        super().__init__(f"corrupt cache entry for '{word}': {cause}")
        self.word = word


class WordNotFoundError(VocabError):
    def __init__(self, word: str):
        super().__init__(f"word not found: {word}")
        self.word = word


class UpstreamError(VocabError):
    """Transport failure, bad status, or unusable body from the provider."""


class CacheStorageError(VocabError):
    """Redis fault while reading or writing the cache."""
