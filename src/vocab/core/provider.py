# src/vocab/core/provider.py
"""
Upstream dictionary provider (Free Dictionary API).

The raw response is validated into pydantic models first, then turned into
a NormalizedEntry by normalize_entry(), which has no side effects.
"""

import logging
from typing import Protocol
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from vocab.core.errors import UpstreamError, WordNotFoundError
from vocab.core.models import Definition, Meaning, NormalizedEntry, Phonetic
from vocab.core.settings import DEFAULT_DICT_API_URL


logger = logging.getLogger(__name__)

FREE_DICTIONARY_SOURCE = "freedictionaryapi"


# === Provider response schema ===

class _ProviderModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ProviderPhonetic(_ProviderModel):
    text: str | None = None
    audio: str | None = None
    source_url: str | None = Field(default=None, alias="sourceUrl")


# The API sends null or omits fields it has no data for; those read as empty.

class ProviderDefinition(_ProviderModel):
    definition: str = ""
    example: str | None = None
    synonyms: list[str] = []
    antonyms: list[str] = []

    @field_validator("definition", mode="before")
    @classmethod
    def null_definition(cls, value):
        return "" if value is None else value

    @field_validator("synonyms", "antonyms", mode="before")
    @classmethod
    def null_lists(cls, value):
        return [] if value is None else value


class ProviderMeaning(_ProviderModel):
    part_of_speech: str = Field(default="", alias="partOfSpeech")
    definitions: list[ProviderDefinition] = []
    synonyms: list[str] = []
    antonyms: list[str] = []

    @field_validator("part_of_speech", mode="before")
    @classmethod
    def null_part_of_speech(cls, value):
        return "" if value is None else value

    @field_validator("definitions", "synonyms", "antonyms", mode="before")
    @classmethod
    def null_lists(cls, value):
        return [] if value is None else value


class ProviderEntry(_ProviderModel):
    word: str = ""
    phonetics: list[ProviderPhonetic] = []
    meanings: list[ProviderMeaning] = []
    source_urls: list[str] = Field(default=[], alias="sourceUrls")

    @field_validator("phonetics", "meanings", "source_urls", mode="before")
    @classmethod
    def null_lists(cls, value):
        return [] if value is None else value


_ENTRIES = TypeAdapter(list[ProviderEntry])


def parse_entries(body: bytes | str) -> list[ProviderEntry]:
    """Validate a raw provider body. Raises pydantic.ValidationError."""
    return _ENTRIES.validate_json(body)


def normalize_entry(word: str, entry: ProviderEntry) -> NormalizedEntry:
    """Map one provider entry onto a NormalizedEntry, keeping order."""
    return NormalizedEntry(
        word=word,
        phonetics=tuple(
            Phonetic(text=p.text, audio=p.audio, source_url=p.source_url)
            for p in entry.phonetics
        ),
        meanings=tuple(
            Meaning(
                part_of_speech=m.part_of_speech,
                definitions=tuple(
                    Definition(
                        definition=d.definition,
                        example=d.example,
                        synonyms=tuple(d.synonyms),
                        antonyms=tuple(d.antonyms),
                    )
                    for d in m.definitions
                ),
                synonyms=tuple(m.synonyms),
                antonyms=tuple(m.antonyms),
            )
            for m in entry.meanings
        ),
        source_url=entry.source_urls[0] if entry.source_urls else None,
    )


# === Providers ===

class DictionaryProvider(Protocol):
    """Anything that can fetch raw entries for a normalized word."""
    source: str

    def fetch(self, word: str) -> list[ProviderEntry]: ...


class FreeDictionaryProvider:
    """Client for https://dictionaryapi.dev.

    The httpx client is injected; its timeout bounds every request.
    """

    source = FREE_DICTIONARY_SOURCE

    def __init__(self, http: httpx.Client, base_url: str = DEFAULT_DICT_API_URL):
        self.http = http
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"

    def fetch(self, word: str) -> list[ProviderEntry]:
        url = self.base_url + quote(word, safe="")
        logger.info("fetching '%s' from %s", word, self.source)

        try:
            response = self.http.get(url)
        except httpx.TimeoutException as e:
            raise UpstreamError(f"dictionary API timed out for '{word}'") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"dictionary API request failed: {e}") from e

        if response.status_code == 404:
            raise WordNotFoundError(word)
        if not response.is_success:
            raise UpstreamError(f"dictionary API returned status {response.status_code}")

        try:
            return parse_entries(response.content)
        except ValidationError as e:
            raise UpstreamError(f"malformed dictionary API response for '{word}': {e}") from e
