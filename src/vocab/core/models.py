# src/vocab/core/models.py
"""
Normalized dictionary entries.

A NormalizedEntry is what we cache and what we hand back to callers,
independent of whichever provider produced it. JSON keys follow the
provider's camelCase so cached payloads and API responses look the same.

    {"word": "hello",
     "phonetics": [{"text": "/həˈləʊ/", "audio": "..."}],
     "meanings": [{"partOfSpeech": "noun", "definitions": [...]}],
     "sourceUrl": "https://en.wiktionary.org/wiki/hello"}
"""

import json
from dataclasses import dataclass


def normalize_word(raw: str) -> str:
    """Trim and lowercase. Used for cache keys and provider requests."""
    return raw.strip().lower()


def _put_optional(out: dict, key: str, value) -> None:
    if value is not None:
        out[key] = value


@dataclass(frozen=True)
class Phonetic:
    text: str | None = None
    audio: str | None = None
    source_url: str | None = None

    def to_dict(self) -> dict:
        d = {}
        _put_optional(d, "text", self.text)
        _put_optional(d, "audio", self.audio)
        _put_optional(d, "sourceUrl", self.source_url)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "Phonetic":
        return cls(
            text=data.get("text"),
            audio=data.get("audio"),
            source_url=data.get("sourceUrl"),
        )


@dataclass(frozen=True)
class Definition:
    definition: str
    example: str | None = None
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        d = {"definition": self.definition}
        _put_optional(d, "example", self.example)
        d["synonyms"] = list(self.synonyms)
        d["antonyms"] = list(self.antonyms)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "Definition":
        return cls(
            definition=data["definition"],
            example=data.get("example"),
            synonyms=tuple(data.get("synonyms", [])),
            antonyms=tuple(data.get("antonyms", [])),
        )


@dataclass(frozen=True)
class Meaning:
    part_of_speech: str
    definitions: tuple[Definition, ...] = ()
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "partOfSpeech": self.part_of_speech,
            "definitions": [d.to_dict() for d in self.definitions],
            "synonyms": list(self.synonyms),
            "antonyms": list(self.antonyms),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Meaning":
        return cls(
            part_of_speech=data["partOfSpeech"],
            definitions=tuple(Definition.from_dict(d) for d in data.get("definitions", [])),
            synonyms=tuple(data.get("synonyms", [])),
            antonyms=tuple(data.get("antonyms", [])),
        )


@dataclass(frozen=True)
class NormalizedEntry:
    word: str
    phonetics: tuple[Phonetic, ...] = ()
    meanings: tuple[Meaning, ...] = ()
    source_url: str | None = None

    def __post_init__(self):
        if not self.word:
            raise ValueError("NormalizedEntry.word must be non-empty")

    def to_dict(self) -> dict:
        d = {
            "word": self.word,
            "phonetics": [p.to_dict() for p in self.phonetics],
            "meanings": [m.to_dict() for m in self.meanings],
        }
        _put_optional(d, "sourceUrl", self.source_url)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "NormalizedEntry":
        return cls(
            word=data["word"],
            phonetics=tuple(Phonetic.from_dict(p) for p in data.get("phonetics", [])),
            meanings=tuple(Meaning.from_dict(m) for m in data.get("meanings", [])),
            source_url=data.get("sourceUrl"),
        )

    def to_json_bytes(self) -> bytes:
        return json.dumps(self.to_dict(), ensure_ascii=False).encode("utf-8")

    @classmethod
    def from_json_bytes(cls, payload: bytes) -> "NormalizedEntry":
        data = json.loads(payload.decode("utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return cls.from_dict(data)
