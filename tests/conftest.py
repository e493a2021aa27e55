"""Shared fixtures: a fake redis client, a controllable clock, a fake provider."""

import json
from datetime import datetime, timedelta, timezone

import fakeredis
import pytest

from vocab.core.provider import parse_entries


HELLO_RESPONSE = [
    {
        "word": "hello",
        "phonetic": "/həˈləʊ/",
        "phonetics": [
            {"text": "/həˈləʊ/", "audio": "https://example.com/hello-uk.mp3"},
            {"text": "/həˈloʊ/", "audio": "", "sourceUrl": "https://commons.wikimedia.org/hello"},
        ],
        "meanings": [
            {
                "partOfSpeech": "exclamation",
                "definitions": [
                    {"definition": "used as a greeting", "example": "hello there, Katie!",
                     "synonyms": ["hi", "hey"], "antonyms": []},
                    {"definition": "used to attract attention", "synonyms": [], "antonyms": ["bye"]},
                ],
                "synonyms": ["greeting"],
                "antonyms": ["goodbye"],
            }
        ],
        "license": {"name": "CC BY-SA 3.0"},
        "sourceUrls": ["https://en.wiktionary.org/wiki/hello", "https://example.com/hello"],
    },
    {
        "word": "hello",
        "phonetics": [],
        "meanings": [{"partOfSpeech": "noun", "definitions": [{"definition": "an utterance of hello"}]}],
        "sourceUrls": [],
    },
]


class Clock:
    """Callable clock that tests move by hand."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class FakeProvider:
    """Records every fetch; returns canned entries or raises a canned error."""

    source = "fake"

    def __init__(self, body=HELLO_RESPONSE, error: Exception | None = None):
        self.entries = parse_entries(json.dumps(body))
        self.error = error
        self.calls = []

    def fetch(self, word: str):
        self.calls.append(word)
        if self.error is not None:
            raise self.error
        return self.entries


@pytest.fixture
def client():
    # one server per test
    return fakeredis.FakeRedis(server=fakeredis.FakeServer())


@pytest.fixture
def clock():
    return Clock()
