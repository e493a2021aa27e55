"""
HTTP client for the Vocab API.
"""

from urllib.parse import quote

import httpx

from vocab.core.settings import Settings


def base_url() -> str:
    return Settings.from_env().api_url.rstrip("/")


def _raise_for_status(r: httpx.Response) -> None:
    if r.is_error:
        try:
            detail = r.json().get("detail", r.text)
        except ValueError:
            detail = r.text
        raise httpx.HTTPStatusError(f"{r.status_code}: {detail}", request=r.request, response=r)


# === Dictionary ===

def lookup(word: str, user_id: str = "default") -> dict:
    r = httpx.get(f"{base_url()}/dict", params={"word": word, "user_id": user_id}, timeout=30)
    _raise_for_status(r)
    return r.json()


# === Wordbook ===

def list_wordbook(user_id: str = "default") -> list[dict]:
    r = httpx.get(f"{base_url()}/wordbook", params={"user_id": user_id})
    _raise_for_status(r)
    return r.json()["entries"]


def add_to_wordbook(word: str, short_definition: str, user_id: str = "default") -> dict:
    payload = {"word": word, "short_definition": short_definition}
    r = httpx.post(f"{base_url()}/wordbook", json=payload, params={"user_id": user_id})
    _raise_for_status(r)
    return r.json()["entry"]


def remove_from_wordbook(word: str, user_id: str = "default") -> dict:
    path = quote(word, safe="")
    r = httpx.delete(f"{base_url()}/wordbook/{path}", params={"user_id": user_id})
    _raise_for_status(r)
    return r.json()


# === Cache ===

def purge_cache() -> dict:
    r = httpx.post(f"{base_url()}/cache/purge", timeout=120)
    _raise_for_status(r)
    return r.json()
