"""Normalizador de posts (API pública de WordPress con `_embed`).

El registro crudo trae las relaciones embebidas en `_embedded`:
- `author`: lista con el autor (`name`, `avatar_urls`).
- `wp:term`: lista de grupos de términos (categorías y etiquetas mezcladas).
- `wp:featuredmedia`: imagen destacada (`source_url`).

Cualquier relación puede faltar; el resultado usa valores por defecto en vez
de fallar.
"""

from __future__ import annotations

import math
from typing import Any
from urllib.parse import quote

import httpx

from adapters.html_text import count_words, decode_html_entities
from adapters.http_client import fetch_json
from core.config import AppSettings, get_settings, is_configured
from core.domain.exceptions import NotConfiguredError, PostNotFoundError
from core.domain.models import Post

DEFAULT_AUTHOR = "Someone"
_AVATAR_SIZES = ("96", "48", "24")


def post_url(settings: AppSettings, slug: str) -> str:
    endpoint = settings.posts_endpoint
    if not endpoint or not (settings.wordpress_site or is_configured(settings)):
        raise NotConfiguredError()
    return f"{endpoint}?slug={quote(slug)}&_embed"


def read_time(content: str | None, words_per_minute: int) -> str:
    """`ceil(palabras / wpm)` minutos; los múltiplos exactos no redondean hacia arriba."""

    minutes = math.ceil(count_words(content) / words_per_minute)
    return f"{minutes} min read"


def _first(value: Any) -> dict[str, Any]:
    if isinstance(value, list) and value and isinstance(value[0], dict):
        return value[0]
    return {}


def _rendered(record: dict[str, Any], key: str) -> str:
    field = record.get(key)
    if isinstance(field, dict) and isinstance(field.get("rendered"), str):
        return field["rendered"]
    return ""


def _avatar(author: dict[str, Any]) -> str | None:
    urls = author.get("avatar_urls")
    if not isinstance(urls, dict):
        return None
    for size in _AVATAR_SIZES:
        if isinstance(urls.get(size), str):
            return urls[size]
    return None


def _terms(groups: Any, taxonomy: str) -> list[str]:
    out: list[str] = []
    if not isinstance(groups, list):
        return out
    for group in groups:
        if not isinstance(group, list):
            continue
        for term in group:
            if isinstance(term, dict) and term.get("taxonomy") == taxonomy and isinstance(term.get("name"), str):
                out.append(decode_html_entities(term["name"]))
    return out


def normalize_post(record: dict[str, Any], *, words_per_minute: int = 200) -> Post:
    """Aplana un registro crudo de la API en un `Post`."""

    embedded = record.get("_embedded")
    if not isinstance(embedded, dict):
        embedded = {}

    author = _first(embedded.get("author"))
    media = _first(embedded.get("wp:featuredmedia"))
    groups = embedded.get("wp:term")

    author_name = author.get("name")
    featured = media.get("source_url")
    content = _rendered(record, "content")

    return Post(
        id=record.get("id"),
        title=_rendered(record, "title"),
        content=content,
        excerpt=_rendered(record, "excerpt"),
        slug=record.get("slug") or "",
        date=record.get("date"),
        modified=record.get("modified"),
        author=author_name if isinstance(author_name, str) and author_name else DEFAULT_AUTHOR,
        author_avatar=_avatar(author),
        featured_image=featured if isinstance(featured, str) else None,
        categories=_terms(groups, "category"),
        tags=_terms(groups, "post_tag"),
        read_time=read_time(content, words_per_minute),
    )


async def get_post(
    slug: str,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Post:
    """Descarga un post por slug y lo normaliza.

    Los `NetworkError` del adaptador HTTP se propagan sin envolver.
    """

    settings = settings or get_settings()
    records = await fetch_json(post_url(settings, slug), client=client, settings=settings)
    if not isinstance(records, list) or not records or not isinstance(records[0], dict):
        raise PostNotFoundError(slug)
    return normalize_post(records[0], words_per_minute=settings.reading_words_per_minute)
