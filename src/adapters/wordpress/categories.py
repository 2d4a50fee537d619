"""Parser genérico de categorías-descriptor de WordPress.

WordPress se usa como almacén de configuración ad-hoc: la descripción de una
categoría (`/wp-json/wp/v2/categories?slug=<slug>`) contiene un JSON con el
contenido de una sección del sitio (hero, footer, redes, ...).

Flujo por dominio:
1. GET de la categoría por slug.
2. Lista vacía -> `CategoryNotFoundError`.
3. Descripción vacía -> `EmptyDescriptionError`.
4. Entidades HTML decodificadas + `json.loads` -> `InvalidJsonError` si falla.
5. Se quita el envoltorio del dominio si viene (`{"socials": [...]}`).
6. Validación Pydantic -> `InvalidShapeError` si no cumple el contrato.
"""

from __future__ import annotations

import json
from functools import partial
from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger
from pydantic import ValidationError

from adapters.html_text import decode_html_entities
from adapters.http_client import fetch_json
from core.config import AppSettings, get_settings, is_configured
from core.domain.categories import (
    ABOUT,
    COMMENTS_PAGE,
    CONTACT,
    FOOTER,
    HERO,
    POSTS_PAGE,
    SOCIALS,
    CategoryDomain,
    resolve_domain,
)
from core.domain.exceptions import (
    CategoryNotFoundError,
    EmptyDescriptionError,
    InvalidJsonError,
    InvalidShapeError,
    NotConfiguredError,
)


def category_url(settings: AppSettings, slug: str) -> str:
    if not is_configured(settings) or not settings.categories_endpoint:
        raise NotConfiguredError()
    return f"{settings.categories_endpoint}?slug={quote(slug)}"


def parse_descriptor(domain: CategoryDomain, records: Any) -> Any:
    """Convierte la respuesta cruda de categorías en el payload del dominio.

    Parte pura del parser: sin I/O, reutilizable con datos ya descargados.
    """

    slug = domain.slug
    if not isinstance(records, list) or not records:
        raise CategoryNotFoundError(slug)

    first = records[0] if isinstance(records[0], dict) else {}
    description = first.get("description")
    if not isinstance(description, str) or not description.strip():
        raise EmptyDescriptionError(slug)

    try:
        parsed = json.loads(decode_html_entities(description))
    except json.JSONDecodeError as exc:
        logger.warning(f"Category '{slug}' has invalid JSON in its description: {exc}")
        raise InvalidJsonError(slug) from exc

    try:
        return domain.adapter.validate_python(domain.unwrap(parsed))
    except ValidationError as exc:
        logger.warning(f"Category '{slug}' payload rejected: {exc.error_count()} validation error(s)")
        raise InvalidShapeError(slug) from exc


async def get_category_payload(
    domain: CategoryDomain | str,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """Descarga y valida el payload de un dominio (ver docstring del módulo)."""

    domain = resolve_domain(domain)
    settings = settings or get_settings()
    url = category_url(settings, domain.slug)
    records = await fetch_json(url, client=client, settings=settings)
    return parse_descriptor(domain, records)


get_social_media = partial(get_category_payload, SOCIALS)
get_hero = partial(get_category_payload, HERO)
get_about = partial(get_category_payload, ABOUT)
get_footer = partial(get_category_payload, FOOTER)
get_posts_page_meta = partial(get_category_payload, POSTS_PAGE)
get_comments_page_meta = partial(get_category_payload, COMMENTS_PAGE)
get_contact = partial(get_category_payload, CONTACT)
