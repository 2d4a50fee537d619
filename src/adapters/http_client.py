"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging de todas las peticiones a WordPress.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con MockTransport.

Sin reintentos ni caché: una petición por llamada.
"""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from core.config import AppSettings, get_settings
from core.domain.exceptions import NetworkError


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `http_timeout_seconds=None` deja la petición sin timeout: una petición
      colgada deja `loading=True`. Fijarlo es opt-in.
    """

    settings = settings or get_settings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


async def _get_json(client: httpx.AsyncClient, url: str) -> Any:
    response = await client.get(url)
    response.raise_for_status()
    return response.json()


async def fetch_json(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: AppSettings | None = None,
) -> Any:
    """Hace un GET y devuelve el JSON decodificado.

    Cualquier fallo de transporte (conexión, timeout, status HTTP, cuerpo no
    JSON) se eleva como `NetworkError` con el mensaje original intacto; si la
    excepción no trae mensaje se usa el nombre de su clase (`ReadTimeout`).
    """

    logger.debug(f"GET {url}")
    try:
        if client is not None:
            return await _get_json(client, url)
        async with build_async_client(settings) as own_client:
            return await _get_json(own_client, url)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning(f"Request to {url} failed: {exc}")
        raise NetworkError(str(exc) or type(exc).__name__) from exc
