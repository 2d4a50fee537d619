"""Configuración de pytest y fixtures compartidas.

Las pruebas no tocan la red: el HTTP se simula con `httpx.MockTransport` y
las fuentes de contenido con `AsyncMock`.

Uso:
    pytest
    pytest tests/unit/test_listing.py
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        wordpress_url="https://example.wordpress.com",
        reading_words_per_minute=200,
        http_timeout_seconds=None,
        _env_file=None,
    )


@pytest.fixture
def json_client() -> Callable[..., httpx.AsyncClient]:
    """Fábrica de clientes que responden `payload` y guardan las peticiones."""

    def factory(
        payload: Any,
        *,
        status_code: int = 200,
        requests: list[httpx.Request] | None = None,
    ) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, json=payload)

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def descriptor() -> Callable[[Any], list[dict[str, Any]]]:
    """Respuesta de categorías con `payload` serializado en la descripción."""

    def build(payload: Any) -> list[dict[str, Any]]:
        return [{"name": "Category", "description": json.dumps(payload)}]

    return build
