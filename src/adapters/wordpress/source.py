"""Fuente de contenido WordPress (implementa `ContentSource`)."""

from __future__ import annotations

from typing import Any

import httpx

from adapters.wordpress.categories import get_category_payload
from adapters.wordpress.posts import get_post
from core.config import AppSettings, get_settings, is_configured
from core.domain.categories import CategoryDomain
from core.domain.models import Post
from core.interfaces.content_source import ContentSource


class WordPressSource(ContentSource):
    """Agrupa settings y (opcionalmente) un cliente HTTP compartido.

    Sin cliente, cada llamada abre y cierra el suyo (`build_async_client`).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._client = client

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def configured(self) -> bool:
        return is_configured(self._settings)

    async def get_category_payload(self, domain: CategoryDomain | str) -> Any:
        return await get_category_payload(domain, settings=self._settings, client=self._client)

    async def get_post(self, slug: str) -> Post:
        return await get_post(slug, settings=self._settings, client=self._client)
