"""Contrato de una fuente de contenido.

Por qué Protocol:
- Los hooks de estado dependen de este contrato y no de WordPress/httpx.
- En tests basta un objeto con estos dos métodos (o un `AsyncMock`).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.categories import CategoryDomain
from core.domain.models import Post


@runtime_checkable
class ContentSource(Protocol):
    """Fuente de payloads de categoría y posts normalizados.

    Reglas de diseño:
    - Ambos métodos son asíncronos porque hacen I/O (HTTP).
    - Los fallos se señalan con subclases de `ContentError`.
    """

    async def get_category_payload(self, domain: CategoryDomain | str) -> Any:
        """Devuelve el payload validado del dominio."""

        ...

    async def get_post(self, slug: str) -> Post:
        """Devuelve el post normalizado para `slug`."""

        ...
