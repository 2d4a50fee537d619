"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/WordPress) lean config de forma consistente.
- La configuración se resuelve una sola vez por proceso (`get_settings`).
"""

from __future__ import annotations

from functools import lru_cache
from urllib.parse import urlparse

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_WORDPRESS_URL = "https://your-wordpress-site.com"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="WPCONTENT_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    wordpress_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("WPCONTENT_WORDPRESS_URL", "GATSBY_WORDPRESS_URL"),
        description="URL base del sitio WordPress (fuente de categorías).",
    )
    wordpress_site: str | None = Field(
        default=None,
        description="Identificador del sitio para la API pública de posts (por defecto, el host de la URL).",
    )
    posts_api_base: str = Field(
        default="https://public-api.wordpress.com",
        min_length=8,
        description="Base URL de la API pública de posts.",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    user_agent: str = Field(
        default="wpcontent/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones a WordPress.",
    )

    reading_words_per_minute: int = Field(
        default=200,
        gt=0,
        description="Velocidad de lectura usada para calcular `read_time`.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de log para loguru.",
    )

    @property
    def base_url(self) -> str | None:
        if not self.wordpress_url:
            return None
        value = self.wordpress_url.strip().rstrip("/")
        return value or None

    @property
    def site_identifier(self) -> str | None:
        """Sitio para `/wp/v2/sites/<site>/posts`."""

        if self.wordpress_site:
            return self.wordpress_site.strip()
        if not self.base_url:
            return None
        return urlparse(self.base_url).hostname

    @property
    def categories_endpoint(self) -> str | None:
        if not self.base_url:
            return None
        return f"{self.base_url}/wp-json/wp/v2/categories"

    @property
    def posts_endpoint(self) -> str | None:
        site = self.site_identifier
        if not site:
            return None
        return f"{self.posts_api_base.rstrip('/')}/wp/v2/sites/{site}/posts"


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Settings del proceso (leídos una vez; no se releen a mitad de sesión)."""

    return AppSettings()


def is_configured(settings: AppSettings | None = None) -> bool:
    """Indica si hay una fuente WordPress utilizable.

    No es un error que no lo esté: la capa de presentación lo reporta.
    """

    settings = settings or get_settings()
    url = (settings.wordpress_url or "").strip()
    if not url:
        return False
    return url.rstrip("/") != PLACEHOLDER_WORDPRESS_URL
