"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El CMS entrega JSON poco tipado; aquí se fija el contrato mínimo de cada
  payload y se conservan los campos extra que el editor añada.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class _Payload(BaseModel):
    """Base de los payloads de categoría (JSON en la descripción)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class SocialLink(_Payload):
    platform: str = Field(..., description="Nombre de la red (p.ej. 'github').")
    url: str = Field(..., description="URL del perfil.")
    icon: str | None = Field(default=None, description="Icono opcional.")


class ButtonLink(_Payload):
    text: str
    url: str | None = Field(default=None, description="Sin URL el botón se muestra sin enlace.")


class Hero(_Payload):
    title: str = Field(..., description="Titular principal de la portada.")
    subtitle: str | None = None
    description: str | None = None
    avatar: str | None = None
    primary_button: ButtonLink | None = Field(default=None, alias="primaryButton")
    secondary_button: ButtonLink | None = Field(default=None, alias="secondaryButton")


class About(_Payload):
    title: str | None = None
    content: str | None = None
    image: str | None = None


class FooterLink(_Payload):
    url: str
    title: str


class FooterGithub(_Payload):
    url: str
    text: str | None = None


class Footer(_Payload):
    text: str | None = None
    links: list[FooterLink] = Field(default_factory=list)
    github: FooterGithub | None = None


class PostsPageMeta(_Payload):
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None


class CommentsPageMeta(_Payload):
    title: str | None = None
    guidelines: str | list[str] | None = None
    description: str | None = None


class Contact(_Payload):
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    response_time: str | None = None


def _unique(values: Any) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values or ():
        if isinstance(value, str) and value:
            seen.setdefault(value, None)
    return tuple(seen)


class Post(BaseModel):
    """Entidad canónica de un post, construida una vez por fetch.

    Los campos `title`, `content` y `excerpt` son HTML tal cual lo entrega
    WordPress: la presentación los renderiza como HTML.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | str = Field(..., description="ID del post en WordPress.")
    title: str = ""
    content: str = ""
    excerpt: str = ""
    slug: str = ""
    date: str | None = None
    modified: str | None = None
    author: str = Field(default="Someone", description="Nombre del autor.")
    author_avatar: str | None = Field(default=None, alias="authorAvatar")
    featured_image: str | None = Field(default=None, alias="featuredImage")
    categories: tuple[str, ...] = Field(default_factory=tuple)
    tags: tuple[str, ...] = Field(default_factory=tuple)
    read_time: str | None = Field(default=None, alias="readTime")

    @field_validator("categories", "tags", mode="before")
    @classmethod
    def _dedupe(cls, value: Any) -> tuple[str, ...]:
        return _unique(value)
