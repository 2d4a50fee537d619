"""Tabla de dominios servidos por categorías de WordPress.

Idea:
- En vez de siete funciones casi idénticas, cada dominio es una fila de datos
  (slug, validador, clave envoltorio, campo expuesto, valor inicial) y un
  único motor genérico la interpreta.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import TypeAdapter

from core.domain.models import (
    About,
    CommentsPageMeta,
    Contact,
    Footer,
    Hero,
    PostsPageMeta,
    SocialLink,
)


@dataclass(frozen=True)
class CategoryDomain:
    """Descriptor de un dominio de contenido."""

    slug: str
    adapter: TypeAdapter[Any] = field(compare=False, repr=False)
    data_field: str
    wrapper_key: str | None = None
    empty: Callable[[], Any] = field(default=lambda: None, compare=False, repr=False)

    def unwrap(self, value: Any) -> Any:
        if self.wrapper_key and isinstance(value, dict) and self.wrapper_key in value:
            return value[self.wrapper_key]
        return value


SOCIALS = CategoryDomain(
    slug="socials",
    adapter=TypeAdapter(list[SocialLink]),
    data_field="socialMedia",
    wrapper_key="socials",
    empty=list,
)
HERO = CategoryDomain(slug="hero", adapter=TypeAdapter(Hero), data_field="heroData")
ABOUT = CategoryDomain(slug="about", adapter=TypeAdapter(About), data_field="aboutData")
FOOTER = CategoryDomain(
    slug="footer",
    adapter=TypeAdapter(Footer),
    data_field="footerData",
    wrapper_key="footer",
)
POSTS_PAGE = CategoryDomain(slug="posts", adapter=TypeAdapter(PostsPageMeta), data_field="meta")
COMMENTS_PAGE = CategoryDomain(slug="comments", adapter=TypeAdapter(CommentsPageMeta), data_field="meta")
CONTACT = CategoryDomain(slug="contact", adapter=TypeAdapter(Contact), data_field="contactData")

CATEGORY_DOMAINS: dict[str, CategoryDomain] = {
    d.slug: d for d in (SOCIALS, HERO, ABOUT, FOOTER, POSTS_PAGE, COMMENTS_PAGE, CONTACT)
}


def resolve_domain(domain: CategoryDomain | str) -> CategoryDomain:
    if isinstance(domain, CategoryDomain):
        return domain
    try:
        return CATEGORY_DOMAINS[domain]
    except KeyError:
        known = ", ".join(sorted(CATEGORY_DOMAINS))
        raise ValueError(f"Unknown category domain {domain!r} (expected one of: {known})") from None
