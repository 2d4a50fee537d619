"""Adaptador WordPress REST.

Por qué un paquete:
- Separa el parser de categorías-descriptor del normalizador de posts.
- `WordPressSource` los expone como una `ContentSource` para los hooks.
"""

from adapters.wordpress.categories import (
    get_about,
    get_category_payload,
    get_comments_page_meta,
    get_contact,
    get_footer,
    get_hero,
    get_posts_page_meta,
    get_social_media,
    parse_descriptor,
)
from adapters.wordpress.posts import get_post, normalize_post, read_time
from adapters.wordpress.source import WordPressSource

__all__ = [
    "WordPressSource",
    "get_about",
    "get_category_payload",
    "get_comments_page_meta",
    "get_contact",
    "get_footer",
    "get_hero",
    "get_post",
    "get_posts_page_meta",
    "get_social_media",
    "normalize_post",
    "parse_descriptor",
    "read_time",
]
