"""Datos inyectados en build por el generador estático.

El build entrega un JSON con dos colecciones:
- `allWordPressPost.nodes`: posts ya aplanados (title, excerpt, tags, ...).
- `allWordPressCategory.nodes`: categorías con `parsedData` (JSON ya parseado).

Cualquiera de las dos puede faltar o venir como `null`; la página muestra
entonces una lista vacía y el título por defecto.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from core.domain.models import Post, PostsPageMeta

DEFAULT_POSTS_TITLE = "All Posts"


def _nodes(data: dict[str, Any], key: str) -> list[Any]:
    collection = data.get(key)
    if not isinstance(collection, dict):
        return []
    nodes = collection.get("nodes")
    return nodes if isinstance(nodes, list) else []


def load_posts_collection(nodes: list[dict[str, Any]] | None) -> list[Post]:
    posts: list[Post] = []
    for node in nodes or []:
        try:
            posts.append(Post.model_validate(node))
        except ValidationError as exc:
            logger.warning(f"Skipping build-time post node: {exc.error_count()} validation error(s)")
    return posts


def posts_page_meta(category_nodes: list[dict[str, Any]] | None) -> PostsPageMeta:
    """Metadatos de la página de posts, con título por defecto si faltan."""

    for node in category_nodes or []:
        if not isinstance(node, dict) or str(node.get("name", "")).lower() != "posts":
            continue
        parsed = node.get("parsedData")
        if isinstance(parsed, dict):
            try:
                meta = PostsPageMeta.model_validate(parsed)
            except ValidationError as exc:
                logger.warning(f"Ignoring posts category parsedData: {exc.error_count()} validation error(s)")
                break
            if not meta.title:
                meta = meta.model_copy(update={"title": DEFAULT_POSTS_TITLE})
            return meta
    return PostsPageMeta(title=DEFAULT_POSTS_TITLE)


def load_build_data(path: Path) -> tuple[list[Post], PostsPageMeta]:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        data = {}
    posts = load_posts_collection(_nodes(data, "allWordPressPost"))
    meta = posts_page_meta(_nodes(data, "allWordPressCategory"))
    return posts, meta
