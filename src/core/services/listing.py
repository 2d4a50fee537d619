"""Listing/filter engine for the posts page.

Pure functions over an in-memory collection of normalized posts. The page
owns a `FilterState`; every interaction returns a new state and the visible
rows are recomputed from scratch, never stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Hashable, Iterable, Sequence

from core.domain.models import Post


@dataclass(frozen=True)
class FilterState:
    search_text: str = ""
    selected_tags: frozenset[str] = field(default_factory=frozenset)
    expanded_post_ids: frozenset[Hashable] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ListingRow:
    post: Post
    expanded: bool = False
    details: str | None = None


def unique_tags(posts: Iterable[Post]) -> list[str]:
    """Every tag once, in first-seen order."""

    seen: dict[str, None] = {}
    for post in posts:
        for tag in post.tags:
            seen.setdefault(tag, None)
    return list(seen)


def matches_search(post: Post, search_text: str) -> bool:
    needle = search_text.strip().lower()
    if not needle:
        return True
    return needle in post.title.lower() or needle in post.excerpt.lower()


def matches_tags(post: Post, selected_tags: frozenset[str] | set[str]) -> bool:
    # union semantics: one shared tag is enough
    if not selected_tags:
        return True
    return any(tag in selected_tags for tag in post.tags)


def filter_posts(posts: Sequence[Post], state: FilterState) -> list[Post]:
    return [
        post
        for post in posts
        if matches_search(post, state.search_text) and matches_tags(post, state.selected_tags)
    ]


def _toggle(items: frozenset, item: Hashable) -> frozenset:
    return items - {item} if item in items else items | {item}


def set_search(state: FilterState, text: str) -> FilterState:
    return replace(state, search_text=text)


def toggle_tag(state: FilterState, tag: str) -> FilterState:
    return replace(state, selected_tags=_toggle(state.selected_tags, tag))


def toggle_expanded(state: FilterState, post_id: Hashable) -> FilterState:
    return replace(state, expanded_post_ids=_toggle(state.expanded_post_ids, post_id))


def is_expanded(state: FilterState, post_id: Hashable) -> bool:
    return post_id in state.expanded_post_ids


def listing_rows(posts: Sequence[Post], state: FilterState) -> list[ListingRow]:
    """Visible posts with their expansion flag; expanded rows carry the excerpt."""

    rows: list[ListingRow] = []
    for post in filter_posts(posts, state):
        expanded = is_expanded(state, post.id)
        rows.append(ListingRow(post=post, expanded=expanded, details=post.excerpt if expanded else None))
    return rows
