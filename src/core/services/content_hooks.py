"""Domain instances of the fetch hook.

Each `use_*` helper builds a `FetchHook` around one `ContentSource` call and
activates it immediately, so it must run inside an event loop. The exposed
data field and initial value come from the category domain table.
"""

from __future__ import annotations

from functools import partial
from typing import Any

from core.domain.categories import (
    ABOUT,
    COMMENTS_PAGE,
    CONTACT,
    FOOTER,
    HERO,
    POSTS_PAGE,
    SOCIALS,
    CategoryDomain,
    resolve_domain,
)
from core.domain.models import Post
from core.interfaces.content_source import ContentSource
from core.services.fetch_state import FetchHook


def category_hook(domain: CategoryDomain | str, source: ContentSource) -> FetchHook[Any]:
    """Build (without activating) the hook for one category domain."""

    domain = resolve_domain(domain)
    return FetchHook(
        partial(source.get_category_payload, domain),
        data_field=domain.data_field,
        initial=domain.empty,
    )


def use_category(domain: CategoryDomain | str, source: ContentSource) -> FetchHook[Any]:
    hook = category_hook(domain, source)
    hook.activate()
    return hook


def use_post(slug: str, source: ContentSource) -> FetchHook[Post | None]:
    hook: FetchHook[Post | None] = FetchHook(
        partial(source.get_post, slug),
        data_field="post",
        initial=lambda: None,
    )
    hook.activate()
    return hook


use_social_media = partial(use_category, SOCIALS)
use_hero = partial(use_category, HERO)
use_about = partial(use_category, ABOUT)
use_footer = partial(use_category, FOOTER)
use_posts_page_meta = partial(use_category, POSTS_PAGE)
use_comments_page_meta = partial(use_category, COMMENTS_PAGE)
use_contact = partial(use_category, CONTACT)
