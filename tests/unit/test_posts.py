"""Post normalizer tests."""

import copy

import httpx
import pytest
from pydantic import ValidationError

from adapters.wordpress import get_post, normalize_post, read_time
from core.config import AppSettings
from core.domain.exceptions import NetworkError, NotConfiguredError, PostNotFoundError

pytestmark = pytest.mark.anyio

RAW_POST = {
    "id": 1,
    "slug": "test-post",
    "title": {"rendered": "Test Post Title"},
    "content": {"rendered": "<p>Test content</p>"},
    "excerpt": {"rendered": "<p>Test excerpt</p>"},
    "date": "2023-01-01T00:00:00",
    "modified": "2023-01-02T00:00:00",
    "_embedded": {
        "author": [{"name": "Test Author", "avatar_urls": {"96": "https://example.com/avatar.jpg"}}],
        "wp:term": [
            [
                {"name": "Category1", "taxonomy": "category"},
                {"name": "Tag1", "taxonomy": "post_tag"},
            ],
            [{"name": "Category2", "taxonomy": "category"}],
        ],
        "wp:featuredmedia": [{"source_url": "https://example.com/featured.jpg"}],
    },
}


class TestGetPost:
    async def test_fetches_and_normalizes(self, settings, json_client):
        requests: list[httpx.Request] = []
        async with json_client([RAW_POST], requests=requests) as client:
            post = await get_post("test-post", settings=settings, client=client)

        url = requests[0].url
        assert url.host == "public-api.wordpress.com"
        assert url.path == "/wp/v2/sites/example.wordpress.com/posts"
        assert url.params["slug"] == "test-post"
        assert "_embed" in url.params

        assert post.model_dump(by_alias=True) == {
            "id": 1,
            "title": "Test Post Title",
            "content": "<p>Test content</p>",
            "excerpt": "<p>Test excerpt</p>",
            "slug": "test-post",
            "date": "2023-01-01T00:00:00",
            "modified": "2023-01-02T00:00:00",
            "author": "Test Author",
            "authorAvatar": "https://example.com/avatar.jpg",
            "featuredImage": "https://example.com/featured.jpg",
            "categories": ("Category1", "Category2"),
            "tags": ("Tag1",),
            "readTime": "1 min read",
        }

    async def test_post_not_found(self, settings, json_client):
        async with json_client([]) as client:
            with pytest.raises(PostNotFoundError, match='Post with slug "non-existent-post" not found'):
                await get_post("non-existent-post", settings=settings, client=client)

    async def test_network_error_propagates_unwrapped(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Network error", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(NetworkError) as excinfo:
                await get_post("test-post", settings=settings, client=client)
        assert not isinstance(excinfo.value, PostNotFoundError)
        assert excinfo.value.message == "Network error"

    async def test_non_json_body(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(NetworkError):
                await get_post("test-post", settings=settings, client=client)

    async def test_read_time_uses_configured_rate(self, json_client):
        settings = AppSettings(
            wordpress_url="https://example.wordpress.com",
            reading_words_per_minute=150,
            _env_file=None,
        )
        raw = {**RAW_POST, "content": {"rendered": "word " * 400}}
        async with json_client([raw]) as client:
            post = await get_post("test-post", settings=settings, client=client)
        assert post.read_time == "3 min read"

    async def test_requires_configuration(self, json_client):
        settings = AppSettings(wordpress_url=None, _env_file=None)
        async with json_client([RAW_POST]) as client:
            with pytest.raises(NotConfiguredError):
                await get_post("test-post", settings=settings, client=client)


class TestNormalizePost:
    def test_missing_embedded_relations(self):
        raw = {key: value for key, value in RAW_POST.items() if key != "_embedded"}
        raw["_embedded"] = {}
        post = normalize_post(raw)
        assert post.author == "Someone"
        assert post.author_avatar is None
        assert post.featured_image is None
        assert post.categories == ()
        assert post.tags == ()

    def test_no_embedded_key_at_all(self):
        raw = {key: value for key, value in RAW_POST.items() if key != "_embedded"}
        post = normalize_post(raw)
        assert post.author == "Someone"
        assert post.tags == ()

    def test_terms_are_deduplicated_and_decoded(self):
        raw = copy.deepcopy(RAW_POST)
        raw["_embedded"]["wp:term"] = [
            [{"name": "Tips &amp; Tricks", "taxonomy": "category"}, {"name": "react", "taxonomy": "post_tag"}],
            [{"name": "Tips &amp; Tricks", "taxonomy": "category"}, {"name": "react", "taxonomy": "post_tag"}],
            [{"name": "ignored", "taxonomy": "post_format"}],
        ]
        post = normalize_post(raw)
        assert post.categories == ("Tips & Tricks",)
        assert post.tags == ("react",)

    def test_title_content_excerpt_stay_raw_html(self):
        raw = copy.deepcopy(RAW_POST)
        raw["title"] = {"rendered": "Tom &amp; Jerry"}
        post = normalize_post(raw)
        assert post.title == "Tom &amp; Jerry"
        assert post.content == "<p>Test content</p>"

    def test_avatar_falls_back_to_smaller_size(self):
        raw = copy.deepcopy(RAW_POST)
        raw["_embedded"]["author"] = [{"name": "A", "avatar_urls": {"48": "https://example.com/48.jpg"}}]
        assert normalize_post(raw).author_avatar == "https://example.com/48.jpg"

    def test_post_is_immutable(self):
        post = normalize_post(RAW_POST)
        with pytest.raises(ValidationError):
            post.title = "changed"


class TestReadTime:
    @pytest.mark.parametrize(
        ("words", "rate", "expected"),
        [
            (400, 200, "2 min read"),
            (401, 200, "3 min read"),
            (400, 150, "3 min read"),
            (1, 200, "1 min read"),
            (0, 200, "0 min read"),
        ],
    )
    def test_ceiling_division(self, words, rate, expected):
        assert read_time("word " * words, rate) == expected
