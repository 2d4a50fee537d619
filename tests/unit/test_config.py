"""Config resolver tests."""

import pytest

from core.config import PLACEHOLDER_WORDPRESS_URL, AppSettings, get_settings, is_configured


def _settings(url):
    return AppSettings(wordpress_url=url, _env_file=None)


class TestIsConfigured:
    def test_configured_url(self):
        assert is_configured(_settings("https://my-site.wordpress.com")) is True

    @pytest.mark.parametrize("url", [None, "", "   ", PLACEHOLDER_WORDPRESS_URL, PLACEHOLDER_WORDPRESS_URL + "/"])
    def test_unusable_urls(self, url):
        assert is_configured(_settings(url)) is False

    def test_reads_legacy_env_variable(self, monkeypatch):
        monkeypatch.delenv("WPCONTENT_WORDPRESS_URL", raising=False)
        monkeypatch.setenv("GATSBY_WORDPRESS_URL", "https://from-env.example.com")
        settings = AppSettings(_env_file=None)
        assert settings.wordpress_url == "https://from-env.example.com"
        assert is_configured(settings) is True


class TestDerivedEndpoints:
    def test_categories_endpoint_strips_trailing_slash(self):
        settings = _settings("https://example.wordpress.com/")
        assert settings.categories_endpoint == "https://example.wordpress.com/wp-json/wp/v2/categories"

    def test_posts_endpoint_uses_host_as_site(self):
        settings = _settings("https://example.wordpress.com")
        assert settings.site_identifier == "example.wordpress.com"
        assert settings.posts_endpoint == "https://public-api.wordpress.com/wp/v2/sites/example.wordpress.com/posts"

    def test_explicit_site_wins(self):
        settings = AppSettings(
            wordpress_url="https://example.wordpress.com",
            wordpress_site="12345",
            _env_file=None,
        )
        assert settings.posts_endpoint.endswith("/sites/12345/posts")

    def test_no_endpoints_without_url(self):
        settings = _settings(None)
        assert settings.categories_endpoint is None
        assert settings.posts_endpoint is None


def test_get_settings_is_resolved_once():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
