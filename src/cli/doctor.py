"""Doctor command for configuration and connectivity diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import fetch_json
from core.config import PLACEHOLDER_WORDPRESS_URL, AppSettings, get_settings, is_configured
from core.domain.exceptions import NetworkError

app = typer.Typer(no_args_is_help=True, help="Configuration and connectivity checks.")

_console = Console()


async def _check_categories(settings: AppSettings) -> tuple[bool, str]:
    url = f"{settings.categories_endpoint}?per_page=1"
    try:
        data = await fetch_json(url, settings=settings)
    except NetworkError as exc:
        return False, exc.message
    if not isinstance(data, list):
        return False, "Unexpected response (expected a list of categories)"
    return True, f"{len(data)} category record(s) returned"


@app.command()
def run() -> None:
    """Show the resolved configuration and test the categories endpoint."""

    settings = get_settings()
    configured = is_configured(settings)

    table = Table(title="wpcontent Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if configured:
        table.add_row("WordPress URL", "OK", settings.base_url or "")
    elif (settings.wordpress_url or "").strip().rstrip("/") == PLACEHOLDER_WORDPRESS_URL:
        table.add_row("WordPress URL", "NOT CONFIGURED", "Still set to the placeholder URL")
    else:
        table.add_row("WordPress URL", "NOT CONFIGURED", "Set WPCONTENT_WORDPRESS_URL or GATSBY_WORDPRESS_URL")

    table.add_row("Posts API", "OK" if settings.posts_endpoint else "N/A", settings.posts_endpoint or "-")
    if settings.http_timeout_seconds is None:
        table.add_row("HTTP timeout", "NONE", "A hung request keeps loading indefinitely")
    else:
        table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Reading speed", "OK", f"{settings.reading_words_per_minute} words/min")

    if configured:
        ok_http, detail_http = asyncio.run(_check_categories(settings))
        table.add_row("Categories endpoint", "OK" if ok_http else "FAIL", detail_http)
    else:
        table.add_row("Categories endpoint", "SKIPPED", "Source not configured")

    _console.print(table)

    if not configured:
        _console.print(
            "\n[yellow]Note:[/yellow] Without a WordPress URL the site falls back to build-time data only."
        )
