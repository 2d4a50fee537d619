"""CLI de wpcontent (Typer + Rich).

Es un consumidor de la capa de contenido: usa los mismos hooks y funciones
puras que usaría la presentación del sitio, y solo se ocupa de imprimir.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Callable, List, Optional

import typer
from rich.console import Console

from adapters.build_data import load_build_data
from adapters.wordpress import WordPressSource
from cli import doctor
from cli.ui_components import build_post_panel, build_posts_table, print_banner, to_jsonable
from core.config import get_settings, is_configured
from core.domain.categories import CATEGORY_DOMAINS
from core.interfaces.content_source import ContentSource
from core.logging import setup_logging
from core.services.content_hooks import use_category, use_post
from core.services.fetch_state import FetchHook
from core.services.listing import FilterState, listing_rows, set_search, toggle_expanded, toggle_tag

app = typer.Typer(no_args_is_help=True, help="Headless WordPress content for the static site.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests and parse failures."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner before the output."),
) -> None:
    setup_logging("DEBUG" if verbose else None)
    if banner:
        print_banner(_console)


def _require_configured() -> None:
    if not is_configured(get_settings()):
        _console.print("[yellow]WordPress is not configured; nothing to fetch.[/yellow]")
        raise typer.Exit(code=0)


async def _run_hook(factory: Callable[[ContentSource], FetchHook[Any]]) -> dict[str, Any]:
    source = WordPressSource(get_settings())
    hook = factory(source)
    await hook.load()
    return hook.snapshot()


@app.command()
def show(domain: str = typer.Argument(..., help="Category slug: " + ", ".join(CATEGORY_DOMAINS))) -> None:
    """Fetch one category payload and print its {data, loading, error} state."""

    if domain not in CATEGORY_DOMAINS:
        raise typer.BadParameter(f"expected one of: {', '.join(CATEGORY_DOMAINS)}", param_hint="DOMAIN")
    _require_configured()

    snapshot = asyncio.run(_run_hook(lambda source: use_category(domain, source)))
    _console.print_json(data=to_jsonable(snapshot))
    if snapshot["error"] is not None:
        raise typer.Exit(code=1)


@app.command()
def post(slug: str = typer.Argument(..., help="Post slug.")) -> None:
    """Fetch and print a normalized post."""

    _require_configured()

    snapshot = asyncio.run(_run_hook(lambda source: use_post(slug, source)))
    if snapshot["error"] is not None:
        _console.print(f"[red]Error:[/red] {snapshot['error']}")
        raise typer.Exit(code=1)
    if snapshot["post"] is None:
        raise typer.Exit(code=1)
    _console.print(build_post_panel(snapshot["post"]))


@app.command()
def posts(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Build-time JSON export."),
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive text in title or excerpt."),
    tag: Optional[List[str]] = typer.Option(None, "--tag", "-t", help="Tag filter (repeatable, any match)."),
    expand: Optional[List[str]] = typer.Option(None, "--expand", "-e", help="Post id to expand (repeatable)."),
) -> None:
    """List build-time posts through the search/tag filter engine."""

    try:
        collection, meta = load_build_data(path)
    except json.JSONDecodeError as exc:
        _console.print(f"[red]Error:[/red] {path} is not valid JSON ({exc})")
        raise typer.Exit(code=1) from exc

    state = set_search(FilterState(), search)
    for name in dict.fromkeys(tag or []):
        state = toggle_tag(state, name)
    ids = {str(p.id): p.id for p in collection}
    for raw_id in dict.fromkeys(expand or []):
        if raw_id in ids:
            state = toggle_expanded(state, ids[raw_id])

    rows = listing_rows(collection, state)
    if meta.subtitle:
        _console.print(f"[dim]{meta.subtitle}[/dim]")
    if not rows:
        _console.print(f"[bold]{meta.title}[/bold]")
        _console.print("No posts found")
        return
    _console.print(build_posts_table(rows, title=meta.title or ""))


def run() -> None:
    app()
