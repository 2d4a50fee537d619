"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.html_text import html_to_text
from core.domain.models import Post
from core.services.listing import ListingRow


def print_banner(console: Console) -> None:
    title = Text("wpcontent", style="bold cyan")
    subtitle = Text("WordPress headless • Categorías • Posts", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def to_jsonable(value: Any) -> Any:
    """Modelos Pydantic (y listas de ellos) a datos JSON con alias camelCase."""

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    return value


def build_posts_table(rows: list[ListingRow], *, title: str) -> Table:
    """Tabla del listado: Title, Date, Author, Categories, Tags."""

    table = Table(title=title, show_lines=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold white")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Author", style="green")
    table.add_column("Categories", style="magenta")
    table.add_column("Tags", style="yellow")
    for row in rows:
        post = row.post
        title_cell = Text(html_to_text(post.title))
        if row.expanded and row.details:
            title_cell.append("\n" + html_to_text(row.details), style="dim")
        table.add_row(
            str(post.id),
            title_cell,
            post.date or "",
            post.author,
            ", ".join(post.categories),
            ", ".join(post.tags),
        )
    return table


def build_post_panel(post: Post) -> Panel:
    body = Text()
    body.append(f"{post.author}", style="green")
    if post.date:
        body.append(f" • {post.date}", style="cyan")
    if post.read_time:
        body.append(f" • {post.read_time}", style="dim")
    body.append("\n\n")
    body.append(html_to_text(post.content) + "\n")
    if post.categories:
        body.append(f"\nCategories: {', '.join(post.categories)}", style="magenta")
    if post.tags:
        body.append(f"\nTags: {', '.join(post.tags)}", style="yellow")
    if post.featured_image:
        body.append(f"\nImage: {post.featured_image}", style="dim")
    return Panel(body, title=Text(html_to_text(post.title), style="bold"), border_style="cyan")
