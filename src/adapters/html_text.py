"""Utilidades de texto sobre fragmentos HTML de WordPress.

- `decode_html_entities`: deshace el escapado de entidades usando el decodificador
  de la plataforma (`html.unescape`), no una tabla propia.
- `html_to_text` / `count_words`: texto visible (sin etiquetas) y su número de
  palabras.
"""

from __future__ import annotations

from html import unescape

from bs4 import BeautifulSoup


def decode_html_entities(text: str | None) -> str:
    """`&amp;&lt;&gt;&quot;&#39;` -> `&<>"'`; `None` -> `""`."""

    if not text:
        return ""
    return unescape(text)


def html_to_text(html: str | None) -> str:
    """Texto visible de un fragmento HTML, con espacios normalizados."""

    if not html:
        return ""
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    return " ".join(text.split())


def count_words(html: str | None) -> int:
    text = html_to_text(html)
    return len(text.split()) if text else 0
