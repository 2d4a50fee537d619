"""Errores del dominio de contenido.

Cada fallo de la capa de recuperación tiene su propio tipo; la capa de
presentación solo ve el mensaje (`FetchState.error`).
"""

from __future__ import annotations


class ContentError(Exception):
    """Base de todos los errores de contenido."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotConfiguredError(ContentError):
    """No hay URL de WordPress utilizable."""

    def __init__(self) -> None:
        super().__init__("WordPress URL is not configured")


class NetworkError(ContentError):
    """Fallo de transporte; el mensaje original se conserva tal cual."""


class CategoryNotFoundError(ContentError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"{slug.capitalize()} category not found")
        self.slug = slug


class EmptyDescriptionError(ContentError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"No description found in {slug} category")
        self.slug = slug


class InvalidJsonError(ContentError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"Invalid JSON in {slug} category description")
        self.slug = slug


class InvalidShapeError(ContentError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"Invalid {slug} data structure")
        self.slug = slug


class PostNotFoundError(ContentError):
    def __init__(self, slug: str) -> None:
        super().__init__(f'Post with slug "{slug}" not found')
        self.slug = slug
