"""Entidades del contenido del sitio.

- `models`: payloads de categoría y `Post` (Pydantic v2).
- `categories`: tabla de dominios que interpreta el parser genérico.
- `exceptions`: taxonomía de fallos de recuperación.

El dominio no conoce HTTP ni la CLI.
"""
