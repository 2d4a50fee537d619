"""Configuración de logging (loguru).

Los módulos importan `from loguru import logger` directamente; aquí solo se
fija el sink y el nivel una vez al arrancar.
"""

from __future__ import annotations

import sys

from loguru import logger

from core.config import get_settings

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


def setup_logging(level: str | None = None) -> None:
    """Reemplaza el sink por defecto de loguru por uno en stderr con `level`."""

    level = (level or get_settings().log_level).upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT)
    logger.debug(f"Logging configured with level: {level}")
