"""Núcleo: configuración, dominio, contratos y servicios puros."""
