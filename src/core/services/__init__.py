"""Servicios del Core: hooks de estado y motor de listado."""
