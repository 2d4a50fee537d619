"""Adaptadores de I/O: HTTP, WordPress REST y datos de build."""
