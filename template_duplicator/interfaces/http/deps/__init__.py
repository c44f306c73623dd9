"""Reusable FastAPI dependencies."""

from .templates import get_template_service, get_theme_store

__all__ = [
    "get_template_service",
    "get_theme_store",
]
