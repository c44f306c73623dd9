"""Logging setup shared by the HTTP app and scripts."""

from __future__ import annotations

import logging

from template_duplicator.core.config import Settings


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.logging.level.upper()
    logging.basicConfig(
        level=level,
        format=settings.logging.format,
        datefmt=settings.logging.datefmt,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
