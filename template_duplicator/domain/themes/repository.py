"""Protocol for the remote theme store."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Asset, Theme


class ThemeStore(Protocol):
    async def list_themes(self) -> Sequence[Theme]:
        ...

    async def list_assets(self, theme_id: str) -> Sequence[Asset]:
        ...

    async def create_asset(self, theme_id: str, *, key: str, source_key: str) -> Asset:
        """Create ``key`` in the theme as a copy of ``source_key``."""
        ...
