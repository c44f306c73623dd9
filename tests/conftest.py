"""Shared pytest fixtures for template duplicator tests."""

from __future__ import annotations

from typing import Optional, Sequence

import pytest

from template_duplicator.domain.themes import Asset, Theme, ThemeStoreError

MAIN_THEME_ID = "111"


class SequenceRandom:
    """Deterministic randomness that replays a fixed character sequence."""

    def __init__(self, characters: str) -> None:
        self._characters = iter(characters)
        self.calls = 0

    def choice(self, seq: Sequence[str]) -> str:
        self.calls += 1
        char = next(self._characters)
        assert char in seq
        return char


class FakeThemeStore:
    def __init__(
        self,
        themes: Optional[list[Theme]] = None,
        assets: Optional[list[Asset]] = None,
        *,
        fail_themes: bool = False,
        fail_assets: bool = False,
        fail_create: bool = False,
    ) -> None:
        self.themes = themes if themes is not None else default_themes()
        self.assets = assets if assets is not None else []
        self.fail_themes = fail_themes
        self.fail_assets = fail_assets
        self.fail_create = fail_create
        self.list_asset_calls: list[str] = []
        self.created: list[dict[str, str]] = []

    async def list_themes(self) -> list[Theme]:
        if self.fail_themes:
            raise ThemeStoreError("themes endpoint unavailable")
        return list(self.themes)

    async def list_assets(self, theme_id: str) -> list[Asset]:
        self.list_asset_calls.append(theme_id)
        if self.fail_assets:
            raise ThemeStoreError("assets endpoint unavailable", status_code=503)
        return list(self.assets)

    async def create_asset(self, theme_id: str, *, key: str, source_key: str) -> Asset:
        if self.fail_create:
            raise ThemeStoreError("asset rejected", status_code=422)
        self.created.append({"theme_id": theme_id, "key": key, "source_key": source_key})
        return Asset(key=key, theme_id=theme_id, updated_at="2024-05-01T10:00:00-04:00")


def default_themes() -> list[Theme]:
    return [
        Theme(id="222", name="Dawn (draft)", role="unpublished"),
        Theme(id=MAIN_THEME_ID, name="Dawn", role="main"),
    ]


def make_assets(*keys: str, theme_id: str = MAIN_THEME_ID) -> list[Asset]:
    return [Asset(key=key, theme_id=theme_id) for key in keys]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def theme_assets() -> list[Asset]:
    return make_assets(
        "assets/base.css",
        "layout/theme.liquid",
        "templates/index.liquid",
        "templates/index.json",
        "templates/collection.liquid",
        "templates/collection.sale.liquid",
        "templates/product.liquid",
        "templates/product.special.liquid",
        "templates/page.contact.liquid",
        "sections/product-template.liquid",
    )
