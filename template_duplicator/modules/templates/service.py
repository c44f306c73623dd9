"""Application service for browsing and duplicating theme templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from template_duplicator.core.config import Settings, get_settings
from template_duplicator.domain.themes import Asset, Theme, ThemeStore, ThemeStoreError

from .classifier import CategorySelector, filter_assets
from .duplicator import (
    DEFAULT_SUFFIX_LENGTH,
    DuplicateRequest,
    RandomSource,
    build_duplicate_request,
    validate_duplicate_input,
)
from .exceptions import ExhaustedKeyspaceError, UpstreamCreateError, UpstreamFetchError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TemplateAssetService:
    store: ThemeStore
    randomness: Optional[RandomSource] = None
    suffix_length: int = DEFAULT_SUFFIX_LENGTH
    max_attempts: Optional[int] = None

    @classmethod
    def with_store(
        cls,
        store: ThemeStore,
        settings: Optional[Settings] = None,
        randomness: Optional[RandomSource] = None,
    ) -> "TemplateAssetService":
        settings = settings or get_settings()
        return cls(
            store,
            randomness=randomness,
            suffix_length=settings.suffix_length,
            max_attempts=settings.max_attempts,
        )

    async def get_main_theme(self) -> Theme:
        try:
            themes = await self.store.list_themes()
        except ThemeStoreError as exc:
            logger.error("Failed to list themes: %s", exc)
            raise UpstreamFetchError("Failed to list themes") from exc

        main_theme = next((theme for theme in themes if theme.is_main), None)
        if main_theme is None:
            logger.error("No main theme among %d themes", len(themes))
            raise UpstreamFetchError("Store has no main theme")
        return main_theme

    async def list_category_assets(self, theme_id: str, category: CategorySelector = None) -> list[Asset]:
        assets = await self._fetch_assets(theme_id)
        return filter_assets(assets, category)

    async def list_main_theme_assets(self, category: CategorySelector = None) -> tuple[Theme, list[Asset]]:
        theme = await self.get_main_theme()
        return theme, await self.list_category_assets(theme.id, category)

    async def duplicate_asset(self, theme_id: Optional[str], source_key: Optional[str]) -> DuplicateRequest:
        """Copy ``source_key`` to a freshly generated key in the same theme.

        Input is validated before the theme store is contacted. The returned
        request carries the key reported back by the store.
        """
        source_key, theme_id = validate_duplicate_input(source_key, theme_id)
        assets = await self._fetch_assets(theme_id)

        try:
            request = build_duplicate_request(
                source_key,
                theme_id,
                assets,
                self.randomness,
                length=self.suffix_length,
                max_attempts=self.max_attempts,
            )
        except ExhaustedKeyspaceError as exc:
            logger.error("Could not generate a key for %s in theme %s: %s", source_key, theme_id, exc)
            raise

        try:
            created = await self.store.create_asset(
                request.theme_id,
                key=request.new_key,
                source_key=request.source_key,
            )
        except ThemeStoreError as exc:
            logger.error(
                "Failed to create %s from %s in theme %s: %s",
                request.new_key,
                request.source_key,
                request.theme_id,
                exc,
            )
            raise UpstreamCreateError("Failed to create duplicated asset") from exc

        logger.info("Duplicated %s to %s in theme %s", request.source_key, created.key, request.theme_id)
        if created.key and created.key != request.new_key:
            return request.with_key(created.key)
        return request

    async def _fetch_assets(self, theme_id: str) -> list[Asset]:
        try:
            return list(await self.store.list_assets(theme_id))
        except ThemeStoreError as exc:
            logger.error("Failed to list assets for theme %s: %s", theme_id, exc)
            raise UpstreamFetchError(f"Failed to list assets for theme {theme_id}") from exc
