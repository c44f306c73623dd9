"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from template_duplicator.core.config import Settings, get_settings
from template_duplicator.domain.themes import ShopSession
from template_duplicator.infrastructure.shopify import ShopifyThemeStore


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings

    def shop_session(self) -> ShopSession:
        shopify = self.settings.shopify
        return ShopSession(shop_domain=shopify.shop_domain, access_token=shopify.access_token)

    def theme_store(self) -> ShopifyThemeStore:
        """Build a theme store bound to the configured shop."""
        shopify = self.settings.shopify
        return ShopifyThemeStore(
            self.shop_session(),
            api_version=shopify.api_version,
            timeout=shopify.request_timeout,
        )


@lru_cache()
def get_container() -> ApplicationContainer:
    return ApplicationContainer(settings=get_settings())


__all__ = ["ApplicationContainer", "get_container"]
