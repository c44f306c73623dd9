"""Shopify backed infrastructure."""

from .client import ShopifyApiError, ShopifyThemeStore

__all__ = [
    "ShopifyApiError",
    "ShopifyThemeStore",
]
