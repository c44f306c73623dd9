"""Shopify Admin REST implementation of the theme store."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from template_duplicator.domain.themes import Asset, ShopSession, Theme, ThemeStoreError

DEFAULT_API_VERSION = "2024-01"


class ShopifyApiError(ThemeStoreError):
    pass


class ShopifyThemeStore:
    def __init__(
        self,
        session: ShopSession,
        *,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._session = session
        self._api_version = api_version
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f"https://{self._session.shop_domain}/admin/api/{self._api_version}"

    async def list_themes(self) -> list[Theme]:
        body = await self._request_json("GET", "/themes.json")
        themes = body.get("themes")
        if not isinstance(themes, list):
            raise ShopifyApiError("Shopify themes response is missing themes")
        return [Theme.from_payload(item) for item in themes if isinstance(item, dict)]

    async def list_assets(self, theme_id: str) -> list[Asset]:
        body = await self._request_json("GET", f"{self._theme_path(theme_id)}/assets.json")
        assets = body.get("assets")
        if not isinstance(assets, list):
            raise ShopifyApiError(f"Shopify assets response for theme {theme_id} is missing assets")
        return [Asset.from_payload(item, theme_id) for item in assets if isinstance(item, dict)]

    async def create_asset(self, theme_id: str, *, key: str, source_key: str) -> Asset:
        payload = {"asset": {"key": key, "source_key": source_key}}
        body = await self._request_json("PUT", f"{self._theme_path(theme_id)}/assets.json", payload=payload)
        asset = body.get("asset")
        if not isinstance(asset, dict):
            raise ShopifyApiError(f"Shopify did not return the created asset {key}")
        return Asset.from_payload(asset, theme_id)

    @staticmethod
    def _theme_path(theme_id: str) -> str:
        # theme ids are numeric, anything else could address another Admin path
        theme_id = str(theme_id)
        if not (theme_id.isascii() and theme_id.isdigit()):
            raise ShopifyApiError(f"Invalid Shopify theme id {theme_id!r}", status_code=400)
        return f"/themes/{theme_id}"

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        headers = {
            "X-Shopify-Access-Token": self._session.access_token,
            "Accept": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, json=payload, headers=headers)
        except httpx.RequestError as exc:
            raise ShopifyApiError(f"Network error while calling Shopify: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ShopifyApiError(f"Could not call Shopify {method} {path}: {exc}") from exc

        if response.status_code >= 400:
            raise ShopifyApiError(
                f"Shopify API call {method} {path} failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise ShopifyApiError("Shopify API returned invalid JSON") from exc

        if not isinstance(body, dict):
            raise ShopifyApiError("Shopify API response must be a JSON object")
        return body


__all__ = ["ShopifyApiError", "ShopifyThemeStore", "DEFAULT_API_VERSION"]
