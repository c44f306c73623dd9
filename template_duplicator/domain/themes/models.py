"""Domain models for storefront themes and their assets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

MAIN_THEME_ROLE = "main"


@dataclass(slots=True, frozen=True)
class ShopSession:
    shop_domain: str
    access_token: str


@dataclass(slots=True, frozen=True)
class Theme:
    id: str
    name: Optional[str]
    role: Optional[str]

    @property
    def is_main(self) -> bool:
        return self.role == MAIN_THEME_ROLE

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Theme":
        return cls(
            id=str(payload.get("id", "")),
            name=payload.get("name"),
            role=payload.get("role"),
        )


@dataclass(slots=True, frozen=True)
class Asset:
    """A single file entry of a theme, addressed by its key."""

    key: str
    theme_id: str
    updated_at: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any], theme_id: Optional[str] = None) -> "Asset":
        raw_theme_id = payload.get("theme_id", theme_id)
        return cls(
            key=payload.get("key") or "",
            theme_id="" if raw_theme_id is None else str(raw_theme_id),
            updated_at=payload.get("updated_at"),
        )
