"""Theme domain exports."""

from .exceptions import ThemeStoreError
from .models import Asset, ShopSession, Theme, MAIN_THEME_ROLE
from .repository import ThemeStore

__all__ = [
    "Asset",
    "ShopSession",
    "Theme",
    "ThemeStore",
    "ThemeStoreError",
    "MAIN_THEME_ROLE",
]
