"""Classification of theme assets into template categories.

A key belongs to a category when it starts with ``templates/<prefix>``, where
the prefix is ``index`` for the home page and the category name otherwise.
Anything after the prefix (variant suffixes, the ``.liquid`` extension) is
ignored, so ``templates/product.special.liquid`` is a product template.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Union

from template_duplicator.domain.themes import Asset

TEMPLATES_DIR = "templates/"


class TemplateCategory(str, Enum):
    HOME = "home"
    COLLECTION = "collection"
    PRODUCT = "product"
    # union of the three named categories, also used for unrecognised variants
    UNKNOWN = "all"

    @property
    def prefixes(self) -> tuple[str, ...]:
        if self is TemplateCategory.UNKNOWN:
            return tuple(_PREFIXES.values())
        return (_PREFIXES[self],)

    @property
    def key_prefixes(self) -> tuple[str, ...]:
        return tuple(f"{TEMPLATES_DIR}{prefix}" for prefix in self.prefixes)


_PREFIXES: dict[TemplateCategory, str] = {
    TemplateCategory.HOME: "index",
    TemplateCategory.COLLECTION: "collection",
    TemplateCategory.PRODUCT: "product",
}

# display id, prefix token and tab position all select the same category
_SELECTORS: dict[str, TemplateCategory] = {
    "home": TemplateCategory.HOME,
    "index": TemplateCategory.HOME,
    "0": TemplateCategory.HOME,
    "collection": TemplateCategory.COLLECTION,
    "1": TemplateCategory.COLLECTION,
    "product": TemplateCategory.PRODUCT,
    "2": TemplateCategory.PRODUCT,
    "all": TemplateCategory.UNKNOWN,
    "": TemplateCategory.UNKNOWN,
}

CATEGORY_TABS: tuple[tuple[TemplateCategory, str], ...] = (
    (TemplateCategory.HOME, "Home Pages"),
    (TemplateCategory.COLLECTION, "Collection Pages"),
    (TemplateCategory.PRODUCT, "Product Pages"),
)

CategorySelector = Union[TemplateCategory, str, int, None]


def resolve_category(selector: CategorySelector = None) -> TemplateCategory:
    """Map a category selector to a ``TemplateCategory``.

    Unrecognised selectors fall back to ``TemplateCategory.UNKNOWN``, which
    matches every template of the three known categories.
    """
    if isinstance(selector, TemplateCategory):
        return selector
    if selector is None or isinstance(selector, bool):
        return TemplateCategory.UNKNOWN
    return _SELECTORS.get(str(selector), TemplateCategory.UNKNOWN)


def matches(key: Optional[str], category: CategorySelector = None) -> bool:
    if not key:
        return False
    return key.startswith(resolve_category(category).key_prefixes)


def filter_assets(assets: Iterable[Asset], category: CategorySelector = None) -> list[Asset]:
    resolved = resolve_category(category)
    return [asset for asset in assets if matches(asset.key, resolved)]


__all__ = [
    "CATEGORY_TABS",
    "TEMPLATES_DIR",
    "CategorySelector",
    "TemplateCategory",
    "filter_assets",
    "matches",
    "resolve_category",
]
