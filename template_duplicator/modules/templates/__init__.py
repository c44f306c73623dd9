"""Template asset classification and duplication."""

from .classifier import CATEGORY_TABS, TemplateCategory, filter_assets, matches, resolve_category
from .duplicator import DuplicateRequest, build_duplicate_request, derive_category, generate_key
from .exceptions import (
    ExhaustedKeyspaceError,
    InvalidInputError,
    TemplateAssetError,
    UpstreamCreateError,
    UpstreamFetchError,
)
from .service import TemplateAssetService

__all__ = [
    "CATEGORY_TABS",
    "DuplicateRequest",
    "TemplateAssetService",
    "TemplateCategory",
    "build_duplicate_request",
    "derive_category",
    "filter_assets",
    "generate_key",
    "matches",
    "resolve_category",
    "ExhaustedKeyspaceError",
    "InvalidInputError",
    "TemplateAssetError",
    "UpstreamCreateError",
    "UpstreamFetchError",
]
