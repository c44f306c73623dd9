"""Generation of collision-free keys for duplicated templates."""

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional, Protocol, Sequence

from template_duplicator.domain.themes import Asset

from .classifier import TEMPLATES_DIR, TemplateCategory, filter_assets, resolve_category
from .exceptions import ExhaustedKeyspaceError, InvalidInputError

logger = logging.getLogger(__name__)

KEY_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
DEFAULT_SUFFIX_LENGTH = 10
TEMPLATE_EXTENSION = ".liquid"


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str:
        ...


_default_random = random.Random()


@dataclass(slots=True, frozen=True)
class DuplicateRequest:
    source_key: str
    theme_id: str
    category: TemplateCategory
    new_key: str

    def with_key(self, new_key: str) -> "DuplicateRequest":
        return replace(self, new_key=new_key)


def variant_token(source_key: str) -> str:
    """Return the first dot-delimited token after ``templates/``.

    ``templates/product.custom.liquid`` gives ``product``. Keys outside
    ``templates/`` are used as they are, so ``sections/foo.liquid`` gives
    ``sections/foo``.
    """
    name = source_key[len(TEMPLATES_DIR):] if source_key.startswith(TEMPLATES_DIR) else source_key
    return name.split(".", 1)[0]


def derive_category(source_key: str) -> TemplateCategory:
    token = variant_token(source_key)
    # only the prefix tokens count here, display ids such as "home" never appear in keys
    if token in {prefix for category in TemplateCategory for prefix in category.prefixes}:
        return resolve_category(token)
    return TemplateCategory.UNKNOWN


def generate_suffix(randomness: Optional[RandomSource] = None, length: int = DEFAULT_SUFFIX_LENGTH) -> str:
    source = randomness or _default_random
    return "".join(source.choice(KEY_ALPHABET) for _ in range(length))


def build_key(token: str, suffix: str) -> str:
    return f"{TEMPLATES_DIR}{token}.{suffix}{TEMPLATE_EXTENSION}"


def generate_key(
    token: str,
    existing_keys: Iterable[str],
    randomness: Optional[RandomSource] = None,
    *,
    length: int = DEFAULT_SUFFIX_LENGTH,
    max_attempts: Optional[int] = None,
) -> str:
    """Build ``templates/<token>.<suffix>.liquid`` avoiding ``existing_keys``.

    Without ``max_attempts`` the search only stops once a free key is found.
    """
    taken = set(existing_keys)
    attempts = 0
    while True:
        attempts += 1
        candidate = build_key(token, generate_suffix(randomness, length))
        if candidate not in taken:
            return candidate
        logger.debug("Generated key %s already exists, retrying", candidate)
        if max_attempts is not None and attempts >= max_attempts:
            raise ExhaustedKeyspaceError(
                f"No free key for templates/{token} after {attempts} attempts"
            )


def validate_duplicate_input(source_key: Optional[str], theme_id: Any) -> tuple[str, str]:
    if not source_key:
        raise InvalidInputError("source_key is required")
    if theme_id is None or not str(theme_id).strip():
        raise InvalidInputError("theme_id is required")
    return source_key, str(theme_id).strip()


def build_duplicate_request(
    source_key: Optional[str],
    theme_id: Any,
    assets: Iterable[Asset],
    randomness: Optional[RandomSource] = None,
    *,
    length: int = DEFAULT_SUFFIX_LENGTH,
    max_attempts: Optional[int] = None,
) -> DuplicateRequest:
    """Pick a key for a copy of ``source_key`` that no asset of its category uses.

    ``assets`` is the snapshot uniqueness is checked against; it should be
    fetched right before the call. The source key itself is not required to
    be part of it.
    """
    source_key, theme_id = validate_duplicate_input(source_key, theme_id)
    token = variant_token(source_key)
    category = derive_category(source_key)
    existing_keys = [asset.key for asset in filter_assets(assets, category)]
    new_key = generate_key(
        token,
        existing_keys,
        randomness,
        length=length,
        max_attempts=max_attempts,
    )
    return DuplicateRequest(
        source_key=source_key,
        theme_id=theme_id,
        category=category,
        new_key=new_key,
    )


__all__ = [
    "DEFAULT_SUFFIX_LENGTH",
    "KEY_ALPHABET",
    "DuplicateRequest",
    "RandomSource",
    "build_duplicate_request",
    "build_key",
    "derive_category",
    "generate_key",
    "generate_suffix",
    "validate_duplicate_input",
    "variant_token",
]
