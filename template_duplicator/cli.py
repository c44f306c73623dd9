"""
Command line access to the configured shop's theme templates.

Examples:
    template-duplicator list --category product
    template-duplicator duplicate --theme-id 123456 --source-key templates/product.liquid
"""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any, Optional, Sequence

from template_duplicator.core.config import get_settings
from template_duplicator.core.container import get_container
from template_duplicator.core.logging import configure_logging
from template_duplicator.modules.templates import TemplateAssetError, TemplateAssetService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse and duplicate theme templates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List templates of a category")
    list_parser.add_argument("--theme-id", help="Theme to list, defaults to the main theme")
    list_parser.add_argument("--category", help="home, collection, product or all")

    duplicate_parser = subparsers.add_parser("duplicate", help="Duplicate a template under a new key")
    duplicate_parser.add_argument("--theme-id", required=True, help="Theme owning the template")
    duplicate_parser.add_argument("--source-key", required=True, help="Key of the template to copy")
    return parser


async def _run(args: argparse.Namespace, service: TemplateAssetService) -> dict[str, Any]:
    if args.command == "duplicate":
        request = await service.duplicate_asset(args.theme_id, args.source_key)
        return {"status": "success", "new_key": request.new_key, "source_key": request.source_key}

    if args.theme_id:
        theme_id = args.theme_id
        assets = await service.list_category_assets(theme_id, args.category)
    else:
        theme, assets = await service.list_main_theme_assets(args.category)
        theme_id = theme.id
    return {
        "theme_id": theme_id,
        "data": [{"key": asset.key, "updated_at": asset.updated_at} for asset in assets],
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings())

    container = get_container()
    service = TemplateAssetService.with_store(container.theme_store(), container.settings)
    try:
        result = asyncio.run(_run(args, service))
    except TemplateAssetError as exc:
        raise SystemExit(f"[error] {exc}") from exc
    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
