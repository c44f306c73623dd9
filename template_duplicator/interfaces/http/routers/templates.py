"""Theme template browsing and duplication endpoints."""

from typing import Iterable, Optional

from fastapi import APIRouter, Depends, status

from template_duplicator.domain.themes import Asset
from template_duplicator.interfaces.http.deps import get_template_service
from template_duplicator.modules.templates import CATEGORY_TABS, TemplateAssetService, resolve_category
from template_duplicator.schemas import (
    AssetListResponse,
    AssetResponse,
    CategoryListResponse,
    CategoryTab,
    DuplicateAssetRequest,
    DuplicateAssetResponse,
    ErrorResponse,
)

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _to_list_response(theme_id: str, category: Optional[str], assets: Iterable[Asset]) -> AssetListResponse:
    data = [AssetResponse.model_validate(asset) for asset in assets]
    return AssetListResponse(
        theme_id=theme_id,
        category=resolve_category(category).value,
        total=len(data),
        data=data,
    )


@router.get("/templates/categories", response_model=CategoryListResponse, summary="List template categories")
async def list_categories() -> CategoryListResponse:
    return CategoryListResponse(
        categories=[
            CategoryTab(id=category.value, label=label, panel_id=f"{category.value}-content")
            for category, label in CATEGORY_TABS
        ]
    )


@router.get(
    "/templates",
    response_model=AssetListResponse,
    responses=ERROR_RESPONSES,
    summary="List templates of the main theme",
)
async def list_main_theme_templates(
    category: Optional[str] = None,
    service: TemplateAssetService = Depends(get_template_service),
) -> AssetListResponse:
    theme, assets = await service.list_main_theme_assets(category)
    return _to_list_response(theme.id, category, assets)


@router.get(
    "/themes/{theme_id}/templates",
    response_model=AssetListResponse,
    responses=ERROR_RESPONSES,
    summary="List templates of a theme",
)
async def list_theme_templates(
    theme_id: str,
    category: Optional[str] = None,
    service: TemplateAssetService = Depends(get_template_service),
) -> AssetListResponse:
    assets = await service.list_category_assets(theme_id, category)
    return _to_list_response(theme_id, category, assets)


@router.post(
    "/templates/duplicate",
    response_model=DuplicateAssetResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Duplicate a template under a new key",
)
async def duplicate_template(
    payload: DuplicateAssetRequest,
    service: TemplateAssetService = Depends(get_template_service),
) -> DuplicateAssetResponse:
    request = await service.duplicate_asset(payload.theme_id, payload.source_key)
    return DuplicateAssetResponse(
        new_key=request.new_key,
        source_key=request.source_key,
        theme_id=request.theme_id,
        category=request.category.value,
    )
