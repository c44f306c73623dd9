"""Pydantic schemas used across the project."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AssetResponse(BaseModel):
    key: str
    theme_id: str
    updated_at: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class AssetListResponse(BaseModel):
    theme_id: str
    category: str
    total: int
    data: list[AssetResponse]


class CategoryTab(BaseModel):
    id: str
    label: str
    panel_id: str


class CategoryListResponse(BaseModel):
    categories: list[CategoryTab]


class DuplicateAssetRequest(BaseModel):
    source_key: Optional[str] = Field(default=None, description="Key of the asset to copy")
    theme_id: Optional[str] = Field(default=None, description="Theme owning the source asset")

    model_config = ConfigDict(coerce_numbers_to_str=True)


class DuplicateAssetResponse(BaseModel):
    status: str = "success"
    new_key: str
    source_key: str
    theme_id: str
    category: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
