"""Liveness endpoint."""

from fastapi import APIRouter

from template_duplicator import __version__
from template_duplicator.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Service liveness")
async def health() -> HealthResponse:
    return HealthResponse(version=__version__)
