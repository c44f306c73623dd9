from fastapi import APIRouter

from template_duplicator.interfaces.http.routers import health, templates


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(health.router, tags=["health"])
    router.include_router(templates.router, tags=["templates"])
    return router


__all__ = [
    "create_api_router",
]
