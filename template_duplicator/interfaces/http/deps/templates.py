"""Template asset dependency providers."""

from fastapi import Depends

from template_duplicator.core.container import ApplicationContainer, get_container
from template_duplicator.domain.themes import ThemeStore
from template_duplicator.modules.templates import TemplateAssetService


def get_theme_store(container: ApplicationContainer = Depends(get_container)) -> ThemeStore:
    return container.theme_store()


def get_template_service(
    store: ThemeStore = Depends(get_theme_store),
    container: ApplicationContainer = Depends(get_container),
) -> TemplateAssetService:
    return TemplateAssetService.with_store(store, container.settings)


__all__ = [
    "get_theme_store",
    "get_template_service",
]
