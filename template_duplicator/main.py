import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from template_duplicator import __version__
from template_duplicator.core.config import get_settings
from template_duplicator.core.logging import configure_logging
from template_duplicator.interfaces.http import create_api_router
from template_duplicator.interfaces.http.errors import register_error_handlers

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)
    logger.info("Serving templates for %s", settings.shop_domain)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Browse and duplicate storefront theme templates",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "template_duplicator.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
