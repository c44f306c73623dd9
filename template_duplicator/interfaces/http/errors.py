"""Translation of template errors into failure payloads."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from template_duplicator.modules.templates import InvalidInputError, TemplateAssetError

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def template_error_handler(request: Request, exc: TemplateAssetError) -> JSONResponse:
    # diagnostics were logged where the error was raised
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.public_message},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(TemplateAssetError, template_error_handler)


__all__ = ["register_error_handlers"]
