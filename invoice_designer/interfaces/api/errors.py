"""Map domain and request validation errors onto JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from invoice_designer.domain.errors import TemplateNotFoundError, TemplateValidationError

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header"}


def _field_from_location(location: tuple | list) -> str:
    parts = list(location)
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los manejadores que traducen errores a respuestas ``{message, field}``."""

    @app.exception_handler(TemplateNotFoundError)
    async def _not_found(_: Request, exc: TemplateNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})

    @app.exception_handler(TemplateValidationError)
    async def _invalid_template(_: Request, exc: TemplateValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(_: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {"msg": "Invalid request", "loc": ()}
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": first.get("msg", "Invalid request"),
                "field": _field_from_location(first.get("loc", ())),
            },
        )

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )


__all__ = ["register_exception_handlers"]
