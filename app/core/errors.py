import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class EntityNotFoundException(Exception):
    """Raised when a lookup by id has no match.

    entity_type may be a model class (its class name is used) or a display name.
    """

    def __init__(self, entity_type: type | str, id: Any):
        self.entity_name = entity_type if isinstance(entity_type, str) else entity_type.__name__
        self.id = id
        super().__init__(f"{self.entity_name} with id {id} not found")


def register_exception_handlers(app: FastAPI) -> None:
    """Render application errors as {"type": ..., "message": ...} bodies."""

    @app.exception_handler(EntityNotFoundException)
    async def handle_entity_not_found(request: Request, exc: EntityNotFoundException):
        logger.info(f"{request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=404,
            content={"type": type(exc).__name__, "message": str(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"type": "HTTPException", "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )
