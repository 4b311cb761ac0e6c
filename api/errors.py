import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dbase.errors import StoreUnavailable

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Missing or malformed input; answered with 400 and a short message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
        logger.exception("Store unavailable while handling %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"error": "Database is unavailable"})
