"""Translate domain and validation errors into JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cinebook.errors import ServiceError

logger = logging.getLogger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters are reported as 400 Bad Request."""
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(
            {
                "error": "ValidationError",
                "message": "Invalid request",
                "status": 400,
                "details": {"errors": exc.errors()},
            }
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
