"""Exception handlers rendering service errors as JSON bodies."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.exceptions import ChatServiceError, ServiceError
from app.models import ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
        # provider failures are already logged where they are translated
        if not isinstance(exc, ChatServiceError):
            logger.info(
                "Request failed",
                extra={
                    "http_method": request.method,
                    "request_path": request.url.path,
                    "status_code": exc.http_status,
                    "error_code": exc.code,
                },
            )
        return JSONResponse(
            status_code=exc.http_status,
            content=ErrorResponse(error=exc.message).model_dump(),
        )
