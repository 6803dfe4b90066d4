"""FastAPI application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import Depends, FastAPI

from app import __version__
from app.chat_handlers import chat_endpoint
from app.config import Settings, get_settings
from app.exception_handlers import register_exception_handlers
from app.logging import configure_logging
from app.models import ChatResponse, ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared provider client on startup and close it on shutdown."""

    async with httpx.AsyncClient() as client:
        app.state.http_client = client
        yield
        del app.state.http_client


def create_app() -> FastAPI:
    """Application factory."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Groq Chat Relay",
        version=__version__,
        lifespan=lifespan,
    )
    register_exception_handlers(app)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/version")
    async def version(settings: Settings = Depends(get_settings)) -> dict[str, str]:
        return {"version": __version__, "environment": settings.environment}

    app.add_api_route(
        "/api/chat",
        chat_endpoint,
        methods=["POST"],
        response_model=ChatResponse,
        response_model_exclude_unset=True,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )

    return app


app = create_app()
