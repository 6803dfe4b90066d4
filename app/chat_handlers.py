"""HTTP handler for the chat completion endpoint."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.dependencies import get_chat_service
from app.exceptions import ChatServiceError, InvalidInputError, MissingConfigurationError
from app.models import ChatResponse, MessageIn
from app.services.chat_service import ChatService

logger = logging.getLogger(__name__)

INVALID_MESSAGE = "Message field is required and must be a string"
MISSING_API_KEY = "GROQ_API_KEY is not configured"
UNEXPECTED_ERROR = "An unexpected error occurred"


async def chat_endpoint(
    request: Request,
    chat_service: Annotated[ChatService, Depends(get_chat_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ChatResponse:
    """Relay one user message to the completion provider: body → validate → chat → JSON."""

    try:
        payload = MessageIn.model_validate_json(await request.body())
    except ValueError as exc:
        raise InvalidInputError(INVALID_MESSAGE) from exc

    if not settings.groq_api_key:
        raise MissingConfigurationError(MISSING_API_KEY)

    try:
        completion = await chat_service.complete(payload.message)
    except ChatServiceError as exc:
        raise ChatServiceError(
            exc.message or UNEXPECTED_ERROR, status_code=exc.status_code
        ) from exc
    except Exception as exc:
        logger.exception("Error calling chat provider")
        raise ChatServiceError(str(exc) or UNEXPECTED_ERROR) from exc

    reply = ChatResponse(response=completion.content, model=completion.model)
    # usage is echoed only when the provider sent one
    if "usage" in completion.model_fields_set:
        reply.usage = completion.usage
    return reply
