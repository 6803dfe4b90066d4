"""Pydantic models shared across application layers."""

from typing import Any

from pydantic import BaseModel, Field


class MessageIn(BaseModel):
    """Incoming chat request body."""

    message: str = Field(min_length=1, description="User supplied text prompt.")


class ChatCompletion(BaseModel):
    """Result of a single provider call."""

    content: str = ""
    model: str
    usage: Any = None


class ChatResponse(BaseModel):
    """Successful reply returned to HTTP clients."""

    response: str
    model: str
    usage: Any = None


class ErrorResponse(BaseModel):
    """Error body returned to HTTP clients."""

    error: str
