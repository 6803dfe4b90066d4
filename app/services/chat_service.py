"""Adapter for Groq chat completions."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import Settings
from app.exceptions import ChatServiceError
from app.models import ChatCompletion

logger = logging.getLogger(__name__)


class ChatService:
    """Wrapper around Groq's OpenAI-compatible chat completions endpoint."""

    _path = "/chat/completions"

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    @property
    def endpoint(self) -> str:
        return self._settings.groq_base_url.rstrip("/") + self._path

    async def complete(self, prompt: str) -> ChatCompletion:
        """Send ``prompt`` as a single-message conversation and return the reply."""

        payload = {
            "model": self._settings.chat_model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._settings.chat_temperature,
            "max_tokens": self._settings.chat_max_tokens,
        }

        headers = {
            "Authorization": f"Bearer {self._settings.groq_api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await self._client.post(
                self.endpoint,
                headers=headers,
                json=payload,
                timeout=self._settings.chat_timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Chat completion timed out", exc_info=exc)
            raise ChatServiceError("Chat service timed out") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Chat completion failed",
                extra={
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text,
                },
            )
            raise ChatServiceError(
                _upstream_error_message(exc.response) or "Chat service returned an error",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected chat HTTP error")
            raise ChatServiceError("Chat service request failed") from exc

        try:
            data = response.json()
            choices = data["choices"]
            if not isinstance(choices, list):
                raise TypeError("choices must be a list")
        except (ValueError, KeyError, TypeError) as exc:
            logger.error("Malformed chat response", extra={"raw_response": response.text})
            raise ChatServiceError("Invalid chat response payload") from exc

        completion = ChatCompletion(
            content=_first_choice_content(choices), model=self._settings.chat_model
        )
        if "usage" in data:
            completion.usage = data["usage"]
        return completion


def _first_choice_content(choices: list[Any]) -> str:
    """Return the first choice's message content, or an empty string."""

    if not choices:
        return ""
    choice = choices[0]
    if not isinstance(choice, dict):
        return ""
    message = choice.get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


def _upstream_error_message(response: httpx.Response) -> str | None:
    """Extract ``error.message`` from an OpenAI-style error body."""

    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None
