"""Custom exceptions shared across the service."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for failures surfaced to API callers.

    ``status_code`` records an upstream HTTP status when there is one;
    ``http_status`` is what the caller receives.
    """

    message: str
    code: str = "service_error"
    status_code: int | None = None

    http_status: ClassVar[int] = 500

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class InvalidInputError(ServiceError):
    """Raised when the request body does not carry a usable message."""

    code: str = "invalid_input"

    http_status: ClassVar[int] = 400


@dataclass(eq=False)
class MissingConfigurationError(ServiceError):
    """Raised when a setting required to serve the request is absent."""

    code: str = "missing_configuration"


@dataclass(eq=False)
class ChatServiceError(ServiceError):
    """Raised when the completion provider fails to return a response."""

    code: str = "chat_error"
