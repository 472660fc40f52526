"""Error types raised by the image analysis API.

Handlers never build error responses themselves; they raise one of these and
the exception handlers registered in :mod:`app.main` turn it into the JSON
envelope ``{"error": <message>}``.
"""
from __future__ import annotations

from typing import Literal

GENERIC_ANALYSIS_ERROR = "An error occurred during image analysis"

ValidationKind = Literal["missing", "malformed"]

RemoteErrorKind = Literal[
    "invalid_image",
    "authentication",
    "rate_limited",
    "service_error",
    "network",
    "configuration",
    "unknown",
]

# Messages used instead of the collaborator's own text when raw error
# passthrough is disabled.
REMOTE_ERROR_MESSAGES: dict[str, str] = {
    "invalid_image": "The image could not be processed",
    "authentication": "The vision service rejected the configured credentials",
    "rate_limited": "The vision service is throttling requests",
    "service_error": "The vision service failed to process the request",
    "network": "The vision service could not be reached",
    "configuration": "The vision service is not configured",
    "unknown": GENERIC_ANALYSIS_ERROR,
}


class VisionAPIException(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(VisionAPIException):
    """The request body did not carry a usable ``imageUrl``."""

    status_code = 400

    def __init__(self, kind: ValidationKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class RemoteOperationError(VisionAPIException):
    """The vision service call failed, for whatever reason."""

    status_code = 500

    def __init__(self, message: str, *, kind: RemoteErrorKind = "unknown") -> None:
        super().__init__(message)
        self.kind = kind

    def public_message(self, *, expose: bool = True) -> str:
        if expose and self.message:
            return self.message
        return REMOTE_ERROR_MESSAGES.get(self.kind, GENERIC_ANALYSIS_ERROR)
