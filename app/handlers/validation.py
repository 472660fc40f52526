"""Request gate for the vision endpoints.

Rejects bodies without a usable ``imageUrl`` before any remote call is made.
"""
from __future__ import annotations

from typing import Any
from urllib.parse import SplitResult, urlsplit

from fastapi import Request

from app.errors import ValidationError
from app.models import AnalysisRequest

MISSING_URL_MESSAGE = "Image URL is required"
MALFORMED_URL_MESSAGE = "Invalid URL format"

# Schemes whose authority follows the colon after any run of slashes,
# so ``http:/host/a.jpg`` and ``http:host`` still name ``host``.
_SPECIAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def _split(candidate: str) -> SplitResult:
    parts = urlsplit(candidate)
    if not parts.netloc and parts.scheme.lower() in _SPECIAL_SCHEMES:
        rest = candidate[len(parts.scheme) + 1:].lstrip("/\\")
        parts = urlsplit(f"{parts.scheme}://{rest}")
    return parts


def validate_image_url(value: Any) -> str:
    """Return *value* unchanged if it is an absolute URL with scheme and host.

    Whitespace is tolerated in the path, query and fragment but not in the
    host part.

    Raises
    ------
    ValidationError
        ``kind="missing"`` for an absent or empty value, ``kind="malformed"``
        for anything that does not parse as an absolute URL.
    """
    if not value:
        raise ValidationError("missing", MISSING_URL_MESSAGE)
    if not isinstance(value, str):
        raise ValidationError("malformed", MALFORMED_URL_MESSAGE)

    candidate = value.strip()
    if not candidate:
        raise ValidationError("malformed", MALFORMED_URL_MESSAGE)

    try:
        parts = _split(candidate)
        _ = parts.port  # raises ValueError on a non-numeric or out of range port
    except ValueError as exc:
        raise ValidationError("malformed", MALFORMED_URL_MESSAGE) from exc

    if not parts.scheme or not parts.hostname or any(ch.isspace() for ch in parts.netloc):
        raise ValidationError("malformed", MALFORMED_URL_MESSAGE)
    return value


async def require_image_url(request: Request) -> AnalysisRequest:
    """FastAPI dependency: parse the JSON body and validate ``imageUrl``."""
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    image_url = payload.get("imageUrl") if isinstance(payload, dict) else None
    return AnalysisRequest(imageUrl=validate_image_url(image_url))
