from __future__ import annotations

from fastapi import Request

from app.errors import RemoteOperationError
from app.services.vision import VisionClient


def get_vision_client(request: Request) -> VisionClient:
    """Return the shared vision client created by the application lifespan."""
    client = getattr(request.app.state, "vision_client", None)
    if client is None:
        raise RemoteOperationError("Vision client is not initialised", kind="configuration")
    return client
