"""Vision analysis endpoints.

All seven endpoints share one template: validate ``imageUrl``, make exactly
one call on the injected :class:`VisionClient`, and return either the whole
result or a single sub-field of it. Errors are raised, not returned; the
application's exception handlers shape them into ``{"error": ...}``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from fastapi import APIRouter, Depends, Request, Response

from app.dependencies import get_vision_client
from app.errors import RemoteOperationError
from app.handlers.validation import require_image_url
from app.models import AnalysisRequest, ErrorResponse
from app.services.vision import VisionClient

router = APIRouter(prefix="/api/vision", tags=["Vision Analysis"])
logger = logging.getLogger(__name__)

ANALYZE_FEATURES = (
    "ImageType",
    "Faces",
    "Adult",
    "Categories",
    "Color",
    "Tags",
    "Description",
    "Objects",
    "Brands",
)
ANALYZE_DETAILS = ("Landmarks",)

RemoteCall = Callable[[VisionClient, str], Awaitable[dict[str, Any]]]


def _whole(result: Any) -> Any:
    return result


def _field(key: str) -> Callable[[Any], Any]:
    def project(result: Any) -> Any:
        return result.get(key) if isinstance(result, dict) else None

    return project


@dataclass(frozen=True)
class VisionOperation:
    name: str
    summary: str
    call: RemoteCall
    project: Callable[[Any], Any] = _whole

    @property
    def path(self) -> str:
        return f"{router.prefix}/{self.name}"


OPERATIONS: tuple[VisionOperation, ...] = (
    VisionOperation(
        "analyze",
        "Comprehensive image analysis",
        lambda client, url: client.analyze_image(url, ANALYZE_FEATURES, details=ANALYZE_DETAILS),
    ),
    VisionOperation(
        "tags",
        "Detect tags in an image",
        lambda client, url: client.analyze_image(url, ("Tags",)),
        _field("tags"),
    ),
    VisionOperation(
        "objects",
        "Detect objects in an image",
        lambda client, url: client.detect_objects(url),
    ),
    VisionOperation(
        "describe",
        "Get image description",
        lambda client, url: client.describe_image(url),
    ),
    VisionOperation(
        "text",
        "Recognize text in an image",
        lambda client, url: client.recognize_printed_text(url, detect_orientation=False),
    ),
    VisionOperation(
        "faces",
        "Detect faces in an image",
        lambda client, url: client.analyze_image(url, ("Faces",)),
        _field("faces"),
    ),
    VisionOperation(
        "colors",
        "Analyze colors in an image",
        lambda client, url: client.analyze_image(url, ("Color",)),
        _field("color"),
    ),
)

# The body is read by ``require_image_url`` so FastAPI cannot infer it.
_REQUEST_BODY_DOC = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": AnalysisRequest.model_json_schema(by_alias=True)}},
    }
}

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Server error"},
}


def make_endpoint(operation: VisionOperation) -> Callable[..., Awaitable[Any]]:
    """Build the request handler for one :class:`VisionOperation`."""

    async def endpoint(
        request: Request,
        body: AnalysisRequest = Depends(require_image_url),
        client: VisionClient = Depends(get_vision_client),
    ):
        try:
            result = await operation.call(client, body.image_url)
        except RemoteOperationError:
            raise
        except Exception as exc:
            raise RemoteOperationError(str(exc)) from exc

        if await request.is_disconnected():
            logger.info("Client left before %s finished; dropping response", operation.path)
            return Response()

        return operation.project(result)

    endpoint.__name__ = f"{operation.name}_image"
    endpoint.__doc__ = operation.summary
    return endpoint


for _operation in OPERATIONS:
    router.add_api_route(
        f"/{_operation.name}",
        make_endpoint(_operation),
        methods=["POST"],
        summary=_operation.summary,
        response_description="Successful analysis",
        responses=_ERROR_RESPONSES,
        openapi_extra=_REQUEST_BODY_DOC,
    )
