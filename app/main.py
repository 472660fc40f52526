"""FastAPI application for the Azure AI Image Analysis API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.errors import RemoteOperationError, ValidationError
from app.handlers import vision_handler
from app.models import EndpointIndex, ServiceInfo
from app.services.vision import AzureVisionClient, VisionClient

logger = logging.getLogger(__name__)

API_TITLE = "Azure AI Image Analysis"
API_VERSION = "1.0.0"


def create_app(settings: Settings | None = None, vision_client: VisionClient | None = None) -> FastAPI:
    """Build the application.

    ``vision_client`` replaces the Azure client built from ``settings``;
    it is still closed on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if not settings.azure_api_key or not settings.azure_endpoint:
            logger.warning("AZURE_API_KEY or AZURE_ENDPOINT is not set; analysis calls will fail")
        client = vision_client or AzureVisionClient.from_settings(settings)
        app.state.vision_client = client
        logger.info("Vision client ready (%s)", client.name)
        try:
            yield
        finally:
            await client.close()
            app.state.vision_client = None

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description="Comprehensive API for Computer Vision Analysis",
        servers=[{"url": settings.api_base_url, "description": "Development server"}],
        docs_url="/api-docs",
        openapi_url="/api-docs/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Rejected %s %s: %s imageUrl", request.method, request.url.path, exc.kind)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RemoteOperationError)
    async def handle_remote_error(request: Request, exc: RemoteOperationError) -> JSONResponse:
        logger.error("Vision call for %s failed (%s): %s", request.url.path, exc.kind, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.public_message(expose=settings.expose_remote_errors)},
        )

    app.include_router(vision_handler.router)

    @app.get("/", response_model=ServiceInfo, include_in_schema=False)
    async def root() -> ServiceInfo:
        return ServiceInfo(
            message=f"Welcome to {API_TITLE} API",
            documentation=settings.docs_url,
            note="Analysis endpoints take a POST with a JSON body: {\"imageUrl\": \"<url>\"}.",
            endpoints=EndpointIndex(**{op.name: op.path for op in vision_handler.OPERATIONS}),
        )

    return app


app = create_app()
