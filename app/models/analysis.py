from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AnalysisRequest(BaseModel):
    """Body accepted by every ``/api/vision/*`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(..., alias="imageUrl", description="URL of the image to analyze")


class ErrorResponse(BaseModel):
    error: str


class EndpointIndex(BaseModel):
    analyze: str
    tags: str
    objects: str
    describe: str
    text: str
    faces: str
    colors: str


class ServiceInfo(BaseModel):
    """Payload of ``GET /``."""

    message: str
    documentation: str
    note: str
    endpoints: EndpointIndex
