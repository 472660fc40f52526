"""Azure Computer Vision REST API wrapper.

Covers the four operations the API exposes: composite analysis, object
detection, description and printed-text recognition (OCR). Every call posts
``{"url": <image url>}`` and returns the decoded JSON body untouched.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx

from app.config import Settings
from app.errors import RemoteErrorKind, RemoteOperationError

from .base import VisionClient

logger = logging.getLogger(__name__)


class AzureVisionError(RemoteOperationError):
    """Raised when the Computer Vision API call fails."""

    def __init__(
        self,
        status: int | None,
        message: str,
        response_json: dict[str, Any] | None = None,
        *,
        kind: RemoteErrorKind | None = None,
    ) -> None:
        super().__init__(message, kind=kind or _kind_for_status(status))
        self.status = status
        self.response_json = response_json or {}


class AzureVisionClient(VisionClient):
    """Async client for the Azure Computer Vision ``vision/<version>`` API."""

    name = "azure"

    _KEY_HEADER = "Ocp-Apim-Subscription-Key"

    def __init__(
        self,
        *,
        api_key: str,
        endpoint: str,
        version: str = "v3.2",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._version = version
        self._base_url = f"{self._endpoint}/vision/{self._version}"
        self._headers = {self._KEY_HEADER: api_key, "Content-Type": "application/json"}
        self._client = httpx.AsyncClient(timeout=timeout, headers=self._headers, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AzureVisionClient":
        return cls(
            api_key=settings.azure_api_key,
            endpoint=settings.azure_endpoint,
            version=settings.azure_api_version,
            timeout=settings.azure_timeout,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def analyze_image(
        self,
        image_url: str,
        visual_features: Sequence[str],
        details: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        params: dict[str, str] = {"visualFeatures": ",".join(visual_features)}
        if details:
            params["details"] = ",".join(details)
        return await self._post("analyze", image_url, params)

    async def detect_objects(self, image_url: str) -> dict[str, Any]:
        return await self._post("detect", image_url)

    async def describe_image(self, image_url: str) -> dict[str, Any]:
        return await self._post("describe", image_url)

    async def recognize_printed_text(
        self, image_url: str, *, detect_orientation: bool = False
    ) -> dict[str, Any]:
        params = {"detectOrientation": "true" if detect_orientation else "false"}
        return await self._post("ocr", image_url, params)

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _post(
        self, operation: str, image_url: str, params: dict[str, str] | None = None
    ) -> dict[str, Any]:
        if not self._endpoint:
            raise AzureVisionError(None, "Azure endpoint is not configured", kind="configuration")

        url = f"{self._base_url}/{operation}"
        logger.debug("POST %s params=%s image=%s", url, params, image_url)
        try:
            resp = await self._client.post(url, params=params, json={"url": image_url})
        except httpx.HTTPError as exc:
            raise AzureVisionError(None, str(exc) or exc.__class__.__name__, kind="network") from exc

        if resp.status_code >= 400:
            try:
                err_json = resp.json()
            except ValueError:
                err_json = None
            raise AzureVisionError(resp.status_code, _error_message(resp, err_json), err_json)

        try:
            return resp.json()
        except ValueError as exc:
            raise AzureVisionError(
                resp.status_code, "Vision service returned a non-JSON response", kind="service_error"
            ) from exc


# ------------------------------------------------------------------
# Helper functions
# ------------------------------------------------------------------

def _kind_for_status(status: int | None) -> RemoteErrorKind:
    if status in (400, 415):
        return "invalid_image"
    if status in (401, 403):
        return "authentication"
    if status == 429:
        return "rate_limited"
    if status is not None and status >= 500:
        return "service_error"
    return "unknown"


def _error_message(resp: httpx.Response, err_json: Any) -> str:
    """Pull the human readable message out of an Azure error body.

    v3.x wraps it as ``{"error": {"code": ..., "message": ...}}``; older
    versions and the gateway put ``code``/``message`` at the top level.
    """
    if isinstance(err_json, dict):
        inner = err_json.get("error")
        if isinstance(inner, dict) and inner.get("message"):
            return str(inner["message"])
        if err_json.get("message"):
            return str(err_json["message"])
    return resp.text or f"Vision service returned HTTP {resp.status_code}"
