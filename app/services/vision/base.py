from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence


class VisionClient(ABC):
    """Abstract interface for a remote image-analysis service.

    Every operation takes a publicly reachable image URL and returns the
    service's JSON result unchanged. Failures raise
    :class:`app.errors.RemoteOperationError`.
    """

    name: str = "abstract"

    @abstractmethod
    async def analyze_image(
        self,
        image_url: str,
        visual_features: Sequence[str],
        details: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """Composite analysis over the requested feature set."""

    @abstractmethod
    async def detect_objects(self, image_url: str) -> dict[str, Any]:
        ...

    @abstractmethod
    async def describe_image(self, image_url: str) -> dict[str, Any]:
        ...

    @abstractmethod
    async def recognize_printed_text(
        self, image_url: str, *, detect_orientation: bool = False
    ) -> dict[str, Any]:
        ...

    async def close(self) -> None:  # noqa: B027
        """Release transport resources. No-op by default."""
