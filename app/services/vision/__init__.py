from .azure import AzureVisionClient, AzureVisionError
from .base import VisionClient

__all__ = [
    "AzureVisionClient",
    "AzureVisionError",
    "VisionClient",
]
