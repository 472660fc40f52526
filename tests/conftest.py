import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from app.config import Settings
from app.dependencies import get_vision_client
from app.main import create_app
from app.services.vision import VisionClient

IMAGE_URL = "https://example.com/images/cat.jpg"

COMPOSITE_RESULT = {
    "tags": [{"name": "cat", "confidence": 0.99}, {"name": "indoor", "confidence": 0.87}],
    "faces": [{"age": 23, "gender": "Female", "faceRectangle": {"left": 1, "top": 2, "width": 3, "height": 4}}],
    "color": {"dominantColorForeground": "White", "dominantColors": ["White"], "isBwImg": False},
    "requestId": "3c3e3d6a",
}
OBJECTS_RESULT = {"objects": [{"object": "cat", "confidence": 0.9}], "requestId": "a1"}
DESCRIBE_RESULT = {"description": {"tags": ["cat"], "captions": [{"text": "a cat on a sofa", "confidence": 0.8}]}}
TEXT_RESULT = {"language": "en", "orientation": "Up", "regions": [{"lines": [{"words": [{"text": "HELLO"}]}]}]}


def make_settings(**overrides) -> Settings:
    values = {
        "azure_api_key": "test-key",
        "azure_endpoint": "https://westeurope.api.cognitive.microsoft.com",
        "api_base_url": "http://testserver",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_vision_client() -> AsyncMock:
    client = AsyncMock(spec=VisionClient)
    client.analyze_image.return_value = COMPOSITE_RESULT
    client.detect_objects.return_value = OBJECTS_RESULT
    client.describe_image.return_value = DESCRIBE_RESULT
    client.recognize_printed_text.return_value = TEXT_RESULT
    return client


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def vision_client():
    return make_vision_client()


@pytest.fixture
def client(settings, vision_client):
    """Test client with the vision client dependency replaced by a mock."""
    app = create_app(settings)
    app.dependency_overrides[get_vision_client] = lambda: vision_client
    return TestClient(app)
