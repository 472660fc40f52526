import pytest

from app.config import Settings

ENV_VARS = [
    "HOST", "PORT", "LOG_LEVEL", "AZURE_API_KEY", "AZURE_ENDPOINT", "AZURE_API_VERSION",
    "AZURE_TIMEOUT", "API_BASE_URL", "EXPOSE_REMOTE_ERRORS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_need_no_environment():
    settings = Settings(_env_file=None)

    assert settings.port == 5000
    assert settings.azure_api_key == ""
    assert settings.azure_endpoint == ""
    assert settings.expose_remote_errors is True
    assert settings.docs_url == "http://localhost:5000/api-docs"


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("AZURE_API_KEY", "secret")
    monkeypatch.setenv("AZURE_ENDPOINT", "https://vision.cognitiveservices.azure.com/")
    monkeypatch.setenv("API_BASE_URL", "https://api.example.com/")
    monkeypatch.setenv("EXPOSE_REMOTE_ERRORS", "false")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.azure_api_key == "secret"
    assert settings.azure_endpoint == "https://vision.cognitiveservices.azure.com/"
    assert settings.expose_remote_errors is False
    assert settings.docs_url == "https://api.example.com/api-docs"


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("AZURE_API_KEY=from-file\nPORT=7000\n")

    settings = Settings(_env_file=env_file)

    assert settings.azure_api_key == "from-file"
    assert settings.port == 7000
