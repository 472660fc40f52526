from __future__ import annotations

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    # Server
    host: str = Field("0.0.0.0", description="Interface the server binds to.")
    port: int = Field(5000, description="Listening port.")
    log_level: str = Field("INFO", description="Root logging level.")

    # Azure Computer Vision
    azure_api_key: str = Field("", description="Computer Vision subscription key.")
    azure_endpoint: str = Field("", description="Computer Vision resource endpoint, e.g. https://<name>.cognitiveservices.azure.com")
    azure_api_version: str = Field("v3.2")
    azure_timeout: float = Field(30.0, description="Transport timeout for vision calls (seconds).")

    # Public surface
    api_base_url: str = Field("http://localhost:5000", description="Public base URL used in documentation links.")
    expose_remote_errors: bool = Field(
        True,
        description="If false, vision service error text is replaced by a fixed message per error kind.",
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def docs_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/api-docs"


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
