"""
Application configuration.

Settings are read from environment variables when the ``Settings`` object is
created. Every field has a default so the API runs without any setup.
"""

from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(case_sensitive=False)

    app_name: str = Field(default="JUnit Reporting Examples API", description="API title")
    app_version: str = Field(default="1.0.0", description="API version")
    log_level: str = Field(default="INFO", description="Root logging level")
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, description="Bind port")

    # Simulated latency awaited by every UserService operation
    user_service_latency_ms: float = Field(default=10, ge=0)
    flaky_failure_rate: float = Field(default=0.3, ge=0, le=1)
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Comma-separated list of allowed origins"
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


def get_settings() -> Settings:
    """Build a fresh Settings object from the current environment."""
    return Settings()


settings = get_settings()
