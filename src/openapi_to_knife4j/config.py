"""
Configuration settings.

Values are read from environment variables prefixed with ``KNIFE4J_`` or
from a ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Conversion settings."""

    model_config = SettingsConfigDict(
        env_prefix="KNIFE4J_", env_file=".env", extra="ignore"
    )

    # Display name shown in the info block and the resource list
    server_name: str = "default"

    # Version markers of the produced documents
    openapi_version: str = "3.0.1"
    swagger_version: str = "3.0.3"

    # Server entry used when the document declares none
    default_server_url: str = "http://localhost:8000"
    default_server_description: str = "Generated server url"

    # Request body parameter trees are cut below this depth
    max_parameter_depth: int = Field(default=32, ge=1)

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get the settings singleton, creating it if needed."""
    return Settings()
