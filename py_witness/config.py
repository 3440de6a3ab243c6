"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings pulled from WITNESS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WITNESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        # The .env file belongs to the host application; skip its other keys
        extra="ignore",
    )

    # Board Configuration
    default_width: int = Field(default=4, ge=1, description="Default board width in cells")
    default_height: int = Field(default=4, ge=1, description="Default board height in cells")
    max_width: Optional[int] = Field(default=None, ge=1, description="Max allowed board width, unlimited if unset")
    max_height: Optional[int] = Field(default=None, ge=1, description="Max allowed board height, unlimited if unset")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")


settings = Settings()
