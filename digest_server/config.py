"""
Configuration module for the digest server.
Loads settings from environment variables with sensible defaults.
"""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=3000, alias="API_PORT")

    # Paths
    static_dir: str = Field(default=".", alias="STATIC_DIR")
    env_file: str = Field(default=".env", alias="ENV_FILE")  # relative to static_dir

    # Token lookup
    token_key: str = Field(default="READWISE_TOKEN", alias="TOKEN_KEY")

    # Logging
    log_level: str = Field(default="info", alias="LOG_LEVEL")

    class Config:
        case_sensitive = False
        extra = "ignore"

    @property
    def static_path(self) -> Path:
        return Path(self.static_dir).resolve()

    @property
    def env_file_path(self) -> Path:
        """Resolved location of the key=value file."""
        path = Path(self.env_file)
        if not path.is_absolute():
            path = self.static_path / path
        return path


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
