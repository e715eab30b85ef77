"""
SDK configuration management.

Uses pydantic-settings for type-safe environment variable parsing.
All configuration is centralized here so the session manager factory
can wire transports and session stores without scattering os.getenv()
calls throughout the codebase.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    SDK settings with validation and type coercion.

    Values are loaded from environment variables or .env file.
    All fields have sensible defaults for talking to the public host.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Host server
    host_url: str = "https://api.oxvs.net"
    api_prefix: str = "api/v1"

    # None disables the transport timeout entirely
    request_timeout_seconds: Optional[float] = None

    # Session persistence
    # Options: "memory", "file"
    session_backend: Literal["memory", "file"] = "memory"
    session_file_path: Path = Path.home() / ".oxvs" / "session.json"
    session_key: str = "oxvsUser"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_file_backend(self) -> bool:
        """Check if sessions are persisted on disk."""
        return self.session_backend == "file"


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings singleton.

    The @lru_cache ensures we only parse environment once. Tests and
    embedding applications that need isolated values should build their
    own Settings(...) and pass it to the factories instead.
    """
    return Settings()


# Convenience export for direct import
settings = get_settings()
