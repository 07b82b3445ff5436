"""Configuration settings for the lifecycle record store."""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Runtime Configuration
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FILE: Optional[Path] = Field(
        default=None, description="Optional file that also receives log output"
    )

    # Store Configuration
    APPOINTMENT_ID_PREFIX: str = Field(
        default="consulta", description="Prefix for appointment ids (e.g. consulta-1)"
    )
    ID_START: int = Field(default=1, ge=0, description="First id handed out by each store")

    # Presentation Configuration
    TIMESTAMP_FORMAT: str = Field(
        default="%d/%m/%Y %H:%M:%S", description="strftime format used when rendering timestamps"
    )

    def create_directories(self) -> None:
        """Create the parent directory of the log file, if one is configured."""
        if self.LOG_FILE is not None:
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()

    def __repr__(self) -> str:
        """String representation of settings."""
        return f"Settings(log_level={self.LOG_LEVEL}, debug={self.DEBUG})"
