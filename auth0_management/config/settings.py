"""
Client settings.

Settings are loaded from environment variables (a local ``.env`` file is
honoured) and turned into client options by the client builders.
"""

import os
from typing import Optional

import dotenv
from pydantic import BaseModel, Field, field_validator  # type: ignore

dotenv.load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown levels."""
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}")
        return v


class ManagementSettings(BaseModel):
    """Settings for a Management API client."""

    domain: str = Field(default="", description="Tenant domain, e.g. tenant.auth0.com")
    token: Optional[str] = Field(default=None, description="Static Management API access token")
    client_id: Optional[str] = Field(default=None, description="Client ID for the client credentials grant")
    client_secret: Optional[str] = Field(default=None, description="Client secret for the client credentials grant")
    audience: Optional[str] = Field(default=None, description="Token audience, defaults to https://{domain}/api/v2/")
    timeout_in_seconds: float = Field(default=10.0, description="Request timeout in seconds")
    custom_domain: Optional[str] = Field(default=None, description="Custom domain sent on whitelisted endpoints")
    telemetry: bool = Field(default=True, description="Send the Auth0-Client telemetry header")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Strip scheme and trailing slash from the domain."""
        v = v.strip()
        for prefix in ("https://", "http://"):
            if v.startswith(prefix):
                v = v[len(prefix):]
        return v.rstrip("/")

    @classmethod
    def from_env(cls) -> "ManagementSettings":
        """
        Load settings from environment variables.

        Returns:
            ManagementSettings instance with values from environment
        """
        return cls(
            domain=os.getenv("AUTH0_DOMAIN", ""),
            token=os.getenv("AUTH0_TOKEN") or None,
            client_id=os.getenv("AUTH0_CLIENT_ID") or None,
            client_secret=os.getenv("AUTH0_CLIENT_SECRET") or None,
            audience=os.getenv("AUTH0_AUDIENCE") or None,
            timeout_in_seconds=float(os.getenv("AUTH0_TIMEOUT", "10")),
            custom_domain=os.getenv("AUTH0_CUSTOM_DOMAIN") or None,
            telemetry=os.getenv("AUTH0_TELEMETRY", "true").lower() == "true",
            logging=LoggingSettings(
                level=os.getenv("AUTH0_LOG_LEVEL", "WARNING"),
            ),
        )

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return self.model_dump()


# Global settings instance
_settings: Optional[ManagementSettings] = None


def get_settings() -> ManagementSettings:
    """
    Get settings singleton.

    Returns:
        ManagementSettings instance
    """
    global _settings
    if _settings is None:
        _settings = ManagementSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton."""
    global _settings
    _settings = None
