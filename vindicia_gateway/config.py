"""Gateway settings using Pydantic for environment-based configuration."""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LIVE_ENDPOINT = "https://soap.vindicia.com/soap.pl"
TEST_ENDPOINT = "https://soap.prodtest.sj.vindicia.com/soap.pl"


class GatewaySettings(BaseSettings):
    """Gateway settings loaded from VINDICIA_* environment variables."""

    # Credentials
    username: str = Field(..., description="SOAP API login")
    password: str = Field(..., description="SOAP API password")

    # API
    test_mode: bool = Field(default=False, description="Use the prodtest environment")
    api_version: str = Field(default="18.0", description="SOAP API version")
    endpoint: Optional[str] = Field(
        default=None, description="Override the SOAP endpoint URL"
    )
    timeout: float = Field(default=120.0, description="Request timeout (seconds)")
    user_agent: str = Field(
        default="vindicia-gateway/1.0", description="User agent sent in the auth block"
    )

    # Application
    app_name: str = Field(default="vindicia-gateway", description="Application name")
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="VINDICIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @property
    def endpoint_url(self) -> str:
        """Configured endpoint, or the live/test default."""
        if self.endpoint:
            return self.endpoint
        return TEST_ENDPOINT if self.test_mode else LIVE_ENDPOINT

    @property
    def namespace_version(self) -> str:
        """API version as used in namespaces, e.g. 18.0 -> v18_0."""
        return "v" + self.api_version.replace(".", "_")


@lru_cache()
def get_settings() -> GatewaySettings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return GatewaySettings()
