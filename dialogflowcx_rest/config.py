"""
Configuration management for the Dialogflow CX REST client.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Google Cloud Platform
    gcp_project_id: str = Field(default="", description="GCP Project ID")
    gcp_credentials_path: Optional[str] = Field(default=None, description="Path to GCP credentials JSON")

    # Dialogflow CX
    dialogflow_agent_id: str = Field(default="", description="Dialogflow CX Agent ID")
    dialogflow_location: str = Field(default="global", description="Dialogflow location")
    dialogflow_base_url: Optional[str] = Field(
        default=None,
        description="Explicit API root, overrides the endpoint derived from the location"
    )

    # API Settings
    api_timeout: int = Field(default=30, description="API request timeout in seconds")

    def get_dialogflow_base_url(self, location: Optional[str] = None) -> str:
        """
        Get the API root for a Dialogflow location.

        Agents outside ``global`` must be reached through their regional
        endpoint. The returned URL always ends with a slash.
        """
        if self.dialogflow_base_url and location is None:
            base_url = self.dialogflow_base_url
        else:
            location = location or self.dialogflow_location
            if location == "global":
                base_url = "https://dialogflow.googleapis.com/"
            else:
                base_url = f"https://{location}-dialogflow.googleapis.com/"

        if not base_url.endswith("/"):
            base_url += "/"
        return base_url

    def get_dialogflow_agent_path(self) -> str:
        """Get fully qualified Dialogflow agent path."""
        return (
            f"projects/{self.gcp_project_id}/"
            f"locations/{self.dialogflow_location}/"
            f"agents/{self.dialogflow_agent_id}"
        )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
