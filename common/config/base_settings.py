"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        API_BASE_URL: str = "https://example.com"

    settings = Settings()
    print(settings.HTTP_TIMEOUT_SECONDS)
"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Runtime Settings
    # ==========================================================================
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # ==========================================================================
    # Logging
    # ==========================================================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==========================================================================
    # HTTP Client Settings
    # ==========================================================================
    HTTP_TIMEOUT_SECONDS: float = 15.0

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"

    def required_settings(self) -> List[str]:
        """
        Names of settings that must be non-empty.

        Override in subclasses to extend the list.
        """
        return []

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        for name in self.required_settings():
            if not getattr(self, name, None):
                errors.append(f"{name} is required")

        if self.HTTP_TIMEOUT_SECONDS <= 0:
            errors.append("HTTP_TIMEOUT_SECONDS must be positive")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
