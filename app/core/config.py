"""
App Configuration.

This module defines the global application settings using Pydantic Settings.
It loads configuration variables from environment variables and/or a .env file,
ensuring typed and validated settings for the application.

Attributes:
    settings: The global instance of the Settings class, ready to be imported and used.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application Settings.

    This class defines the configuration for the application, validating
    environment variables against the specified types.

    Attributes:
        PROJECT_NAME: The name of the project (default: "Change Enablement Agent").
        LOG_LEVEL: Root log level passed to setup_logging.
        POLICY_PATH: Optional path to a policy YAML overriding the bundled one.
    """

    # Core
    PROJECT_NAME: str = "Change Enablement Agent"
    LOG_LEVEL: str = "INFO"

    # Policy
    POLICY_PATH: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )


settings = Settings()
