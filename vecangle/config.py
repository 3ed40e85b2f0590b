"""Application configuration using Pydantic Settings.

All configuration is loaded from environment variables prefixed with
``VECANGLE_`` or from a local ``.env`` file.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class NanPosition(str, Enum):
    """Where pairs with an undefined (NaN) angle are placed in the ranking."""

    FIRST = "first"
    LAST = "last"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="VECANGLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    # Ranking settings
    default_input: str = Field(
        default="test.txt",
        description="Input file read when none is given on the command line",
    )
    precision: int = Field(
        default=6,
        ge=0,
        le=17,
        description="Digits after the decimal point in reported angles",
    )
    nan_position: NanPosition = Field(
        default=NanPosition.LAST,
        description="Placement of NaN angles in the sorted output",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()
