"""Configuration system for the FreshStart IL document service.

This module provides Pydantic Settings-based configuration with environment
variable support and sensible defaults for persistence and document
generation.

Usage:
    from freshstart_service.config import FreshStartConfig

    # Load from environment variables and .env file
    config = FreshStartConfig()

    # Access database settings
    print(config.db.url)

    # Access document settings
    if config.documents.flatten_official_forms:
        print(f"Filling templates from {config.documents.forms_dir}")
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    """Database connection settings.

    Environment Variables:
        FRESHSTART_DB_URL: SQLAlchemy database URL
        FRESHSTART_DB_ECHO: Log emitted SQL statements
    """

    model_config = SettingsConfigDict(
        env_prefix="FRESHSTART_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default="sqlite:///./freshstart.db",
        description="SQLAlchemy database URL",
    )
    echo: bool = Field(
        default=False,
        description="Log every SQL statement",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure the database URL is not empty."""
        if not v or not v.strip():
            raise ValueError("Database URL cannot be empty")
        return v.strip()

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class DocumentConfig(BaseSettings):
    """Document generation settings.

    Environment Variables:
        FRESHSTART_DOCUMENTS_FORMS_DIR: Directory holding official form templates
        FRESHSTART_DOCUMENTS_FLATTEN_OFFICIAL_FORMS: Mark filled form fields read-only
        FRESHSTART_DOCUMENTS_PAGE_COMPRESSION: Compress summary PDF page streams
    """

    model_config = SettingsConfigDict(
        env_prefix="FRESHSTART_DOCUMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    forms_dir: Path = Field(
        default=Path("./forms"),
        description="Directory containing blank official form templates",
    )
    flatten_official_forms: bool = Field(
        default=True,
        description="Default flatten setting for official form generation",
    )
    page_compression: bool = Field(
        default=False,
        description="Compress page content streams in summary PDFs",
    )


class FreshStartConfig(BaseSettings):
    """Root configuration for the FreshStart IL service.

    Environment Variables:
        FRESHSTART_ENV: Environment name (development, staging, production, test)
        FRESHSTART_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        # Load all configuration from environment
        config = FreshStartConfig()

        # Override specific settings
        config = FreshStartConfig(
            env="test",
            db=DatabaseConfig(url="sqlite://"),
            documents=DocumentConfig(forms_dir="tests/forms"),
        )
    """

    model_config = SettingsConfigDict(
        env_prefix="FRESHSTART_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment settings
    env: str = Field(
        default="development",
        description="Environment name (development, staging, production, test)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    # Nested configuration
    db: DatabaseConfig = Field(default_factory=DatabaseConfig)
    documents: DocumentConfig = Field(default_factory=DocumentConfig)

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        valid_envs = {"development", "staging", "production", "test"}
        v_lower = v.lower().strip()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of: {valid_envs}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.env == "development"

    @property
    def is_debug(self) -> bool:
        """Check if debug logging is enabled."""
        return self.log_level == "DEBUG"
