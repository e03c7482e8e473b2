"""
Configuration Settings

Centralized configuration management using Pydantic and environment variables.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All sensitive values should be stored in .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Database settings
    database_url: str = "sqlite:///./directory.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_pool_timeout: int = 30
    database_pool_recycle: int = 3600
    database_echo: bool = False  # Set to True for SQL query logging

    # Geographic settings
    default_radius_km: float = 10.0
    earth_radius_km: float = 6371.0
    suburbs_csv: Optional[str] = None  # Alternative gazetteer dataset

    # Auth settings
    admin_email_domain: str = "@admin.local"
    jwt_secret_key: str = "directory-secret-key-change-in-production-use-env-var"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # API settings
    cors_origins: List[str] = ["http://localhost:3000"]

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "json"

    # Application settings
    environment: str = "development"
    debug: bool = False


# Singleton instance
settings = Settings()
