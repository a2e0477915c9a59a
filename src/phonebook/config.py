"""
Configuration management for the Phonebook service
"""

from typing import Literal

from pydantic_settings import BaseSettings

StoreBackend = Literal["memory", "remote", "database"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Person store selection
    store_backend: StoreBackend = "memory"
    seed_memory_store: bool = True

    # Remote person source (REST)
    remote_api_url: str = "http://localhost:3000"
    remote_timeout: float = 10.0

    # Database
    database_url: str = "sqlite:///./phonebook.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    sql_echo: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "PHONEBOOK_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()

if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        store_backend=settings.store_backend,
        environment=settings.environment,
    )
