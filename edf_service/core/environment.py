"""
Environment-based Configuration System

Settings are loaded exclusively from environment variables. Each concern has
its own settings class; ``ConfigurationService`` caches them behind a
provider so tests can reload or substitute the source.
"""

import os
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional, Union

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class ServiceSettings(BaseSettings):
    """Base settings with common configuration."""

    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = "INFO"

    service_name: str = "edf-file-service"

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    db_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "edf_metadata"
    db_user: str = "edf"
    db_password: str = ""

    @property
    def connection_url(self) -> str:
        """Get database connection URL."""
        if self.db_url:
            return self.db_url
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


class AuthSettings(BaseSettings):
    """Pre-shared key authentication settings."""

    app_secret_key: str


class RetrieverSettings(BaseSettings):
    """Settings for fetching remote EDF files."""

    allowed_url_schemes: Union[List[str], str] = ["http", "https"]
    download_timeout_seconds: float = 30.0
    max_download_bytes: Optional[int] = None
    temp_dir: Optional[str] = None

    @field_validator("allowed_url_schemes", mode="before")
    @classmethod
    def parse_allowed_url_schemes(cls, v):
        """Parse allowed schemes from a comma-separated string or list."""
        if isinstance(v, str):
            return [s.strip().lower() for s in v.split(",") if s.strip()]
        return [s.lower() for s in v]


class APISettings(BaseSettings):
    """API server configuration."""

    api_host: str = "0.0.0.0"
    api_port: int = 8080
    reload: bool = False


class ConfigProvider(ABC):
    """Abstract configuration provider interface."""

    @abstractmethod
    def get_service_settings(self) -> ServiceSettings:
        """Get service settings."""
        pass

    @abstractmethod
    def get_database_settings(self) -> DatabaseSettings:
        """Get database settings."""
        pass

    @abstractmethod
    def get_auth_settings(self) -> AuthSettings:
        """Get authentication settings."""
        pass

    @abstractmethod
    def get_retriever_settings(self) -> RetrieverSettings:
        """Get retriever settings."""
        pass

    @abstractmethod
    def get_api_settings(self) -> APISettings:
        """Get API settings."""
        pass


class EnvironmentConfigProvider(ConfigProvider):
    """Configuration provider that loads from environment variables only."""

    def __init__(self):
        self._normalize_legacy_env_vars()
        self._validate_required_env_vars()

    def _normalize_legacy_env_vars(self) -> None:
        """Map ``EDF_``-prefixed variables onto their plain names."""
        mappings = {
            "EDF_ENVIRONMENT": "ENVIRONMENT",
            "EDF_DEBUG": "DEBUG",
            "EDF_LOG_LEVEL": "LOG_LEVEL",
            "EDF_SERVICE_NAME": "SERVICE_NAME",
            "EDF_API_HOST": "API_HOST",
            "EDF_API_PORT": "API_PORT",
            "EDF_RELOAD": "RELOAD",
            "EDF_DB_URL": "DB_URL",
            "EDF_DB_HOST": "DB_HOST",
            "EDF_DB_PORT": "DB_PORT",
            "EDF_DB_NAME": "DB_NAME",
            "EDF_DB_USER": "DB_USER",
            "EDF_DB_PASSWORD": "DB_PASSWORD",
            "EDF_APP_SECRET_KEY": "APP_SECRET_KEY",
            "EDF_ALLOWED_URL_SCHEMES": "ALLOWED_URL_SCHEMES",
            "EDF_DOWNLOAD_TIMEOUT_SECONDS": "DOWNLOAD_TIMEOUT_SECONDS",
            "EDF_MAX_DOWNLOAD_BYTES": "MAX_DOWNLOAD_BYTES",
            "EDF_TEMP_DIR": "TEMP_DIR",
        }
        for legacy, modern in mappings.items():
            value = os.getenv(legacy)
            if value is not None and os.getenv(modern) is None:
                os.environ[modern] = value

    def _validate_required_env_vars(self) -> None:
        """Validate that required environment variables are set."""
        required_vars = ["APP_SECRET_KEY"]

        missing_vars = [var for var in required_vars if not os.getenv(var)]
        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )

    def get_service_settings(self) -> ServiceSettings:
        return ServiceSettings()

    def get_database_settings(self) -> DatabaseSettings:
        return DatabaseSettings()

    def get_auth_settings(self) -> AuthSettings:
        return AuthSettings()

    def get_retriever_settings(self) -> RetrieverSettings:
        return RetrieverSettings()

    def get_api_settings(self) -> APISettings:
        return APISettings()


class ConfigurationService:
    """Main configuration service that aggregates all settings."""

    def __init__(self, provider: ConfigProvider):
        self._provider = provider
        self._cache: Dict[str, BaseSettings] = {}
        logger.info("Configuration service initialized")

    def get_service_settings(self) -> ServiceSettings:
        """Get service settings with caching."""
        if "service" not in self._cache:
            self._cache["service"] = self._provider.get_service_settings()
        return self._cache["service"]

    def get_database_settings(self) -> DatabaseSettings:
        """Get database settings with caching."""
        if "database" not in self._cache:
            self._cache["database"] = self._provider.get_database_settings()
        return self._cache["database"]

    def get_auth_settings(self) -> AuthSettings:
        """Get auth settings with caching."""
        if "auth" not in self._cache:
            self._cache["auth"] = self._provider.get_auth_settings()
        return self._cache["auth"]

    def get_retriever_settings(self) -> RetrieverSettings:
        """Get retriever settings with caching."""
        if "retriever" not in self._cache:
            self._cache["retriever"] = self._provider.get_retriever_settings()
        return self._cache["retriever"]

    def get_api_settings(self) -> APISettings:
        """Get API settings with caching."""
        if "api" not in self._cache:
            self._cache["api"] = self._provider.get_api_settings()
        return self._cache["api"]

    def reload_settings(self) -> None:
        """Clear cache and force reload of all settings."""
        self._cache.clear()
        logger.info(
            "Configuration cache cleared, settings will be reloaded on next access"
        )

    def get_environment(self) -> Environment:
        """Get current environment."""
        return self.get_service_settings().environment


_config_service: Optional[ConfigurationService] = None


def get_config_service() -> ConfigurationService:
    """Get the global configuration service instance."""
    global _config_service
    if _config_service is None:
        provider = EnvironmentConfigProvider()
        _config_service = ConfigurationService(provider)
    return _config_service
