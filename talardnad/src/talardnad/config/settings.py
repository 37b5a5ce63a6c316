"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (system, then .env.<env> file)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All sensitive values (passwords, keys) should come from environment
    variables, not from YAML files.
    """

    # .env.<env> files are loaded into os.environ by load_config(), so
    # the environment is the only source read here.
    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Talardnad"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # CORS Configuration
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Database (from environment - REQUIRED)
    DATABASE_URL: str = Field(..., description="Database connection URL")
    DATABASE_ECHO: bool = Field(default=False)
    DATABASE_POOL_SIZE: int = Field(default=20, ge=1)
    DATABASE_MAX_OVERFLOW: int = Field(default=10, ge=0)

    # JWT Authentication (from environment - REQUIRED)
    JWT_SECRET_KEY: str = Field(..., description="JWT secret key")
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_EXPIRATION_HOURS: int = Field(default=24, ge=1)

    # Password hashing
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # Payment gateway
    PAYMENT_GATEWAY_URL: str = Field(
        default="http://payments:8080",
        description="Payment gateway base URL",
    )
    PAYMENT_GATEWAY_API_KEY: str = Field(
        default="",
        description="Payment gateway bearer API key",
    )
    PAYMENT_GATEWAY_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Payment gateway timeout in seconds",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Observability - Metrics
    METRICS_ENABLED: bool = Field(
        default=True,
        description="Expose Prometheus metrics on /metrics",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Require an async driver."""
        if not v.startswith(("postgresql+asyncpg://", "sqlite+aiosqlite://")):
            raise ValueError(
                "DATABASE_URL must use postgresql+asyncpg or sqlite+aiosqlite"
            )
        return v


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r") as f:
        loaded = yaml.safe_load(f)
    return loaded or {}


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        pydantic.ValidationError: If required fields are missing
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    default_env_file, default_config_file = env_map.get(
        environment, (".env.production", "production.yaml")
    )
    if env_file is None:
        env_file = default_env_file
    if config_file is None:
        config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=False)

    merged_config = _read_yaml(config_dir / "default.yaml")
    merged_config.update(_read_yaml(config_dir / config_file))
    merged_config.setdefault("ENV", environment)

    # Init kwargs outrank the environment in pydantic-settings, so only
    # pass YAML values the environment does not already provide.
    yaml_values = {k: v for k, v in merged_config.items() if k not in os.environ}

    return Settings(**yaml_values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize settings for the process entry point."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
