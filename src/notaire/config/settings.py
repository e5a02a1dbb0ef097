"""
Configuration management for Notaire.

Hybrid configuration system using YAML files and environment variables.
Priority: Environment variables > YAML config > Pydantic defaults
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173,"
    "http://localhost:5174,"
    "http://localhost:5175,"
    "https://decentralized-frontend.vercel.app"
)


class Settings(BaseSettings):
    """
    Notaire configuration schema.

    Loads configuration from:
    1. Environment variables (highest priority)
    2. YAML configuration files
    3. Pydantic defaults (lowest priority)

    Configuration files:
        - config/default.yaml: Base defaults
        - config/production.yaml: Production overrides
        - config/development.yaml: Development overrides
        - config/test.yaml: Test overrides
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Notaire"
    APP_VERSION: str = "1.0.0"
    ENV: str = Field(default="production", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=3000, ge=1024, le=65535)
    API_RELOAD: bool = Field(default=False)

    # CORS (comma separated list of origins)
    CORS_ORIGINS: str = Field(
        default=DEFAULT_CORS_ORIGINS,
        description="Allowed CORS origins (comma separated)",
    )
    FRONTEND_URL: Optional[str] = Field(
        default=None,
        description="Frontend base URL, appended to the CORS allow-list",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    JSON_LOGS: Optional[bool] = Field(
        default=None,
        description="Force JSON logs (defaults to ENV == production)",
    )

    # Request validation
    MESSAGE_MAX_LENGTH: int = Field(default=10_000, ge=1)
    STRICT_SIGNATURE_FORMAT: bool = Field(
        default=False,
        description="Reject signatures that are not 0x + 130 hex chars at the boundary",
    )

    # Bearer token authentication
    REQUIRE_AUTH: bool = Field(
        default=False,
        description="Require a bearer token on signature routes",
    )
    JWKS_URL: Optional[str] = Field(
        default=None, description="JSON Web Key Set endpoint"
    )
    JWT_SECRET_KEY: Optional[str] = Field(
        default=None,
        description="Shared secret used when no JWKS endpoint is configured",
    )
    JWT_ALGORITHMS: str = Field(
        default="RS256",
        description="Algorithms accepted for JWKS keys (comma separated)",
    )
    JWT_AUDIENCE: Optional[str] = Field(default=None)
    JWKS_CACHE_MAX_ENTRIES: int = Field(default=5, ge=1)
    JWKS_CACHE_MAX_AGE: int = Field(
        default=600, ge=1, description="JWKS key cache lifetime in seconds"
    )

    # Signature history
    HISTORY_BACKEND: str = Field(default="memory")
    HISTORY_LIMIT: int = Field(default=50, ge=1)
    DATABASE_URL: Optional[str] = Field(default=None)
    DATABASE_ECHO: bool = Field(default=False)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("HISTORY_BACKEND")
    @classmethod
    def validate_history_backend(cls, v: str) -> str:
        """Validate history backend name."""
        allowed = ["memory", "database"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid HISTORY_BACKEND. Must be one of: {allowed}")
        return v_lower

    @field_validator("CORS_ORIGINS", "JWT_ALGORITHMS", mode="before")
    @classmethod
    def join_list_values(cls, v):
        """Accept YAML lists as well as comma separated strings."""
        if isinstance(v, (list, tuple)):
            return ",".join(str(item) for item in v)
        return v

    @property
    def cors_origins(self) -> List[str]:
        """CORS allow-list including the frontend URL."""
        origins = _split_csv(self.CORS_ORIGINS)
        if self.FRONTEND_URL:
            frontend = self.FRONTEND_URL.strip().rstrip("/")
            if frontend and frontend not in origins:
                origins.append(frontend)
        return origins

    @property
    def use_json_logs(self) -> bool:
        """JSON logs in production unless explicitly overridden."""
        if self.JSON_LOGS is not None:
            return self.JSON_LOGS
        return self.ENV == "production"

    @property
    def jwt_algorithms(self) -> List[str]:
        """JWT_ALGORITHMS as a list."""
        return _split_csv(self.JWT_ALGORITHMS)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


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
        env: Optional environment name override

    Returns:
        Settings instance

    Raises:
        ValidationError: If a configured value is invalid
    """
    # Project root is 4 levels up (src/notaire/config/settings.py)
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

    # .env values act as env vars but never replace ones already set
    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=False)

    merged_config = {}

    default_config_path = config_dir / "default.yaml"
    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config.update(loaded)

    env_config_path = config_dir / config_file
    if env_config_path.exists():
        with open(env_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config.update(loaded)

    merged_config.setdefault("ENV", environment)

    # Environment variables win over YAML values
    for key in list(merged_config):
        if key in os.environ:
            merged_config.pop(key)

    return Settings(**merged_config)


# Global settings singleton (lazy initialization)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or initialize global settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """
    Override global settings (for testing).

    Args:
        new_settings: New Settings instance to use
    """
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """
    Reset settings to force re-initialization (for testing).

    This allows tests to change environment variables and reload config.
    """
    global _settings
    _settings = None
