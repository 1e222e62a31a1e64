"""Configuration management for Postboard.

Centralises environment variable loading and validation logic while keeping the
public API intentionally simple.
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional, TypedDict

_TRUTHY_VALUES = {"1", "true", "yes", "on"}

DEV_SESSION_SECRET = "dev-session-secret-CHANGE-ME-IN-PRODUCTION"


class AppConfig(TypedDict):
    """Typed representation of the application's configuration."""

    FLASK_SECRET_KEY: Optional[str]
    FLASK_ENV: str
    FLASK_DEBUG: bool
    SESSION_SECRET: str
    JWT_ALGORITHM: str
    JWT_ISSUER: str
    JWT_AUDIENCE: str
    SESSION_LIFETIME_HOURS: int
    SESSION_COOKIE_NAME: str
    SECURE_COOKIES: bool
    FORCE_HTTPS: bool
    RATE_LIMIT_ENABLED: bool
    RATE_LIMIT_DEFAULT: str
    AUTH_RATE_LIMIT: str
    LOG_LEVEL: str
    API_PREFIX: str
    DEMO_USER_ID: str
    DEMO_USER_NAME: str
    DEMO_USER_EMAIL: str
    SEED_POSTS: bool
    APP_NAME: str
    APP_VERSION: str
    APP_HOST: str
    APP_PORT: int


def _get_env_bool(name: str, default: bool) -> bool:
    """Return an environment variable as a boolean."""

    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in _TRUTHY_VALUES


def _get_env_int(name: str, default: int) -> int:
    """Return an environment variable as an integer, raising on invalid input."""

    raw_value = os.getenv(name)
    if raw_value is None or raw_value == "":
        return default

    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be an integer (got {raw_value!r})") from exc


def get_config() -> AppConfig:
    """Load application configuration from environment variables."""

    flask_env = os.getenv("FLASK_ENV", "development")
    return {
        # Flask Configuration
        "FLASK_SECRET_KEY": os.getenv("FLASK_SECRET_KEY"),
        "FLASK_ENV": flask_env,
        "FLASK_DEBUG": _get_env_bool("FLASK_DEBUG", False),
        # Session token signing
        "SESSION_SECRET": os.getenv("SESSION_SECRET", DEV_SESSION_SECRET),
        "JWT_ALGORITHM": os.getenv("JWT_ALGORITHM", "HS256"),
        "JWT_ISSUER": os.getenv("JWT_ISSUER") or "http://localhost:5000",
        "JWT_AUDIENCE": os.getenv("JWT_AUDIENCE") or "postboard",
        "SESSION_LIFETIME_HOURS": _get_env_int("SESSION_LIFETIME_HOURS", 720),
        "SESSION_COOKIE_NAME": os.getenv("SESSION_COOKIE_NAME", "postboard.session-token"),
        # Security Configuration
        "SECURE_COOKIES": _get_env_bool("SECURE_COOKIES", False),
        "FORCE_HTTPS": _get_env_bool("FORCE_HTTPS", flask_env.lower() == "production"),
        # Rate Limiting
        "RATE_LIMIT_ENABLED": _get_env_bool("RATE_LIMIT_ENABLED", True),
        "RATE_LIMIT_DEFAULT": os.getenv("RATE_LIMIT_DEFAULT", "200/hour"),
        "AUTH_RATE_LIMIT": os.getenv("AUTH_RATE_LIMIT", "20 per minute"),
        # Logging
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
        # API surface
        "API_PREFIX": os.getenv("API_PREFIX", "/api").rstrip("/") or "/api",
        # Demo credential
        "DEMO_USER_ID": os.getenv("DEMO_USER_ID", "demo-user-id"),
        "DEMO_USER_NAME": os.getenv("DEMO_USER_NAME", "DemoUser"),
        "DEMO_USER_EMAIL": os.getenv("DEMO_USER_EMAIL", "demo@example.com"),
        "SEED_POSTS": _get_env_bool("SEED_POSTS", True),
        # Application Settings
        "APP_NAME": os.getenv("APP_NAME", "Postboard"),
        "APP_VERSION": os.getenv("APP_VERSION", "1.0.0"),
        "APP_HOST": os.getenv("APP_HOST", "0.0.0.0"),
        "APP_PORT": _get_env_int("APP_PORT", 5000),
    }


def validate_config(config: Mapping[str, Any]) -> bool:
    """Validate critical configuration values.

    Args:
        config: Configuration mapping to validate.

    Returns:
        True if configuration is valid, raises ValueError otherwise.
    """

    if config.get("FLASK_ENV") == "production":
        if config.get("SESSION_SECRET") == DEV_SESSION_SECRET:
            raise ValueError("SESSION_SECRET must be changed for production!")

        if not config.get("FLASK_SECRET_KEY"):
            raise ValueError("FLASK_SECRET_KEY must be set for production!")

        if not config.get("SECURE_COOKIES"):
            import warnings

            warnings.warn("SECURE_COOKIES disabled in production - session cookie sent over plain HTTP!", stacklevel=2)

    if config.get("SESSION_LIFETIME_HOURS", 1) <= 0:
        raise ValueError("SESSION_LIFETIME_HOURS must be positive")

    return True
