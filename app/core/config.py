"""
Core Configuration Module

Centralizes environment configuration for the load recommendation service.
Provides a singleton Settings object; every value is re-read from the
environment on access so tests can monkeypatch variables.

Usage:
    from app.core.config import settings

    print(settings.APP_ENV)
    print(settings.FLEET_SERVICE_URL)
"""

import os
from typing import List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    Scoring constants are NOT configurable here; they live in
    app.constants.thresholds so the weights stay auditable in one place.
    """

    # ==================== Application Settings ====================

    @property
    def APP_ENV(self) -> str:
        """Application environment: dev, staging, production"""
        return os.getenv("APP_ENV", "dev")

    @property
    def LOG_LEVEL(self) -> str:
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""
        return os.getenv("LOG_LEVEL", "INFO")

    # ==================== Fleet Service ====================

    @property
    def FLEET_SERVICE_URL(self) -> str:
        """Fleet backend URL serving trucks and the load board"""
        return os.getenv("FLEET_SERVICE_URL", "http://localhost:5000")

    @property
    def FLEET_CLIENT_TIMEOUT(self) -> float:
        """Fleet client timeout in seconds"""
        return float(os.getenv("FLEET_CLIENT_TIMEOUT", "10.0"))

    @property
    def FLEET_CLIENT_MAX_CONNECTIONS(self) -> int:
        """Maximum HTTP connections in pool"""
        return int(os.getenv("FLEET_CLIENT_MAX_CONNECTIONS", "50"))

    @property
    def FLEET_CLIENT_MAX_KEEPALIVE(self) -> int:
        """Maximum keepalive connections in pool"""
        return int(os.getenv("FLEET_CLIENT_MAX_KEEPALIVE", "10"))

    # ==================== Fleet Defaults ====================

    @property
    def WEEKLY_STANDARD_MILES(self) -> float:
        """Miles used to spread truck costs when a truck has no mileage yet"""
        return float(os.getenv("WEEKLY_STANDARD_MILES", "3000"))

    @property
    def DEFAULT_EQUIPMENT_TYPE(self) -> str:
        """Equipment assumed for trucks without one on file"""
        return os.getenv("DEFAULT_EQUIPMENT_TYPE", "Dry Van")

    # ==================== CORS Settings ====================

    @property
    def CORS_ORIGINS(self) -> List[str]:
        """Allowed CORS origins"""
        origins_str = os.getenv("CORS_ORIGINS", "*")
        if origins_str == "*":
            return ["*"]
        return [origin.strip() for origin in origins_str.split(",")]

    @property
    def CORS_ALLOW_CREDENTIALS(self) -> bool:
        """Allow credentials in CORS requests"""
        return os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"


# ==================== Singleton Instance ====================

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Example:
        >>> from app.core.config import get_settings
        >>> get_settings().APP_ENV
        'dev'
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


# Convenience singleton for direct import
settings = get_settings()


# ==================== Helper Functions ====================

def is_production() -> bool:
    """True if APP_ENV is 'production' or 'prod'."""
    return settings.APP_ENV.lower() in ("production", "prod")


def is_development() -> bool:
    """True if APP_ENV is 'dev' or 'development'."""
    return settings.APP_ENV.lower() in ("dev", "development")
