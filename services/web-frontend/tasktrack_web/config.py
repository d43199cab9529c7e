"""
TASKTRACK Web Frontend - Configuration Module

This module handles application configuration via environment variables.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "TASKTRACK Web Frontend"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3100"))

    # Core API
    CORE_API_URL: str = os.getenv("CORE_API_URL", "http://localhost:4000")
    CORE_API_TIMEOUT: float = float(os.getenv("CORE_API_TIMEOUT", "10.0"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
