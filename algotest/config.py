"""
AlgoTest Backend - Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development except
    `environment`, which defaults to production so that internal error
    messages are never exposed unless explicitly requested.
    """

    # ── Service Identity ──────────────────────────────────────────────────
    # Reported by GET /health
    service_name: str = Field(default="algo-test-backend")

    # What: Deployment mode; "development" exposes exception messages in 500 bodies
    environment: str = Field(default="production")

    @field_validator("environment")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: comma-separated origins, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Algorithm Execution ───────────────────────────────────────────────
    # What: Maximum number of elements accepted in a single input sequence
    # Bubble sort is O(n²), so an unbounded array would pin the worker
    max_input_length: int = Field(default=10_000, ge=1, le=1_000_000)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
