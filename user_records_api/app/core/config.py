"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, and each
value is read when a ``Settings`` instance is created, so tests can
build their own instance (or pass explicit values) after adjusting the
environment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def _environment() -> str:
    # APP_ENV takes precedence; NODE_ENV is kept for deployments that
    # already export it.
    return os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "User Records API"))
    api_version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    environment: str = field(default_factory=_environment)
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    # Level for the file handler; falls back to ``log_level`` when unset.
    log_file_level: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE_LEVEL") or None)

    # Origins allowed by CORS, comma separated.  ``*`` allows any origin.
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # Artificial delay applied to every service call, in milliseconds.
    # Set SERVICE_LATENCY_MS=0 to disable it.
    service_latency_ms: int = field(default_factory=lambda: int(os.getenv("SERVICE_LATENCY_MS", "10")))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    @property
    def service_latency(self) -> float:
        """Service latency in seconds, never negative."""
        return max(self.service_latency_ms, 0) / 1000.0


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
