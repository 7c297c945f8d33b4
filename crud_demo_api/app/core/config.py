"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
demo API starts without any ``.env`` file.  Because the dataclass
computes values at instantiation time, environment variables should
be set before creating a ``Settings`` instance.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "CRUD Demo API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))

    # Environment mode: "development" or "production".  Error responses
    # include a stack trace only in development.
    environment: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows any.
    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # Load the demo users, products and tasks when the app is created.
    seed_demo_data: bool = field(default_factory=lambda: _env_flag("SEED_DEMO_DATA", "true"))

    # Optional directory with a built frontend, served at ``/`` after
    # the API routes.  Ignored when empty or missing.
    static_dir: str = field(default_factory=lambda: os.getenv("STATIC_DIR", ""))

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
