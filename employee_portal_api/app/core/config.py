"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so the demo service
starts without any configuration at all; only ``PORT`` is normally set
by the hosting platform.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "企業員工管理系統"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "3.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    # Listen address.  Cloud platforms inject ``PORT``; the original
    # service always bound every interface.
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8080")))

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any browser origin.
    cors_origins: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Values are read when the
# instance is created, so tests can build their own ``Settings()`` after
# patching the environment.
settings = Settings()
