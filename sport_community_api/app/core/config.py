"""
Simple configuration management.

The ``Settings`` dataclass reads configuration from environment
variables.  A ``.env`` file in the working directory is loaded first
so local deployments can keep secrets out of the shell profile.
Defaults are provided for all fields.  In a production deployment you
should at least override ``JWT_SECRET``.

Settings are not read from a module-level global by the request
handlers: ``create_app`` stores the instance on ``app.state`` and the
``get_settings`` dependency hands it to whoever needs it.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv
from fastapi import Request

load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Sport Community API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    # Routes are served at the root by default (``/register``, ``/events``...).
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", ""))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    secret_key: str = field(default_factory=lambda: os.getenv("JWT_SECRET", "change_me"))
    algorithm: str = field(default_factory=lambda: os.getenv("JWT_ALGORITHM", "HS256"))
    # Tokens carry no ``exp`` claim unless this is positive.
    token_expire_minutes: int = field(default_factory=lambda: int(os.getenv("TOKEN_EXPIRE_MINUTES", "0")))
    bcrypt_rounds: int = field(default_factory=lambda: int(os.getenv("BCRYPT_ROUNDS", "10")))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``Database``.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sport_community.db"))
    upload_dir: str = field(default_factory=lambda: os.getenv("UPLOAD_DIR", "uploads"))

    # When enabled, every unit of work runs inside a single transaction
    # instead of committing each statement on its own.
    atomic_writes: bool = field(default_factory=lambda: _env_bool("ATOMIC_WRITES"))

    cors_origins: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings
