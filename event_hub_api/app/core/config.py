"""
Simple configuration management.

The ``Settings`` dataclass reads configuration from environment
variables when it is instantiated.  A ``.env`` file in the working
directory is loaded first via ``python-dotenv`` so local development
does not need exported variables.  Defaults are provided for all
fields.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Event Hub API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "5000")))

    # Connection string for MongoDB.  When the URI does not name a
    # database (``mongodb://host:27017/``), ``mongo_db`` is used instead.
    mongo_uri: str = field(default_factory=lambda: _env("MONGO_URI", "mongodb://localhost:27017"))
    mongo_db: str = field(default_factory=lambda: _env("MONGO_DB", "event_hub"))
    mongo_timeout_ms: int = field(default_factory=lambda: int(_env("MONGO_TIMEOUT_MS", "5000")))

    # Uploaded images land in ``upload_dir`` and are served under
    # ``upload_url_prefix``.  ``public_dir`` holds an optional static
    # frontend served from the site root when the directory exists.
    upload_dir: str = field(default_factory=lambda: _env("UPLOAD_DIR", "public/uploads"))
    upload_url_prefix: str = "/uploads"
    public_dir: str = field(default_factory=lambda: _env("PUBLIC_DIR", "public"))

    # Comma‑separated list of allowed origins, ``*`` for any.
    cors_origins: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))

    bcrypt_rounds: int = field(default_factory=lambda: int(_env("BCRYPT_ROUNDS", "10")))
    # Profile forms echo this value back when the password was not
    # edited; it must never be hashed as a new password.
    password_placeholder: str = field(default_factory=lambda: _env("PASSWORD_PLACEHOLDER", "********"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
