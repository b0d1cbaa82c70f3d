"""
Application configuration.

Flask configuration classes for development, testing and production.
Every value can be overridden through environment variables so that the
store location, CORS allow-list and log settings live outside the code.
"""

import os
from datetime import timedelta


DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",                     # local dev frontend (Vite)
    "https://sonafaculty-dashboard.netlify.app",  # deployed dashboard
)


def _parse_csv(env_name: str, default: tuple[str, ...]) -> list[str]:
    raw = (os.environ.get(env_name, "") or "").strip()
    if not raw:
        return list(default)
    out: list[str] = []
    for part in raw.split(","):
        part = (part or "").strip()
        if part:
            out.append(part)
    return out


class Config:
    """Base configuration."""

    # Project root (the directory that holds the reidentify package)
    BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

    # Document store connection string. Each collection is a table with a
    # JSON payload column, so any SQLAlchemy backend works.
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URI", f"sqlite:///{os.path.join(BASE_DIR, 'reidentify.db')}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Port for run.py / wsgi.py when started directly.
    PORT = int(os.environ.get("PORT", 5000))

    # --- CORS ---
    # Only these origins receive Access-Control-Allow-Origin.
    CORS_ORIGINS = _parse_csv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    CORS_METHODS = ["GET", "POST", "PATCH", "DELETE"]
    CORS_MAX_AGE = int(os.environ.get("CORS_MAX_AGE", 600))

    # --- Status transitions ---
    # What PATCH /api/requests/<id>/status does with a status other than
    # "approved"/"rejected":
    #   reject  - answer 400 and leave the pending request untouched
    #   discard - delete the pending request without copying it anywhere
    UNKNOWN_STATUS_POLICY = (os.environ.get("UNKNOWN_STATUS_POLICY", "reject") or "reject").strip().lower()

    # Logging. LOG_FILE is optional; without it logs go to stderr only.
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")


class DevelopmentConfig(Config):
    """Development settings."""

    DEBUG = True
    SEND_FILE_MAX_AGE_DEFAULT = 0


class TestingConfig(Config):
    """Test settings."""

    TESTING = True
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    LOG_FILE = None


class ProductionConfig(Config):
    """Production settings."""

    DEBUG = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
    SEND_FILE_MAX_AGE_DEFAULT = timedelta(days=30)


def select_config_class() -> type:
    """Pick the configuration class from the environment.

    ``APP_ENV`` wins over ``FLASK_ENV``. Anything starting with ``prod``
    selects :class:`ProductionConfig`, anything starting with ``test``
    selects :class:`TestingConfig`, everything else is development.
    """
    env = (os.getenv("APP_ENV") or os.getenv("FLASK_ENV") or "development").lower()
    if env.startswith("prod"):
        return ProductionConfig
    if env.startswith("test"):
        return TestingConfig
    return DevelopmentConfig
