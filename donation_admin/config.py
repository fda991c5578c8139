import os
from datetime import timedelta

DEFAULT_ACCESS_CREDENTIALS = "admin:ray-hope-2024,staff:staff-access-2024"


def _database_url(default):
    url = os.environ.get("DATABASE_URL", default)
    # Heroku/Render still hand out the old scheme
    if url and url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def parse_credentials(raw):
    """Parse ``"user:key,user:key"`` into a list of ``(username, key)`` pairs."""
    pairs = []
    for item in (raw or "").split(","):
        item = item.strip()
        if not item:
            continue
        username, sep, key = item.partition(":")
        if not sep or not username.strip() or not key:
            raise ValueError(f"Malformed ACCESS_CREDENTIALS entry: {item!r}")
        pairs.append((username.strip(), key))
    return pairs


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me-in-prod")
    SQLALCHEMY_DATABASE_URI = _database_url("sqlite:///donation_admin.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT Configuration
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)

    ACCESS_CREDENTIALS = parse_credentials(
        os.environ.get("ACCESS_CREDENTIALS", DEFAULT_ACCESS_CREDENTIALS)
    )

    CORS_ALLOWED_ORIGINS = os.environ.get("CORS_ALLOWED_ORIGINS", "")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    STATS_MAX_WORKERS = int(os.environ.get("STATS_MAX_WORKERS", "4"))

    @staticmethod
    def init_app(app):
        pass


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ACCESS_CREDENTIALS = parse_credentials(DEFAULT_ACCESS_CREDENTIALS)
    LOG_LEVEL = "WARNING"


class ProductionConfig(Config):
    DEBUG = False
    TESTING = False
    PREFERRED_URL_SCHEME = "https"

    @staticmethod
    def init_app(app):
        # Secret key for JWT and database connection - REQUIRED
        if not os.environ.get("SECRET_KEY"):
            raise ValueError("SECRET_KEY environment variable must be set")
        if not os.environ.get("DATABASE_URL"):
            raise ValueError("DATABASE_URL environment variable must be set")
