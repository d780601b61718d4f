"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


class Config:
    # Deployment mode: "development" exposes error details, "production" serves static assets
    APP_ENV = os.getenv("APP_ENV", "production").lower()
    DEBUG = APP_ENV == "development" or _env_flag("DEBUG")
    TESTING = _env_flag("TESTING")
    EXPOSE_ERROR_DETAILS = APP_ENV == "development"

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5000"))
    TRUSTED_PROXIES = [
        h.strip() for h in os.getenv("TRUSTED_PROXIES", "127.0.0.1").split(",") if h.strip()
    ]

    # CORS
    CLIENT_URL = os.getenv("CLIENT_URL", "*")
    CORS_ORIGINS = [o.strip() for o in CLIENT_URL.split(",") if o.strip()] or ["*"]

    # MongoDB
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017/contact")
    MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "contact")
    MONGODB_COLLECTION: str = os.getenv("MONGODB_COLLECTION", "contacts")
    MONGODB_TIMEOUT_MS: int = int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))

    # SMTP relay
    EMAIL_HOST: str = os.getenv("EMAIL_HOST", "")
    EMAIL_PORT: int = int(os.getenv("EMAIL_PORT", "465"))
    EMAIL_SECURE: bool = _env_flag("EMAIL_SECURE")
    EMAIL_USER: str = os.getenv("EMAIL_USER", "")
    EMAIL_PASS: str = os.getenv("EMAIL_PASS", "")
    EMAIL_FROM: str = os.getenv("EMAIL_FROM", "") or EMAIL_USER
    EMAIL_TO: str = os.getenv("EMAIL_TO", "") or EMAIL_USER
    EMAIL_TIMEOUT: float = float(os.getenv("EMAIL_TIMEOUT", "10"))

    # Rate limiting
    RATE_LIMIT_ENABLED = _env_flag("RATE_LIMIT_ENABLED", "true")
    RATE_LIMIT = os.getenv("RATE_LIMIT", "100 per 15 minutes")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # Static assets (built client)
    SERVE_STATIC = _env_flag("SERVE_STATIC", "true" if APP_ENV == "production" else "false")
    STATIC_DIR = os.getenv("STATIC_DIR", "client/dist")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True
    EXPOSE_ERROR_DETAILS = True
    SERVE_STATIC = False


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    EXPOSE_ERROR_DETAILS = False
    SERVE_STATIC = False


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": ProductionConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = Config.APP_ENV
    return config.get(env, config["default"])
