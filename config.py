import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./utang.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    CACHE_BACKEND = data.get("CACHE_BACKEND", "redis")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Session tokens
    JWT_SECRET = data.get("JWT_SECRET", "change-me")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_MINUTES = int(data.get("JWT_EXPIRES_MINUTES", 60))
    TOKEN_COOKIE_NAME = data.get("TOKEN_COOKIE_NAME", "pw_token")
    COOKIE_SECURE = bool(data.get("COOKIE_SECURE", False))
    COOKIE_SAMESITE = data.get("COOKIE_SAMESITE", "lax")
    BLACKLIST_FALLBACK_TTL_SECONDS = int(data.get("BLACKLIST_FALLBACK_TTL_SECONDS", 86400))  # 24h
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Listings
    PAGE_SIZE = int(data.get("PAGE_SIZE", 7))
    OPEN_CYCLE_LIMIT = int(data.get("OPEN_CYCLE_LIMIT", 50))

    # Payment settlement: "cycle" (exact settlement) or "allocation" (oldest-first)
    SETTLEMENT_POLICY = data.get("SETTLEMENT_POLICY", "cycle")

    # Soft-deleted payment purge
    PAYMENT_PURGE_ENABLED = bool(data.get("PAYMENT_PURGE_ENABLED", True))
    PAYMENT_PURGE_AFTER_DAYS = int(data.get("PAYMENT_PURGE_AFTER_DAYS", 30))
    PAYMENT_PURGE_INTERVAL_SECONDS = data.get("PAYMENT_PURGE_INTERVAL_SECONDS", 86400)  # Daily

    # Cycle total reconciliation
    RECONCILIATION_ENABLED = bool(data.get("RECONCILIATION_ENABLED", True))
    RECONCILIATION_INTERVAL_SECONDS = data.get("RECONCILIATION_INTERVAL_SECONDS", 86400)  # Daily

    SEED_ADMIN_PASSWORD = data.get("SEED_ADMIN_PASSWORD", "password123")
