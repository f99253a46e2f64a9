import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Token signing
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    REFRESH_TOKEN_SECRET = data.get(
        "REFRESH_TOKEN_SECRET", "dev-refresh-secret-change-in-production"
    )
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_ISSUER = data.get("JWT_ISSUER", "auth-service")

    # Validity windows, in seconds
    ACCESS_TOKEN_TTL = int(data.get("ACCESS_TOKEN_TTL", 60 * 60))
    REFRESH_TOKEN_TTL = int(data.get("REFRESH_TOKEN_TTL", 60 * 60 * 24 * 365))

    # Auth cookies
    COOKIE_DOMAIN = data.get("COOKIE_DOMAIN", "localhost")
    COOKIE_SAMESITE = data.get("COOKIE_SAMESITE", "strict")
    COOKIE_SECURE = bool(data.get("COOKIE_SECURE", False))
