import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("NOTA_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()

DEFAULT_JWT_SECRET = "change-me"


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./nota.db")
    DB_AUTO_CREATE = bool(data.get("DB_AUTO_CREATE", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 4000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Authentication
    JWT_SECRET = data.get("JWT_SECRET", DEFAULT_JWT_SECRET)
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    TOKEN_EXPIRE_HOURS = data.get("TOKEN_EXPIRE_HOURS", 24)

    # Exports (0 = no row cap)
    EXPORT_MAX_ROWS = data.get("EXPORT_MAX_ROWS", 5000)
    CURRENCY_SYMBOL = data.get("CURRENCY_SYMBOL", "$")

    # Public check links handed out by the client
    CLIENT_BASE_URL = data.get("CLIENT_BASE_URL", "http://localhost:5173")
