import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("BETA_INVITER_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default=None):
    # Environment variables override env.yaml
    return os.environ.get(key, data.get(key, default))


def _flag(key, default=False) -> bool:
    value = _get(key, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _list(key, default=None) -> list:
    value = _get(key, default or [])
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./beta_inviter.db")
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = int(_get("API_PORT", 3001))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _list("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = _flag("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENVIRONMENT = _get("ENVIRONMENT", "development")
    ENABLE_LOGGING_MIDDLEWARE = _flag("ENABLE_LOGGING_MIDDLEWARE", True)
    AUTO_CREATE_TABLES = _flag("AUTO_CREATE_TABLES", True)

    AUTH_DISABLED = _flag("AUTH_DISABLED", False)
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = int(_get("JWT_EXPIRE_MINUTES", 60))
    ADMIN_EMAIL = _get("ADMIN_EMAIL", "admin@he2.ai")
    # bcrypt hash; login is refused while unset
    ADMIN_PASSWORD_HASH = _get("ADMIN_PASSWORD_HASH", None)

    SMTP_HOST = _get("SMTP_HOST", None)
    SMTP_PORT = int(_get("SMTP_PORT", 587))
    SMTP_SECURE = _flag("SMTP_SECURE", False)
    SMTP_USER = _get("SMTP_USER", None)
    SMTP_PASS = _get("SMTP_PASS", None)
    SMTP_FROM = _get("SMTP_FROM", None)

    INVITE_CODE_PREFIX = _get("INVITE_CODE_PREFIX", "NA")
    INVITE_CODE_EXPIRY_DAYS = int(_get("INVITE_CODE_EXPIRY_DAYS", 30))
