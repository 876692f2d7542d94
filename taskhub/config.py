import os
import yaml

CONFIG_FILE_PATH = os.environ.get(
    "TASKHUB_CONFIG", os.path.join(os.getcwd(), "env.yaml")
)

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    APP_NAME = data.get("APP_NAME", "TaskHub")
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./taskhub.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Access tokens
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_TTL_MINUTES = int(data.get("ACCESS_TOKEN_TTL_MINUTES", 24 * 60))

    # Refresh tokens / sessions
    REFRESH_TOKEN_TTL_DAYS = int(data.get("REFRESH_TOKEN_TTL_DAYS", 30))
    REFRESH_ROTATION_THRESHOLD_DAYS = int(
        data.get("REFRESH_ROTATION_THRESHOLD_DAYS", 7)
    )
    SESSION_PURGE_INTERVAL_SECONDS = int(
        data.get("SESSION_PURGE_INTERVAL_SECONDS", 3600)
    )

    # One-time codes and passwords
    VERIFICATION_CODE_TTL_HOURS = int(data.get("VERIFICATION_CODE_TTL_HOURS", 24))
    RESET_CODE_TTL_HOURS = int(data.get("RESET_CODE_TTL_HOURS", 1))
    PASSWORD_MIN_LENGTH = int(data.get("PASSWORD_MIN_LENGTH", 8))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 10))

    # Outgoing email (SMTP disabled when SMTP_HOST is empty)
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    SMTP_TIMEOUT = int(data.get("SMTP_TIMEOUT", 10))
    SMTP_FROM_EMAIL = data.get("SMTP_FROM_EMAIL", "no-reply@taskhub.local")
    SMTP_FROM_NAME = data.get("SMTP_FROM_NAME", "TaskHub")
