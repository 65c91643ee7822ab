# File: chronoboard/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, field_validator


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    return [i.strip() for i in os.getenv(name, default).split(",") if i.strip()]


class Settings(BaseModel):
    # Basic app info
    app_name: str = os.getenv("APP_NAME", "ChronoBoard")

    PROJECT_NAME: str = "ChronoBoard API"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    environment: str = os.getenv("ENVIRONMENT", "development")
    debug: bool = _env_bool("DEBUG", "true")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Page shell
    language: str = os.getenv("APP_LANGUAGE", "en-US")
    charset: str = "UTF-8"
    meta_description: str = os.getenv("META_DESCRIPTION", "")
    meta_keywords: str = os.getenv("META_KEYWORDS", "")

    # CORS
    backend_cors_origins: List[str] = _env_list(
        "BACKEND_CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8080"
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./chronoboard.db")

    # Security / auth
    secret_key: str = os.getenv("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))  # 24h
    remember_me_days: int = int(os.getenv("REMEMBER_ME_DAYS", 30))
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", 12))
    auth_cookie_name: str = "chronoboard_token"

    # Public web root served by the dev-server router
    web_root: str = os.getenv("WEB_ROOT", "web")

    # Mail
    mail_file_transport: bool = _env_bool("MAIL_FILE_TRANSPORT", "true")
    mail_dir: str = os.getenv("MAIL_DIR", "runtime/mail")
    smtp_host: str = os.getenv("SMTP_HOST", "localhost")
    smtp_port: int = int(os.getenv("SMTP_PORT", 25))
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@example.com")
    sender_email: str = os.getenv("SENDER_EMAIL", "noreply@example.com")
    sender_name: str = os.getenv("SENDER_NAME", "ChronoBoard mailer")

    # First admin account, created on startup when a password is given
    seed_admin_username: str = os.getenv("SEED_ADMIN_USERNAME", "admin")
    seed_admin_password: Optional[str] = os.getenv("SEED_ADMIN_PASSWORD") or None

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
