# app/core/config.py
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Prefer .env.production if present, else default .env
load_dotenv(".env.production")
load_dotenv()

DEV_SESSION_SECRET = "vendor-marketplace-dev-secret"


class Settings(BaseSettings):
    environment: str = "development"
    database_url: Optional[str] = None
    sql_echo: bool = False

    session_secret: str = DEV_SESSION_SECRET  # 🔐 set SESSION_SECRET in production
    session_cookie_name: str = "vendor_session"
    session_ttl_seconds: int = 7 * 24 * 60 * 60  # 1 week
    session_cookie_secure: bool = False

    bcrypt_rounds: int = 12
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    if settings.is_production and settings.session_secret == DEV_SESSION_SECRET:
        raise ValueError("❌ SESSION_SECRET is required in production!")
    return settings
