from typing import List, Optional
from pydantic_settings import BaseSettings


# =====================================================================
# SETTINGS
# =====================================================================


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Gratitude API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./gratitude.db"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 1800

    # RPC - unset service URLs are served in-process
    ENTRIES_SERVICE_URL: Optional[str] = None
    MOODS_SERVICE_URL: Optional[str] = None
    STATS_SERVICE_URL: Optional[str] = None
    RPC_TIMEOUT_SECONDS: float = 10.0

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
