"""
Userhub - Configuration
Settings loaded from environment variables and .env
"""

from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application configuration settings"""

    # Application
    APP_NAME: str = "Userhub"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field(default="production")

    # API
    API_V1_PREFIX: str = "/api/v1"
    SECRET_KEY: str = Field(default="change-me-in-production")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24 hours

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Database
    DATABASE_URL: str = Field(default="sqlite+aiosqlite:///./userhub.db")
    DATABASE_ECHO: bool = False

    # Security
    ALGORITHM: str = "HS256"

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/userhub.log")

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
