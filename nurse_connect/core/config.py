# nurse_connect/core/config.py
import os
from pydantic_settings import BaseSettings
from pydantic import validator
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from .env"""

    # === Database ===
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    @validator("DATABASE_URL")
    def validate_database_url(cls, v):
        """Ensure database URL is safe for current environment"""
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env == "production" and "localhost" in v:
            raise ValueError("Production environment cannot use localhost database!")
        return v

    # === JWT ===
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # === CORS ===
    FRONTEND_ORIGIN: str = "http://localhost:5173"

    # === System ===
    DEBUG: bool = False
    EXPOSE_ERROR_DETAILS: Optional[bool] = None
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    PORT: int = 8080

    # === Security ===
    BCRYPT_ROUNDS: int = 10

    @property
    def show_error_details(self) -> bool:
        if self.EXPOSE_ERROR_DETAILS is None:
            return self.DEBUG
        return self.EXPOSE_ERROR_DETAILS

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Create a global settings instance
settings = Settings()
