"""Application configuration and settings"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings and configuration"""

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "User Management API"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "In-memory CRUD service for user records"

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Pagination
    DEFAULT_PAGE: int = 1
    DEFAULT_PAGE_SIZE: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
