"""Student Diary Backend — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./data/student_diary.db"

    # Sessions
    SECRET_KEY: str = "change-me"
    SESSION_COOKIE_NAME: str = "student_diary_session"
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 8

    # Password policy
    PASSWORD_SALT: str = "student-diary-static-salt"
    MAX_FAILED_LOGIN_ATTEMPTS: int = 3
    LOCKOUT_MINUTES: int = 15
    RESET_TOKEN_EXPIRY_HOURS: int = 1

    # Profile pictures
    UPLOAD_DIR: str = "./data/uploads"
    MAX_PICTURE_SIZE: int = 5 * 1024 * 1024

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
