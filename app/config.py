# app/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./shipping.db"
    DATABASE_ECHO: bool = False
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]
    ALLOWED_HOSTS: List[str] = ["*"]

    # Strict mode: weight >= 0.1 dan destination wajib zona yang terdaftar
    STRICT_FEE_CALCULATION: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding='utf-8', extra='ignore')

settings = Settings()
