import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from dotenv import load_dotenv

# Определяем, какой .env файл загружать
env_file_path = os.getenv("ENV_FILE", ".env")
load_dotenv(env_file_path)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=env_file_path,
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Database
    DATABASE_URL: str = "sqlite:///./tutors.db"
    DB_ECHO: bool = False
    DB_CREATE_TABLES: bool = True  # Создавать таблицы при старте (для локальной разработки)

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_COLORS: bool = True

    # Server
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8001


# Глобальная переменная для ленивой инициализации
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Получить или создать экземпляр настроек"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Используется во всем приложении
settings = get_settings()
