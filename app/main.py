from fastapi import FastAPI
import logging
from app.core.config import settings
from app.api import classes
from app.core.database import init_database, close_database
from app.core.logging_config import setup_logging

# Получаем логгер для этого модуля
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Tutor Availability Service",
    version="0.1.0"
)

app.include_router(classes.router, prefix="/classes", tags=["Classes"])


@app.on_event("startup")
async def startup_event():
    """Выполняется при запуске приложения."""
    # Логирование настраивается в процессе, который обслуживает запросы (в т.ч. при reload)
    setup_logging(level=settings.LOG_LEVEL, enable_colors=settings.LOG_COLORS)

    logger.info("╔═══════════════════════════════════════════════════════════")
    logger.info("║ 🚀 Приложение запускается...")
    logger.info("╚═══════════════════════════════════════════════════════════")

    logger.info(f"🗄️ STARTUP: База данных: {settings.DATABASE_URL}")

    try:
        init_database()
        logger.info("✅ STARTUP: База данных инициализирована")
    except Exception as e:
        logger.error(f"❌ STARTUP: Ошибка инициализации базы данных: {e}")
        raise

    logger.info("✅ STARTUP: Приложение успешно запущено и готово к работе")


@app.on_event("shutdown")
async def shutdown_event():
    """Выполняется при остановке приложения."""
    close_database()


@app.get("/", tags=["Root"])
def root():
    """Корневой эндпоинт для проверки доступности сервиса."""
    return {
        "status": "OK",
        "message": "Tutor Availability Service is running",
        "version": "0.1.0",
        "database": "enabled"
    }


@app.get("/healthcheck", tags=["Health Check"])
def health_check():
    """Простой эндпоинт для проверки работоспособности сервиса."""
    return {
        "status": "OK",
        "database": "enabled"
    }
