"""
Модуль для работы с реляционной базой данных через SQLAlchemy
"""

import enum
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

# Получаем логгер для этого модуля
logger = logging.getLogger(__name__)

# Базовый класс для ORM моделей
Base = declarative_base()

# Глобальные переменные для ленивой инициализации
_engine: Optional[Engine] = None
_session_local: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Получить или создать движок SQLAlchemy."""
    global _engine
    if _engine is None:
        from app.core.config import settings

        connect_args = {}
        if settings.DATABASE_URL.startswith("sqlite"):
            # SQLite-соединение используется разными потоками FastAPI
            connect_args["check_same_thread"] = False

        _engine = create_engine(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            connect_args=connect_args,
        )
        enable_sqlite_foreign_keys(_engine)
        logger.info("✅ DATABASE: Движок SQLAlchemy создан")

    return _engine


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Включает проверку внешних ключей для SQLite (по умолчанию она выключена)."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_session_local() -> sessionmaker:
    """Получить или создать фабрику сессий."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(autoflush=False, bind=get_engine())
    return _session_local


class TransactionState(str, enum.Enum):
    """Состояния единицы работы: Pending -> InTransaction -> {Committed | RolledBack}"""
    PENDING = "pending"
    IN_TRANSACTION = "in_transaction"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class UnitOfWork:
    """Сессия, открытая на время одной транзакции, и ее текущее состояние."""

    def __init__(self, session: Session):
        self.session = session
        self.state = TransactionState.PENDING
        # True, если откат не удалось подтвердить
        self.rollback_failed = False


@contextmanager
def transaction(session_factory: Optional[Callable[[], Session]] = None) -> Iterator[UnitOfWork]:
    """
    Контекстный менеджер транзакции.

    Открывает сессию, отдает UnitOfWork и гарантирует завершение транзакции
    на любом пути выхода: commit при успехе, rollback при исключении.
    Сессия закрывается всегда.

    Args:
        session_factory: Фабрика сессий (по умолчанию get_session_local())
    """
    factory = session_factory or get_session_local()
    uow = UnitOfWork(factory())
    try:
        uow.session.begin()
        uow.state = TransactionState.IN_TRANSACTION
        yield uow
        uow.session.commit()
        uow.state = TransactionState.COMMITTED
    except BaseException:
        _rollback(uow)
        raise
    finally:
        uow.session.close()


def _rollback(uow: UnitOfWork) -> None:
    """Откатывает транзакцию; неудачный откат логируется как неоднозначное состояние."""
    try:
        uow.session.rollback()
    except Exception as e:
        uow.rollback_failed = True
        logger.error(
            f"❌ DATABASE: Не удалось подтвердить откат транзакции, состояние хранилища неоднозначно: {e}",
            exc_info=True,
        )
    uow.state = TransactionState.ROLLED_BACK


def init_database():
    """
    Инициализирует базу данных.
    Проверяет подключение и создает таблицы если необходимо.
    """
    from app.core.config import settings
    # Импортируем модели, чтобы они зарегистрировались в Base.metadata
    import app.models  # noqa: F401

    try:
        logger.info("🗄️ DATABASE: Инициализация базы данных...")

        engine = get_engine()
        with engine.connect():
            logger.info("✅ DATABASE: Подключение проверено")

        if settings.DB_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
            for table in Base.metadata.sorted_tables:
                logger.info(f"✅ DATABASE: Таблица {table.name} доступна")

        logger.info("✅ DATABASE: База данных успешно инициализирована")

    except Exception as e:
        logger.error(f"❌ DATABASE: Ошибка инициализации базы данных: {e}")
        raise


def close_database():
    """Закрывает соединение с базой данных."""
    global _engine, _session_local

    _session_local = None

    if _engine:
        _engine.dispose()
        _engine = None

    logger.info("✅ DATABASE: Соединение с базой данных закрыто")
