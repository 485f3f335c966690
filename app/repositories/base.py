"""
Базовый репозиторий для работы с БД через SQLAlchemy
"""

from typing import Any, Generic, Type, TypeVar
from sqlalchemy.orm import Session
from app.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Базовый репозиторий, привязанный к модели и сессии"""

    def __init__(self, model: Type[ModelType], session: Session):
        self.model = model
        self.db = session

    def create(self, **data: Any) -> ModelType:
        """
        Создает новую запись в текущей транзакции.
        flush() нужен, чтобы получить сгенерированный ID до коммита.
        """
        instance = self.model(**data)
        self.db.add(instance)
        self.db.flush()
        return instance
