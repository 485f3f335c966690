"""
Репозиторий для работы с профилями репетиторов
"""

from sqlalchemy.orm import Session
from app.models.user import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Репозиторий для работы с профилями репетиторов"""

    def __init__(self, session: Session):
        super().__init__(User, session)

    def create_profile(self, name: str, avatar: str, whatsapp: str, bio: str) -> int:
        """Создает профиль и возвращает его ID"""
        user = self.create(name=name, avatar=avatar, whatsapp=whatsapp, bio=bio)
        return user.id
