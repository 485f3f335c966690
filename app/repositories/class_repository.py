"""
Репозиторий для работы с занятиями (предметами репетиторов)
"""

from typing import List, Tuple
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.models.class_offering import Class
from app.models.class_schedule import ClassSchedule
from app.models.user import User
from .base import BaseRepository


class ClassRepository(BaseRepository[Class]):
    """Репозиторий для работы с занятиями"""

    def __init__(self, session: Session):
        super().__init__(Class, session)

    def create_offering(self, user_id: int, subject: str, cost: float) -> int:
        """Создает занятие для репетитора и возвращает его ID"""
        offering = self.create(user_id=user_id, subject=subject, cost=cost)
        return offering.id

    def find_available(self, subject: str, week_day: int, time_in_minutes: int) -> List[Tuple[User, Class]]:
        """
        Находит занятия по предмету, у которых есть слот, покрывающий
        указанный день недели и минуту: from <= t < to.

        Слоты проверяются через EXISTS, поэтому занятие попадает в результат
        не более одного раза, сколько бы слотов ни совпало.
        """
        slot_covers_time = (
            select(ClassSchedule.id)
            .where(
                ClassSchedule.class_id == Class.id,
                ClassSchedule.week_day == week_day,
                ClassSchedule.from_ <= time_in_minutes,
                ClassSchedule.to > time_in_minutes,
            )
            .exists()
        )

        query = (
            select(User, Class)
            .select_from(Class)
            .join(User, Class.user_id == User.id)
            .where(Class.subject == subject, slot_covers_time)
            .order_by(Class.id)
        )

        return [(user, offering) for user, offering in self.db.execute(query)]
