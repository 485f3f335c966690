"""
Репозиторий для работы со слотами расписания занятий
"""

from typing import Dict, Iterable, List, Sequence
from sqlalchemy import insert, select
from sqlalchemy.orm import Session
from app.models.class_schedule import ClassSchedule
from .base import BaseRepository


class ClassScheduleRepository(BaseRepository[ClassSchedule]):
    """Репозиторий для работы со слотами расписания"""

    def __init__(self, session: Session):
        super().__init__(ClassSchedule, session)

    def create_many(self, class_id: int, slots: Sequence[Dict[str, int]]) -> None:
        """
        Вставляет все слоты занятия одним пакетным INSERT.

        Args:
            class_id: ID занятия
            slots: Сконвертированные слоты с ключами week_day, from_, to
        """
        rows = [{**slot, 'class_id': class_id} for slot in slots]
        self.db.execute(insert(ClassSchedule), rows)

    def find_by_class_ids(self, class_ids: Iterable[int]) -> Dict[int, List[ClassSchedule]]:
        """Получает слоты для набора занятий, сгруппированные по class_id"""
        ids = list(class_ids)
        grouped: Dict[int, List[ClassSchedule]] = {class_id: [] for class_id in ids}
        if not ids:
            return grouped

        query = (
            select(ClassSchedule)
            .where(ClassSchedule.class_id.in_(ids))
            .order_by(ClassSchedule.week_day, ClassSchedule.from_, ClassSchedule.id)
        )
        for slot in self.db.scalars(query):
            grouped[slot.class_id].append(slot)

        return grouped
