from typing import Any, Callable, List, Optional, Tuple
from sqlalchemy.orm import Session
from app.core.database import get_session_local
from app.core.exceptions import InvalidInput
from app.models.class_offering import Class
from app.models.class_schedule import ClassSchedule
from app.models.user import User
from app.repositories.class_repository import ClassRepository
from app.repositories.class_schedule_repository import ClassScheduleRepository
from app.utils.time_converter import InvalidTimeFormat, convert_hour_to_minutes, is_ascii_number
import logging

# Получаем логгер для этого модуля
logger = logging.getLogger(__name__)


class AvailabilityService:
    """
    Сервис поиска репетиторов, свободных в указанный день недели и время.
    Только чтение: никаких изменений в БД не выполняет.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Args:
            session_factory: Фабрика сессий БД (по умолчанию get_session_local())
        """
        self.session_factory = session_factory

    def find_available(self, subject: Optional[str], week_day: Any, time: Optional[str]) -> List[Tuple[User, Class]]:
        """
        Находит занятия по предмету, у которых есть слот, покрывающий время.

        Args:
            subject: Название предмета (точное совпадение)
            week_day: День недели 0-6 (int или строка с числом)
            time: Время в формате "HH:MM"

        Returns:
            Список пар (профиль репетитора, занятие); пустой список, если ничего не найдено

        Raises:
            InvalidInput: если фильтр не передан или время некорректно
        """
        day, time_in_minutes = self._parse_filters(subject, week_day, time)

        session = self._open_session()
        try:
            results = ClassRepository(session).find_available(subject, day, time_in_minutes)
        finally:
            session.close()

        logger.info(f"✅ [SEARCH] Найдено занятий: {len(results)}")
        return results

    def find_available_with_schedules(
        self, subject: Optional[str], week_day: Any, time: Optional[str]
    ) -> List[Tuple[User, Class, List[ClassSchedule]]]:
        """
        То же, что find_available, но вместе со слотами расписания каждого занятия.
        Занятия и слоты читаются в одной сессии.
        """
        day, time_in_minutes = self._parse_filters(subject, week_day, time)

        session = self._open_session()
        try:
            matches = ClassRepository(session).find_available(subject, day, time_in_minutes)
            schedules = ClassScheduleRepository(session).find_by_class_ids(offering.id for _, offering in matches)
        finally:
            session.close()

        logger.info(f"✅ [SEARCH] Найдено занятий: {len(matches)}")
        return [(user, offering, schedules[offering.id]) for user, offering in matches]

    def _open_session(self) -> Session:
        factory = self.session_factory or get_session_local()
        return factory()

    def _parse_filters(self, subject: Optional[str], week_day: Any, time: Optional[str]) -> Tuple[int, int]:
        """Проверяет фильтры до обращения к БД; возвращает (день недели, минуты)"""
        if not subject or week_day is None or week_day == "" or not time:
            logger.warning(f"⚠️ [SEARCH] Не переданы фильтры: subject={subject!r}, week_day={week_day!r}, time={time!r}")
            raise InvalidInput("Необходимо указать фильтры subject, week_day и time")

        day = self._parse_week_day(week_day)

        try:
            time_in_minutes = convert_hour_to_minutes(time)
        except InvalidTimeFormat as e:
            logger.warning(f"⚠️ [SEARCH] {e}")
            raise InvalidInput(str(e)) from e

        logger.info(f"🔍 [SEARCH] subject='{subject}', week_day={day}, time={time} ({time_in_minutes} мин)")
        return day, time_in_minutes

    @staticmethod
    def _parse_week_day(week_day: Any) -> int:
        if isinstance(week_day, bool) or (isinstance(week_day, str) and not is_ascii_number(week_day)):
            raise InvalidInput(f"Некорректный день недели: {week_day!r}")
        try:
            day = int(week_day)
        except (TypeError, ValueError):
            raise InvalidInput(f"Некорректный день недели: {week_day!r}")
        if not 0 <= day <= 6:
            raise InvalidInput(f"День недели должен быть от 0 до 6, получено: {day}")
        return day
