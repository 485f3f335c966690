from typing import Callable, Optional, Sequence
from sqlalchemy.orm import Session
from app.core.database import TransactionState, transaction
from app.core.exceptions import RegistrationFailed, ValidationError
from app.core.logging_config import log_error
from app.repositories.class_repository import ClassRepository
from app.repositories.class_schedule_repository import ClassScheduleRepository
from app.repositories.user_repository import UserRepository
from app.schemas.classes import ScheduleItem, SubjectOffering, TutorProfile
from app.utils.time_converter import convert_schedule_slot
import logging

# Получаем логгер для этого модуля
logger = logging.getLogger(__name__)


class RegistrationService:
    """
    Сервис регистрации репетитора.
    Создает профиль, занятие и слоты расписания одной транзакцией:
    либо сохраняется все, либо ничего.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Args:
            session_factory: Фабрика сессий БД (по умолчанию get_session_local())
        """
        self.session_factory = session_factory

    def register_tutor(self, profile: TutorProfile, offering: SubjectOffering, slots: Sequence[ScheduleItem]) -> None:
        """
        Регистрирует репетитора вместе с занятием и расписанием.

        Args:
            profile: Профиль репетитора
            offering: Предмет и стоимость
            slots: Слоты расписания ("HH:MM" строки)

        Raises:
            ValidationError: если не передано ни одного слота (транзакция не открывается)
            RegistrationFailed: при любой ошибке внутри транзакции (изменения откачены)
        """
        if not slots:
            logger.warning(f"⚠️ [REGISTRATION] Пустое расписание: name='{profile.name}', subject='{offering.subject}'")
            raise ValidationError("Расписание должно содержать хотя бы один слот")

        logger.info(f"📝 [REGISTRATION] Начало регистрации: name='{profile.name}', subject='{offering.subject}', слотов={len(slots)}")

        uow = None
        try:
            with transaction(self.session_factory) as uow:
                user_id = UserRepository(uow.session).create_profile(
                    name=profile.name,
                    avatar=profile.avatar,
                    whatsapp=profile.whatsapp,
                    bio=profile.bio,
                )
                logger.debug(f"--- [REGISTRATION] Профиль создан: user_id={user_id}")

                class_id = ClassRepository(uow.session).create_offering(
                    user_id=user_id,
                    subject=offering.subject,
                    cost=offering.cost,
                )
                logger.debug(f"--- [REGISTRATION] Занятие создано: class_id={class_id}")

                rows = [convert_schedule_slot(slot.week_day, slot.from_, slot.to) for slot in slots]
                ClassScheduleRepository(uow.session).create_many(class_id, rows)
                logger.debug(f"--- [REGISTRATION] Слоты добавлены: {len(rows)}")
        except Exception as e:
            state = uow.state.value if uow is not None else TransactionState.PENDING.value
            log_error(logger, e, context=f"[REGISTRATION] name='{profile.name}', subject='{offering.subject}', state={state}")
            raise RegistrationFailed() from e

        logger.info(f"✅ [REGISTRATION] Репетитор '{profile.name}' зарегистрирован: user_id={user_id}, class_id={class_id}")
