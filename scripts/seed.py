"""
Скрипт для наполнения базы тестовыми репетиторами
"""

import os
import sys
import logging
from dotenv import load_dotenv

# Добавляем корневую директорию проекта в путь
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Загружаем переменные окружения
load_dotenv(os.getenv("ENV_FILE", ".env"))

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.core.database import init_database
from app.core.exceptions import TutorServiceError
from app.schemas.classes import ScheduleItem, SubjectOffering, TutorProfile
from app.services.registration_service import RegistrationService

logger = logging.getLogger(__name__)

TUTORS = [
    {
        "profile": TutorProfile(
            name="Ana",
            avatar="https://example.com/avatars/ana.png",
            whatsapp="5511999990001",
            bio="Преподаю математику старшеклассникам.",
        ),
        "offering": SubjectOffering(subject="Math", cost=50),
        "schedule": [
            ScheduleItem(week_day=1, from_="08:00", to="10:00"),
            ScheduleItem(week_day=3, from_="14:00", to="18:00"),
        ],
    },
    {
        "profile": TutorProfile(
            name="Bruno",
            avatar="https://example.com/avatars/bruno.png",
            whatsapp="5511999990002",
            bio="Физика и подготовка к олимпиадам.",
        ),
        "offering": SubjectOffering(subject="Physics", cost=70),
        "schedule": [
            ScheduleItem(week_day=2, from_="09:00", to="12:00"),
            ScheduleItem(week_day=2, from_="18:00", to="24:00"),
        ],
    },
    {
        "profile": TutorProfile(
            name="Carla",
            avatar="https://example.com/avatars/carla.png",
            whatsapp="5511999990003",
            bio="Математика для начинающих, занятия по выходным.",
        ),
        "offering": SubjectOffering(subject="Math", cost=40),
        "schedule": [
            ScheduleItem(week_day=0, from_="10:00", to="13:00"),
            ScheduleItem(week_day=6, from_="10:00", to="13:00"),
        ],
    },
]


def seed():
    """Регистрирует тестовых репетиторов через RegistrationService"""
    init_database()
    service = RegistrationService()

    created = 0
    for tutor in TUTORS:
        try:
            service.register_tutor(tutor["profile"], tutor["offering"], tutor["schedule"])
            created += 1
        except TutorServiceError as e:
            logger.error(f"❌ Не удалось добавить репетитора {tutor['profile'].name}: {e}")

    logger.info(f"🎉 Добавлено репетиторов: {created} из {len(TUTORS)}")
    return created == len(TUTORS)


if __name__ == "__main__":
    setup_logging(level=settings.LOG_LEVEL, enable_colors=settings.LOG_COLORS)
    success = seed()
    sys.exit(0 if success else 1)
