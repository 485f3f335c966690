#!/usr/bin/env python3
"""
Поиск свободных репетиторов из командной строки.

Пример:
    python scripts/check_availability.py Math 1 09:00
"""

import argparse
import os
import sys

# Добавляем корневую директорию проекта в путь
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import settings
from app.core.logging_config import setup_logging
from app.core.database import init_database
from app.core.exceptions import InvalidInput
from app.services.availability_service import AvailabilityService
from app.utils.time_converter import convert_minutes_to_hour


def main() -> int:
    parser = argparse.ArgumentParser(description="Поиск репетиторов по предмету, дню недели и времени")
    parser.add_argument("subject", help="Предмет, например Math")
    parser.add_argument("week_day", help="День недели 0-6")
    parser.add_argument("time", help="Время в формате HH:MM")
    args = parser.parse_args()

    setup_logging(level=settings.LOG_LEVEL, enable_colors=settings.LOG_COLORS)
    init_database()

    service = AvailabilityService()
    try:
        matches = service.find_available_with_schedules(args.subject, args.week_day, args.time)
    except InvalidInput as e:
        print(f"❌ {e}")
        return 2

    if not matches:
        print("⚠️ Свободных репетиторов не найдено")
        return 0

    for user, offering, schedule in matches:
        print(f"✅ {user.name} | {offering.subject} | {offering.cost} | WhatsApp: {user.whatsapp}")
        for slot in schedule:
            print(f"   📅 {slot.week_day}: {convert_minutes_to_hour(slot.from_)}-{convert_minutes_to_hour(slot.to)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
