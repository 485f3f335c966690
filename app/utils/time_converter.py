"""
Утилиты для перевода времени "HH:MM" в минуты от полуночи и обратно
"""

import re
from typing import Union

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r'^([0-9]{1,2}):([0-9]{2})$')


class InvalidTimeFormat(ValueError):
    """Строка не является корректным временем в формате HH:MM."""


class InvalidScheduleSlot(ValueError):
    """Слот расписания нарушает ограничения по дню недели или интервалу."""


def convert_hour_to_minutes(value: str, allow_end_of_day: bool = False) -> int:
    """
    Переводит время "HH:MM" в количество минут от полуночи.

    Args:
        value: Время в формате "HH:MM" (например, "08:30")
        allow_end_of_day: Разрешить "24:00" (конец суток, 1440 минут)

    Returns:
        Количество минут от полуночи

    Raises:
        InvalidTimeFormat: если строку не удалось разобрать
    """
    if not isinstance(value, str):
        raise InvalidTimeFormat(f"Ожидалась строка времени, получено: {value!r}")

    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise InvalidTimeFormat(f"Некорректный формат времени: '{value}'")

    hours, minutes = int(match.group(1)), int(match.group(2))

    if allow_end_of_day and hours == 24 and minutes == 0:
        return MINUTES_PER_DAY

    if hours > 23 or minutes > 59:
        raise InvalidTimeFormat(f"Время вне допустимого диапазона: '{value}'")

    return hours * 60 + minutes


def is_ascii_number(value: str) -> bool:
    """Строка состоит только из цифр 0-9 (без учета пробелов по краям)."""
    value = value.strip()
    return value.isascii() and value.isdigit()


def convert_minutes_to_hour(minutes: int) -> str:
    """Переводит минуты от полуночи обратно в строку "HH:MM"."""
    hours, rest = divmod(minutes, 60)
    return f"{hours:02d}:{rest:02d}"


def convert_schedule_slot(week_day: Union[int, str], time_from: str, time_to: str) -> dict:
    """
    Переводит слот расписания в строку таблицы class_schedules (без class_id).

    Проверяет инварианты: 0 <= week_day <= 6 и 0 <= from < to <= 1440.
    """
    if isinstance(week_day, str) and not is_ascii_number(week_day):
        raise InvalidScheduleSlot(f"Некорректный день недели: {week_day!r}")

    try:
        day = int(week_day)
    except (TypeError, ValueError):
        raise InvalidScheduleSlot(f"Некорректный день недели: {week_day!r}")

    if isinstance(week_day, bool) or not 0 <= day <= 6:
        raise InvalidScheduleSlot(f"День недели вне диапазона 0-6: {week_day!r}")

    start = convert_hour_to_minutes(time_from)
    end = convert_hour_to_minutes(time_to, allow_end_of_day=True)

    if start >= end:
        raise InvalidScheduleSlot(f"Начало слота {time_from} не раньше конца {time_to}")

    return {'week_day': day, 'from_': start, 'to': end}
