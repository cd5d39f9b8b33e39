"""
Business Days — перенос даты на ближайший рабочий день

Чистая функция над явно переданной датой. Текущее время никогда не читается:
тесты передают произвольные даты без подмены глобальных часов.

Правило:
- Пн-Пт → дата без изменений
- Сб → +2 дня (следующий понедельник)
- Вс → +1 день (следующий понедельник)
"""

from datetime import date, datetime, timedelta
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

# date.weekday(): Пн=0 ... Вс=6
SATURDAY: Final[int] = 5
SUNDAY: Final[int] = 6

# Сдвиг до понедельника для выходных дней
WEEKEND_SHIFT_DAYS: Final[dict[int, int]] = {
    SATURDAY: 2,
    SUNDAY: 1,
}


# =============================================================================
# FUNCTIONS
# =============================================================================


def _as_date(value: date) -> date:
    # datetime является подклассом date: отбрасываем время
    if isinstance(value, datetime):
        return value.date()
    return value


def is_weekend(value: date) -> bool:
    """
    Проверка, приходится ли дата на выходной.

    Args:
        value: Дата (datetime приводится к date)

    Returns:
        True для субботы и воскресенья
    """
    return _as_date(value).weekday() in WEEKEND_SHIFT_DAYS


def next_business_day(value: date) -> date:
    """
    Ближайший рабочий день начиная с указанной даты.

    Args:
        value: Исходная дата (datetime приводится к date)

    Returns:
        Та же дата для Пн-Пт, иначе следующий понедельник

    Examples:
        >>> next_business_day(date(2022, 6, 6))  # Пн
        datetime.date(2022, 6, 6)
        >>> next_business_day(date(2022, 6, 4))  # Сб
        datetime.date(2022, 6, 6)
        >>> next_business_day(date(2022, 6, 5))  # Вс
        datetime.date(2022, 6, 6)
    """
    day = _as_date(value)
    shift = WEEKEND_SHIFT_DAYS.get(day.weekday(), 0)
    return day + timedelta(days=shift)
