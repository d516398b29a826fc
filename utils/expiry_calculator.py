import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pandas as pd

from config.settings import Config

# The number of milliseconds in a day
MS_IN_A_DAY = 1000 * 60 * 60 * 24

# Weekday code (Sunday = 1 ... Saturday = 7) -> days until the next Friday
# {1: 5, 2: 4, 3: 3, 4: 2, 5: 1, 6: 0, 7: 6}
DAYS_UNTIL_FRIDAY = {code: (Config.EXPIRATION_WEEKDAY_CODE - code) % 7 for code in range(1, 8)}


class ExpirationType(str, Enum):
    STANDARD = "standard"
    WEEKLY = "weekly"


@dataclass(frozen=True)
class InvalidInput:
    value: object

    @property
    def message(self):
        return f"Invalid currentWeekDay: {self.value}"


@dataclass(frozen=True)
class FridayOffset:
    """
    Result of the next-Friday lookup.
    Either `offset` is set (success) or `error` is set (failure).
    """
    offset: Optional[int] = None
    error: Optional[InvalidInput] = None

    @property
    def ok(self):
        return self.error is None


def weekday_code(day):
    """Sunday = 1, Monday = 2, ... Saturday = 7"""
    return day.isoweekday() % 7 + 1


def days_until_next_friday(current_weekday):
    # bool is an int subclass, True would otherwise map to Sunday
    if (not isinstance(current_weekday, int) or isinstance(current_weekday, bool)
            or current_weekday not in DAYS_UNTIL_FRIDAY):
        return FridayOffset(error=InvalidInput(current_weekday))
    return FridayOffset(offset=DAYS_UNTIL_FRIDAY[current_weekday])


def is_monthly_expiration(day_of_month):
    low, high = Config.MONTHLY_WINDOW
    return low <= day_of_month <= high


def is_weekly_expiration(day_of_month):
    return not is_monthly_expiration(day_of_month)


def classify_expiration(day_of_month):
    if is_monthly_expiration(day_of_month):
        return ExpirationType.STANDARD
    return ExpirationType.WEEKLY


def _to_midnight(value):
    if isinstance(value, datetime.datetime):
        value = value.date()
    return datetime.datetime.combine(value, datetime.time.min)


def calculate_day_difference(today, target):
    """
    Signed number of calendar days from `today` to `target`.
    Both sides are normalized to midnight, so time-of-day never shifts the count.
    """
    delta = _to_midnight(target) - _to_midnight(today)
    delta_ms = delta // datetime.timedelta(milliseconds=1)
    # Truncate toward zero (floor division would round negatives down)
    return int(delta_ms / MS_IN_A_DAY)


def is_expiration_today(today, target):
    return calculate_day_difference(today, target) == 0


def generate_expiration_dates(start, count=Config.EXPIRATION_COUNT, stride_days=Config.EXPIRATION_STRIDE_DAYS):
    """
    Returns `count` dates beginning at `start`, each `stride_days` after the previous one.
    """
    if count <= 0:
        return []
    index = pd.date_range(start=start, periods=count, freq=f"{stride_days}D")
    return [ts.date() for ts in index]
