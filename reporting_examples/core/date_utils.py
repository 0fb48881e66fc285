"""Date arithmetic helpers accepting dates, datetimes or ISO-8601 strings."""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Any, Optional, Union

from reporting_examples.core.errors import InvalidDate, NotANumber

DateLike = Union[date, datetime, str]


def to_datetime(value: Any) -> datetime:
    """
    Coerce ``value`` to a datetime.

    Raises:
        InvalidDate: If value is empty or cannot be parsed
    """
    if value is None or value == "":
        raise InvalidDate("Date is required")
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidDate(f"Invalid date: {value}") from e
    raise InvalidDate(f"Invalid date: {value!r}")


def _require_days(days: Any) -> None:
    if isinstance(days, bool) or not isinstance(days, (int, float)):
        raise NotANumber("Days must be a number")


def _require_range(start: Any, end: Any) -> None:
    if not start or not end:
        raise InvalidDate("Both start and end dates are required")


class DateUtils:
    """Stateless date helpers."""

    @staticmethod
    def format_date(value: DateLike, fmt: str = "%Y-%m-%d") -> str:
        return to_datetime(value).strftime(fmt)

    @staticmethod
    def add_days(value: DateLike, days: float) -> datetime:
        _require_days(days)
        return to_datetime(value) + timedelta(days=days)

    @staticmethod
    def subtract_days(value: DateLike, days: float) -> datetime:
        _require_days(days)
        return to_datetime(value) - timedelta(days=days)

    @staticmethod
    def days_between(start: DateLike, end: DateLike) -> int:
        """Whole days from start to end, truncated toward zero."""
        _require_range(start, end)
        delta = to_datetime(end) - to_datetime(start)
        return int(delta.total_seconds() / 86400)

    @staticmethod
    def is_weekend(value: DateLike) -> bool:
        return to_datetime(value).weekday() >= 5

    @staticmethod
    def get_business_days(start: DateLike, end: DateLike) -> int:
        """Count weekdays from start to end, both inclusive."""
        _require_range(start, end)
        current = to_datetime(start).date()
        last = to_datetime(end).date()

        count = 0
        while current <= last:
            if current.weekday() < 5:
                count += 1
            current += timedelta(days=1)
        return count

    @staticmethod
    def is_valid_date(value: Any) -> bool:
        try:
            to_datetime(value)
        except InvalidDate:
            return False
        return True

    @staticmethod
    def get_age(birth_date: DateLike, today: Optional[date] = None) -> int:
        """Completed years between birth_date and today."""
        if not birth_date:
            raise InvalidDate("Birth date is required")
        born = to_datetime(birth_date).date()
        today = today or date.today()
        had_birthday = (today.month, today.day) >= (born.month, born.day)
        return today.year - born.year - (0 if had_birthday else 1)

    @staticmethod
    def get_quarter(value: DateLike) -> int:
        return (to_datetime(value).month - 1) // 3 + 1

    @staticmethod
    def start_of_month(value: DateLike) -> datetime:
        moment = to_datetime(value)
        return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    @staticmethod
    def end_of_month(value: DateLike) -> datetime:
        moment = to_datetime(value)
        last_day = calendar.monthrange(moment.year, moment.month)[1]
        return moment.replace(day=last_day, hour=23, minute=59, second=59, microsecond=999999)
