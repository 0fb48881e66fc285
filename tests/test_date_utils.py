"""Tests for the DateUtils helpers."""

from datetime import date, datetime

import pytest

from reporting_examples.core.date_utils import DateUtils, to_datetime
from reporting_examples.core.errors import InvalidDate, NotANumber


class TestParsing:
    """Test input coercion."""

    def test_accepts_date_datetime_and_string(self):
        expected = datetime(2024, 1, 15)
        assert to_datetime(date(2024, 1, 15)) == expected
        assert to_datetime(expected) is expected
        assert to_datetime("2024-01-15") == expected

    def test_missing_date(self):
        with pytest.raises(InvalidDate, match="Date is required"):
            to_datetime(None)

    def test_unparseable_string(self):
        with pytest.raises(InvalidDate):
            to_datetime("not a date")

    def test_is_valid_date(self):
        assert DateUtils.is_valid_date("2024-02-29") is True
        assert DateUtils.is_valid_date("2023-02-29") is False
        assert DateUtils.is_valid_date(None) is False


class TestFormatting:
    """Test format_date."""

    def test_default_format(self):
        assert DateUtils.format_date(datetime(2024, 3, 5, 14, 30)) == "2024-03-05"

    def test_custom_format(self):
        assert DateUtils.format_date("2024-03-05", "%d/%m/%Y") == "05/03/2024"


class TestArithmetic:
    """Test add_days, subtract_days and days_between."""

    def test_add_days(self):
        assert DateUtils.add_days("2024-01-30", 3) == datetime(2024, 2, 2)

    def test_subtract_days(self):
        assert DateUtils.subtract_days("2024-03-01", 1) == datetime(2024, 2, 29)

    def test_days_must_be_number(self):
        with pytest.raises(NotANumber, match="Days must be a number"):
            DateUtils.add_days("2024-01-01", "3")

    def test_days_between(self):
        assert DateUtils.days_between("2024-01-01", "2024-01-31") == 30
        assert DateUtils.days_between("2024-01-31", "2024-01-01") == -30

    def test_days_between_truncates_partial_days(self):
        assert DateUtils.days_between(datetime(2024, 1, 1), datetime(2024, 1, 2, 23, 0)) == 1

    def test_days_between_requires_both(self):
        with pytest.raises(InvalidDate, match="Both start and end dates are required"):
            DateUtils.days_between("2024-01-01", None)


class TestCalendar:
    """Test weekday, quarter and month helpers."""

    def test_is_weekend(self):
        assert DateUtils.is_weekend("2024-01-06") is True   # Saturday
        assert DateUtils.is_weekend("2024-01-07") is True   # Sunday
        assert DateUtils.is_weekend("2024-01-08") is False  # Monday

    def test_business_days_inclusive(self):
        # Monday 1st through Sunday 14th
        assert DateUtils.get_business_days("2024-01-01", "2024-01-14") == 10

    def test_business_days_single_weekend_day(self):
        assert DateUtils.get_business_days("2024-01-06", "2024-01-06") == 0

    @pytest.mark.parametrize("month,quarter", [(1, 1), (3, 1), (4, 2), (9, 3), (12, 4)])
    def test_get_quarter(self, month, quarter):
        assert DateUtils.get_quarter(date(2024, month, 15)) == quarter

    def test_start_of_month(self):
        assert DateUtils.start_of_month("2024-02-17T10:20:30") == datetime(2024, 2, 1)

    def test_end_of_month_leap_year(self):
        assert DateUtils.end_of_month("2024-02-10") == datetime(2024, 2, 29, 23, 59, 59, 999999)


class TestAge:
    """Test get_age."""

    def test_birthday_passed(self):
        assert DateUtils.get_age("1990-05-01", today=date(2024, 6, 1)) == 34

    def test_birthday_not_yet(self):
        assert DateUtils.get_age("1990-05-01", today=date(2024, 4, 30)) == 33

    def test_requires_birth_date(self):
        with pytest.raises(InvalidDate, match="Birth date is required"):
            DateUtils.get_age(None)
