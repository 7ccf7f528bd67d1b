# services/dates.py
"""
Calendar helpers shared by the report services.

Month filters are expressed as half-open date ranges [first day, first day of
next month) so the same query runs on SQL Server and SQLite.
"""
import calendar
from datetime import date
from typing import Optional, Tuple

from errors import ValidationError

PERIODS = ("this_month", "last_month", "this_year", "all_time")


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
     """Move (year, month) by delta months, rolling the year over."""
     index = year * 12 + (month - 1) + delta
     return index // 12, index % 12 + 1


def month_bounds(year: int, month: int) -> Tuple[date, date]:
     if not 1 <= month <= 12:
          raise ValidationError("Month must be between 1 and 12")
     next_year, next_month = shift_month(year, month, 1)
     return date(year, month, 1), date(next_year, next_month, 1)


def month_label(year: int, month: int) -> str:
     return f"{calendar.month_name[month]} {year}"


def period_bounds(period: str, today: Optional[date] = None) -> Tuple[Optional[date], Optional[date]]:
     """
     Resolve a report period to a half-open [start, end) range.

     all_time returns (None, None).
     """
     today = today or date.today()
     if period == "this_month":
          return month_bounds(today.year, today.month)
     if period == "last_month":
          return month_bounds(*shift_month(today.year, today.month, -1))
     if period == "this_year":
          return date(today.year, 1, 1), date(today.year + 1, 1, 1)
     if period == "all_time":
          return None, None
     raise ValidationError(f"Unknown period '{period}'; expected one of {', '.join(PERIODS)}")
