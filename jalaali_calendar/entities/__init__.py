from __future__ import annotations

from jalaali_calendar.entities.dates import BreakInfo
from jalaali_calendar.entities.dates import GregorianDate
from jalaali_calendar.entities.dates import JalaaliDate
from jalaali_calendar.entities.month_view import CalendarDay
from jalaali_calendar.entities.month_view import MonthView

__all__ = [
    "BreakInfo",
    "CalendarDay",
    "GregorianDate",
    "JalaaliDate",
    "MonthView",
]
