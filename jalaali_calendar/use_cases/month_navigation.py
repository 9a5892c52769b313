"""Month arithmetic and month grids used to drive calendar navigation."""

from __future__ import annotations

import datetime
from typing import List
from typing import Union

from jalaali_calendar import LOGGER
from jalaali_calendar.entities.constants import DAYS_IN_WEEK
from jalaali_calendar.entities.dates import GregorianDate
from jalaali_calendar.entities.dates import JalaaliDate
from jalaali_calendar.entities.month_view import CalendarDay
from jalaali_calendar.entities.month_view import MonthView
from jalaali_calendar.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from jalaali_calendar.use_cases.julian_day import d2g
from jalaali_calendar.use_cases.julian_day import j2d
from jalaali_calendar.use_cases.queries import jalaali_month_length
from jalaali_calendar.utils.arithmetic import div
from jalaali_calendar.utils.arithmetic import mod

ReferenceDate = Union[JalaaliDate, GregorianDate, datetime.date]


def add_months(reference: JalaaliDate, month_delta: int) -> JalaaliDate:
    """Shift a Jalaali date by a number of months.

    The day of month is carried over unchanged, so the result may name a day
    the target month does not have (e.g. 31 Mehr); clamp or validate it with
    `is_valid_jalaali_date` when a canonical date is needed.
    """
    year = reference.year + div(month_delta, 12)
    month = reference.month + mod(month_delta, 12)

    if month < 1:
        year -= 1
        month += 12
    elif month > 12:
        year += 1
        month -= 12

    return JalaaliDate(year=year, month=month, day=reference.day)


def weekday_of(jdn: int) -> int:
    """Saturday-first weekday index (0 = Saturday) of a Julian Day number."""
    return mod(jdn + 2, DAYS_IN_WEEK)


def build_month_view(jy: int, jm: int) -> MonthView:
    """List every day of a Jalaali month with its Gregorian date and weekday.

    Raises:
        InvalidJalaaliYear: If `jy` is outside the supported range
    """
    first = j2d(jy, jm, 1)
    days: List[CalendarDay] = []
    for offset in range(jalaali_month_length(jy, jm)):
        jdn = first + offset
        gy, gm, gd = d2g(jdn)
        days.append(
            CalendarDay(
                jalaali=JalaaliDate(year=jy, month=jm, day=offset + 1),
                gregorian=GregorianDate(year=gy, month=gm, day=gd),
                julian_day=jdn,
                weekday=weekday_of(jdn),
            )
        )
    return MonthView(year=jy, month=jm, days=days)


class MonthNavigationUseCase:
    """Next/previous month navigation relative to a caller-supplied date.

    The reference date is always passed in; callers that want "today" compute
    it themselves (e.g. `datetime.date.today()`).
    """

    def __init__(self, converter: CalendarConverterInterface) -> None:
        self.converter = converter

    def to_reference(self, reference: ReferenceDate) -> JalaaliDate:
        if isinstance(reference, JalaaliDate):
            return reference
        return self.converter.to_jalaali(reference)

    def shift(self, reference: ReferenceDate, month_delta: int) -> JalaaliDate:
        target = add_months(self.to_reference(reference), month_delta)
        LOGGER.debug(f"Shifted {reference} by {month_delta} months to {target}")
        return target

    def month_view(self, reference: ReferenceDate, month_delta: int = 0) -> MonthView:
        target = self.shift(reference, month_delta)
        return build_month_view(target.year, target.month)


__all__ = (
    "add_months",
    "build_month_view",
    "weekday_of",
    "MonthNavigationUseCase",
)
