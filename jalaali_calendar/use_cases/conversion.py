from __future__ import annotations

import datetime
from typing import Optional
from typing import Union

from jalaali_calendar.entities.dates import GregorianDate
from jalaali_calendar.entities.dates import JalaaliDate
from jalaali_calendar.use_cases.julian_day import d2g
from jalaali_calendar.use_cases.julian_day import d2j
from jalaali_calendar.use_cases.julian_day import g2d
from jalaali_calendar.use_cases.julian_day import j2d


def to_jalaali(
    gy: Union[int, datetime.date, GregorianDate],
    gm: Optional[int] = None,
    gd: Optional[int] = None,
) -> JalaaliDate:
    """Convert a Gregorian date to Jalaali.

    Accepts either three integers or a single `datetime.date` /
    `GregorianDate`.

    Raises:
        InvalidJalaaliYear: If the date falls outside the supported range
    """
    if isinstance(gy, datetime.date):
        gy, gm, gd = gy.year, gy.month, gy.day
    elif isinstance(gy, GregorianDate):
        gy, gm, gd = gy.as_tuple()
    if gm is None or gd is None:
        raise TypeError("to_jalaali() needs a year, month and day")
    return julian_day_to_jalaali(g2d(gy, gm, gd))


def to_gregorian(jy: int, jm: int, jd: int) -> GregorianDate:
    """Convert a Jalaali date to Gregorian.

    Raises:
        InvalidJalaaliYear: If `jy` is outside the supported range
    """
    return julian_day_to_gregorian(j2d(jy, jm, jd))


def jalaali_to_julian_day(value: JalaaliDate) -> int:
    return j2d(*value.as_tuple())


def julian_day_to_jalaali(jdn: int) -> JalaaliDate:
    jy, jm, jd = d2j(jdn)
    return JalaaliDate(year=jy, month=jm, day=jd)


def gregorian_to_julian_day(value: GregorianDate) -> int:
    return g2d(*value.as_tuple())


def julian_day_to_gregorian(jdn: int) -> GregorianDate:
    gy, gm, gd = d2g(jdn)
    return GregorianDate(year=gy, month=gm, day=gd)


__all__ = (
    "to_jalaali",
    "to_gregorian",
    "jalaali_to_julian_day",
    "julian_day_to_jalaali",
    "gregorian_to_julian_day",
    "julian_day_to_gregorian",
)
