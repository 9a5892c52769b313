"""Julian Day Number bridge between the Gregorian and Jalaali calendars.

All functions work on bare integers and never validate month or day; see
`jalaali_calendar.use_cases.queries` for validity checks.
"""

from __future__ import annotations

from typing import Tuple

from jalaali_calendar.entities.constants import FIRST_HALF_DAYS
from jalaali_calendar.entities.constants import JALAALI_EPOCH_OFFSET
from jalaali_calendar.use_cases.breakpoints import jal_cal
from jalaali_calendar.utils.arithmetic import div
from jalaali_calendar.utils.arithmetic import mod


def g2d(gy: int, gm: int, gd: int) -> int:
    """Calculate the Julian Day number of a proleptic Gregorian date.

    The number corresponds to noon of the date. Years BC are numbered 0, -1,
    -2, ... and the formula holds from 1 March -100100 onward. Month and day
    may be any integers; overflowing values roll into neighbouring months and
    years.

    Args:
        gy: Calendar year
        gm: Calendar month (1 to 12 for canonical dates)
        gd: Calendar day of the month

    Returns:
        Julian Day number
    """
    # Years are counted from March so February's length only affects the end.
    year_shift = div(gm - 3, 12)
    d = (
        div((gy + year_shift + 100100) * 1461, 4)
        + div(153 * mod(gm + 9, 12) + 2, 5)
        + gd
        - 34840408
    )
    d = d - div(div(gy + 100100 + year_shift, 100) * 3, 4) + 752
    return d


def d2g(jdn: int) -> Tuple[int, int, int]:
    """Calculate the Gregorian date of a Julian Day number.

    Valid from jdn=-34839655 (the year -100100) to some millions of years
    ahead of the present.

    Args:
        jdn: Julian Day number

    Returns:
        Tuple of (year, month, day)
    """
    j = 4 * jdn + 139361631
    j = j + div(div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = div(mod(j, 1461), 4) * 5 + 308
    gd = div(mod(i, 153), 5) + 1
    gm = mod(div(i, 153), 12) + 1
    gy = div(j, 1461) - 100100 + div(14 - gm, 12)
    return gy, gm, gd


def j2d(jy: int, jm: int, jd: int) -> int:
    """Convert a Jalaali date to its Julian Day number.

    Raises:
        InvalidJalaaliYear: If `jy` is outside the supported range
    """
    r = jal_cal(jy)
    farvardin_first = g2d(r.gregorian_year_of_epoch, 3, r.march_offset)
    # 31 days for months 1-6, 30 from month 7 on.
    return farvardin_first + (jm - 1) * 31 - div(jm, 7) * (jm - 7) + jd - 1


def d2j(jdn: int) -> Tuple[int, int, int]:
    """Convert a Julian Day number to a Jalaali date.

    Returns:
        Tuple of (year, month, day)

    Raises:
        InvalidJalaaliYear: If the Gregorian year of `jdn` maps outside the
            supported Jalaali range
    """
    gy = d2g(jdn)[0]
    jy = gy - JALAALI_EPOCH_OFFSET
    r = jal_cal(jy)
    k = jdn - g2d(gy, 3, r.march_offset)

    if k >= 0:
        if k < FIRST_HALF_DAYS:
            return jy, 1 + div(k, 31), mod(k, 31) + 1
        k -= FIRST_HALF_DAYS
    else:
        # Before 1 Farvardin: the tail of the previous year.
        jy -= 1
        k += 179
        if r.leap == 1:
            k += 1

    return jy, 7 + div(k, 30), mod(k, 30) + 1


__all__ = ("g2d", "d2g", "j2d", "d2j")
