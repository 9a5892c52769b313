from __future__ import annotations

from jalaali_calendar.use_cases.breakpoints import is_supported_jalaali_year
from jalaali_calendar.use_cases.breakpoints import jal_cal


def is_leap_jalaali_year(jy: int) -> bool:
    """Is this a leap (366-day) Jalaali year?

    Raises:
        InvalidJalaaliYear: If `jy` is outside the supported range
    """
    return jal_cal(jy).leap == 0


def jalaali_month_length(jy: int, jm: int) -> int:
    """Number of days in a given month of a Jalaali year."""
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    if is_leap_jalaali_year(jy):
        return 30
    return 29


def is_valid_jalaali_date(jy: int, jm: int, jd: int) -> bool:
    """Check whether a Jalaali date is valid. Never raises."""
    return (
        is_supported_jalaali_year(jy)
        and 1 <= jm <= 12
        and 1 <= jd <= jalaali_month_length(jy, jm)
    )


__all__ = ("is_leap_jalaali_year", "jalaali_month_length", "is_valid_jalaali_date")
