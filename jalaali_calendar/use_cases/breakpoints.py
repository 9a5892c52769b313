"""Leap-cycle resolution for the Jalaali calendar.

The Jalaali intercalation rule is a sequence of 33-year style sub-cycles whose
boundaries were fitted to the vernal equinox. `jal_cal` locates a year in that
table and reports whether it is leap and on which day of March it begins.

See:
    http://www.astro.uni.torun.pl/~kb/Papers/EMP/PersianC-EMP.htm
    http://www.fourmilab.ch/documents/calendar/
"""

from __future__ import annotations

from jalaali_calendar import LOGGER
from jalaali_calendar.entities.constants import BREAKS
from jalaali_calendar.entities.constants import JALAALI_EPOCH_OFFSET
from jalaali_calendar.entities.constants import MAX_JALAALI_YEAR
from jalaali_calendar.entities.constants import MIN_JALAALI_YEAR
from jalaali_calendar.entities.dates import BreakInfo
from jalaali_calendar.utils.arithmetic import div
from jalaali_calendar.utils.arithmetic import mod
from jalaali_calendar.utils.exceptions import InvalidJalaaliYear


def is_supported_jalaali_year(jy: int) -> bool:
    return MIN_JALAALI_YEAR <= jy <= MAX_JALAALI_YEAR


def jal_cal(jy: int) -> BreakInfo:
    """Resolve the leap-cycle position of a Jalaali year.

    Args:
        jy: Jalaali year, -61 to 3177

    Returns:
        BreakInfo with `leap` (years since the last leap year, 0 meaning
        this year is leap), the Gregorian year in which `jy` begins and the
        day of March of 1 Farvardin.

    Raises:
        InvalidJalaaliYear: If `jy` lies outside the breakpoint table
    """
    if not is_supported_jalaali_year(jy):
        LOGGER.debug(f"Rejecting Jalaali year {jy}")
        raise InvalidJalaaliYear(jy, MIN_JALAALI_YEAR, MAX_JALAALI_YEAR)

    gy = jy + JALAALI_EPOCH_OFFSET
    leap_j = -14
    jp = BREAKS[0]
    jump = 0

    # Find the limiting years for the Jalaali year jy.
    for jm in BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += div(jump, 33) * 8 + div(mod(jump, 33), 4)
        jp = jm
    n = jy - jp

    # Leap years from AD 621 to the start of jy, Jalaali then Gregorian.
    leap_j += div(n, 33) * 8 + div(mod(n, 33) + 3, 4)
    if mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1
    leap_g = div(gy, 4) - div((div(gy, 100) + 1) * 3, 4) - 150

    march = 20 + leap_j - leap_g

    # Years since the last leap year; the tail of a sub-cycle counts forward.
    if jump - n < 6:
        n = n - jump + div(jump + 4, 33) * 33
    position = mod(n + 1, 33) - 1
    leap = 4 if position == -1 else mod(position, 4)

    return BreakInfo(leap=leap, gregorian_year_of_epoch=gy, march_offset=march)


__all__ = ("is_supported_jalaali_year", "jal_cal")
