from __future__ import annotations

from enum import IntEnum


# Jalaali years starting the 33-year rule.
# See http://www.astro.uni.torun.pl/~kb/Papers/EMP/PersianC-EMP.htm
BREAKS = (
    -61,
    9,
    38,
    199,
    426,
    686,
    756,
    818,
    1111,
    1181,
    1210,
    1635,
    2060,
    2097,
    2192,
    2262,
    2324,
    2394,
    2456,
    3178,
)

MIN_JALAALI_YEAR = BREAKS[0]
MAX_JALAALI_YEAR = BREAKS[-1] - 1

# Jalaali and Gregorian year numbers are offset by this many years at Nowruz.
JALAALI_EPOCH_OFFSET = 621

DAYS_IN_WEEK = 7
FIRST_HALF_DAYS = 186  # six 31-day months


class Weekday(IntEnum):
    """Day-of-week positions in a Persian (Saturday-first) week."""

    SATURDAY = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
