from __future__ import annotations

from jalaali_calendar.utils.arithmetic import div
from jalaali_calendar.utils.arithmetic import mod
from jalaali_calendar.utils.exceptions import CalendarException
from jalaali_calendar.utils.exceptions import InvalidJalaaliYear

__all__ = ["div", "mod", "CalendarException", "InvalidJalaaliYear"]
