from __future__ import annotations

from jalaali_calendar.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)

__all__ = [
    "CalendarConverterInterface",
]
