from __future__ import annotations

from jalaali_calendar import DEFAULT_PATH
from jalaali_calendar.settings.calendar_settings import CalendarSettings

CALENDAR_SETTINGS = CalendarSettings(_env_file=f"{DEFAULT_PATH}/.env")

__all__ = ["CalendarSettings", "CALENDAR_SETTINGS"]
