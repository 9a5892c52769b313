from __future__ import annotations

from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from jalaali_calendar.entities.constants import DAYS_IN_WEEK
from jalaali_calendar.entities.constants import Weekday
from jalaali_calendar.entities.dates import GregorianDate
from jalaali_calendar.entities.dates import JalaaliDate


class CalendarDay(BaseModel):
    """One cell of a month grid."""

    model_config = ConfigDict(frozen=True)

    jalaali: JalaaliDate
    gregorian: GregorianDate
    julian_day: int
    weekday: Weekday


class MonthView(BaseModel):
    """All days of one Jalaali month, laid out on a Saturday-first week."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    days: List[CalendarDay] = Field(default_factory=list)

    @property
    def first_day(self) -> Optional[CalendarDay]:
        return self.days[0] if self.days else None

    @property
    def last_day(self) -> Optional[CalendarDay]:
        return self.days[-1] if self.days else None

    @property
    def weeks(self) -> List[List[Optional[CalendarDay]]]:
        """Rows of seven slots; slots outside the month are None."""
        rows: List[List[Optional[CalendarDay]]] = []
        row: List[Optional[CalendarDay]] = []
        for day in self.days:
            if not rows and not row:
                row.extend([None] * int(day.weekday))
            row.append(day)
            if len(row) == DAYS_IN_WEEK:
                rows.append(row)
                row = []
        if row:
            row.extend([None] * (DAYS_IN_WEEK - len(row)))
            rows.append(row)
        return rows
