from __future__ import annotations

import datetime
from typing import Union

from jalaali_calendar.entities.dates import GregorianDate
from jalaali_calendar.entities.dates import JalaaliDate
from jalaali_calendar.use_cases import conversion
from jalaali_calendar.use_cases import queries
from jalaali_calendar.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)


class JalaaliConverter(CalendarConverterInterface):
    """
    Object facade over the conversion engine so that calling code can depend
    on `CalendarConverterInterface` instead of module functions.
    """

    def to_jalaali(self, value: Union[GregorianDate, datetime.date]) -> JalaaliDate:
        return conversion.to_jalaali(value)

    def to_gregorian(self, value: JalaaliDate) -> GregorianDate:
        return conversion.to_gregorian(*value.as_tuple())

    def to_julian_day(self, value: JalaaliDate) -> int:
        return conversion.jalaali_to_julian_day(value)

    def from_julian_day(self, jdn: int) -> JalaaliDate:
        return conversion.julian_day_to_jalaali(jdn)

    def is_leap_year(self, year: int) -> bool:
        return queries.is_leap_jalaali_year(year)

    def month_length(self, year: int, month: int) -> int:
        return queries.jalaali_month_length(year, month)

    def is_valid(self, value: JalaaliDate) -> bool:
        return queries.is_valid_jalaali_date(*value.as_tuple())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
