"""Interface for Jalaali/Gregorian calendar converters."""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from typing import Union

from jalaali_calendar.entities.dates import GregorianDate
from jalaali_calendar.entities.dates import JalaaliDate


class CalendarConverterInterface(ABC):
    """Interface for calendar conversion services."""

    @abstractmethod
    def to_jalaali(self, value: Union[GregorianDate, datetime.date]) -> JalaaliDate:
        """Convert a Gregorian date to Jalaali.

        Args:
            value: The Gregorian date

        Returns:
            The matching Jalaali date
        """
        pass

    @abstractmethod
    def to_gregorian(self, value: JalaaliDate) -> GregorianDate:
        """Convert a Jalaali date to Gregorian.

        Args:
            value: The Jalaali date

        Returns:
            The matching Gregorian date
        """
        pass

    @abstractmethod
    def to_julian_day(self, value: JalaaliDate) -> int:
        pass

    @abstractmethod
    def from_julian_day(self, jdn: int) -> JalaaliDate:
        pass

    @abstractmethod
    def is_leap_year(self, year: int) -> bool:
        pass

    @abstractmethod
    def month_length(self, year: int, month: int) -> int:
        pass

    @abstractmethod
    def is_valid(self, value: JalaaliDate) -> bool:
        """Check if a Jalaali date exists in the calendar.

        Args:
            value: The Jalaali date to check

        Returns:
            True if valid, False otherwise
        """
        pass
