from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Tuple

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class GregorianDate(BaseModel):
    """A proleptic Gregorian date.

    Years use astronomical numbering (1 BC is year 0). Month and day are not
    range checked: the JDN formulas accept any integers and callers decide
    whether a canonical value is required.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(description="Astronomical year, may be zero or negative")
    month: int = Field(description="Month, 1-12 for canonical dates")
    day: int = Field(description="Day of month, 1-31 for canonical dates")

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    @classmethod
    def from_date(cls, value: datetime.date) -> "GregorianDate":
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> datetime.date:
        """Return a `datetime.date`; raises ValueError outside years 1-9999."""
        return datetime.date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class JalaaliDate(BaseModel):
    """A Jalaali (Persian) calendar date.

    Instances are immutable; conversions and month arithmetic always return a
    new value. Bounds are not enforced here so that out-of-range values can be
    represented and then rejected by `is_valid_jalaali_date`.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(description="Jalaali year, -61 to 3177 when supported")
    month: int = Field(description="Month, 1 (Farvardin) to 12 (Esfand)")
    day: int = Field(description="Day of month, bounded by the month length")

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


@dataclass(frozen=True, slots=True)
class BreakInfo:
    """Where a Jalaali year sits inside its leap sub-cycle."""

    leap: int  # 0 for a leap year, otherwise years since the last one (1-4)
    gregorian_year_of_epoch: int
    march_offset: int  # day of March holding 1 Farvardin
