from __future__ import annotations

__version__ = "1.0.0"
__name__ = "jalaali_calendar"

import os
from pathlib import Path

DEFAULT_PATH = Path(os.path.realpath(__file__)).parents[1]


from chromatrace import LoggingConfig, LoggingSettings

from jalaali_calendar.settings import CALENDAR_SETTINGS


logging_config = LoggingConfig(
    settings=LoggingSettings(
        application_level=CALENDAR_SETTINGS.application_level,
        enable_tracing=CALENDAR_SETTINGS.enable_tracing,
        ignore_nan_trace=True,
        log_level=CALENDAR_SETTINGS.log_level,
        file_path=CALENDAR_SETTINGS.log_file_path,
        enable_file_logging=CALENDAR_SETTINGS.enable_file_logging,
        max_bytes=CALENDAR_SETTINGS.max_bytes,
        backup_count=CALENDAR_SETTINGS.backup_count,
    )
)
LOGGER = logging_config.get_logger(__name__)


from jalaali_calendar.entities import GregorianDate, JalaaliDate  # noqa: E402
from jalaali_calendar.use_cases.conversion import (  # noqa: E402
    to_gregorian,
    to_jalaali,
)
from jalaali_calendar.use_cases.month_navigation import add_months  # noqa: E402
from jalaali_calendar.use_cases.queries import (  # noqa: E402
    is_leap_jalaali_year,
    is_valid_jalaali_date,
    jalaali_month_length,
)
from jalaali_calendar.utils.exceptions import InvalidJalaaliYear  # noqa: E402


__all__ = [
    "__version__",
    "__name__",
    "DEFAULT_PATH",
    "LOGGER",
    "GregorianDate",
    "JalaaliDate",
    "InvalidJalaaliYear",
    "add_months",
    "is_leap_jalaali_year",
    "is_valid_jalaali_date",
    "jalaali_month_length",
    "to_gregorian",
    "to_jalaali",
]
