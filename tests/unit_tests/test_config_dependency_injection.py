from __future__ import annotations

import os
import unittest
from unittest.mock import patch

from jalaali_calendar.adapters.jalaali_converter import JalaaliConverter
from jalaali_calendar.config_dependency_injection import configure_container
from jalaali_calendar.config_dependency_injection import get_container
from jalaali_calendar.entities.dates import JalaaliDate
from jalaali_calendar.settings.calendar_settings import CalendarSettings
from jalaali_calendar.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from jalaali_calendar.use_cases.month_navigation import MonthNavigationUseCase


class TestContainer(unittest.TestCase):
    def setUp(self):
        self.container = configure_container()

    def test_interface_is_bound_to_adapter(self):
        converter = self.container[CalendarConverterInterface]
        self.assertIsInstance(converter, JalaaliConverter)
        self.assertIs(converter, self.container[CalendarConverterInterface])

    def test_use_case_receives_converter(self):
        use_case = self.container[MonthNavigationUseCase]
        self.assertIs(use_case.converter, self.container[CalendarConverterInterface])
        self.assertEqual(
            use_case.shift(JalaaliDate(year=1403, month=12, day=1), 1),
            JalaaliDate(year=1404, month=1, day=1),
        )

    def test_global_container_is_cached(self):
        self.assertIs(get_container(), get_container())


class TestCalendarSettings(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = CalendarSettings(_env_file=None)
        self.assertEqual(settings.log_level, "INFO")
        self.assertFalse(settings.enable_file_logging)

    def test_environment_overrides(self):
        env = {"JALAALI_LOG_LEVEL": "DEBUG", "JALAALI_ENABLE_FILE_LOGGING": "true"}
        with patch.dict(os.environ, env, clear=True):
            settings = CalendarSettings(_env_file=None)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertTrue(settings.enable_file_logging)


if __name__ == "__main__":
    unittest.main()
