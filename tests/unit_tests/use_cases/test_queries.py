from __future__ import annotations

import unittest

from jalaali_calendar.use_cases.queries import is_leap_jalaali_year
from jalaali_calendar.use_cases.queries import is_valid_jalaali_date
from jalaali_calendar.use_cases.queries import jalaali_month_length
from jalaali_calendar.utils.exceptions import InvalidJalaaliYear


class TestLeapYears(unittest.TestCase):
    def test_known_leap_years(self):
        for year in (1395, 1399, 1403, 1408):
            with self.subTest(year=year):
                self.assertTrue(is_leap_jalaali_year(year))
        for year in (1393, 1394, 1396, 1400, 1404, 1407):
            with self.subTest(year=year):
                self.assertFalse(is_leap_jalaali_year(year))

    def test_leap_years_have_thirty_day_esfand(self):
        for year in range(-61, 3178):
            expected = 30 if is_leap_jalaali_year(year) else 29
            self.assertEqual(jalaali_month_length(year, 12), expected)

    def test_out_of_range_raises(self):
        with self.assertRaises(InvalidJalaaliYear):
            is_leap_jalaali_year(3178)
        with self.assertRaises(InvalidJalaaliYear):
            is_leap_jalaali_year(-62)


class TestMonthLength(unittest.TestCase):
    def test_month_lengths(self):
        self.assertEqual(jalaali_month_length(1393, 1), 31)
        self.assertEqual(jalaali_month_length(1393, 4), 31)
        self.assertEqual(jalaali_month_length(1393, 6), 31)
        self.assertEqual(jalaali_month_length(1393, 7), 30)
        self.assertEqual(jalaali_month_length(1393, 10), 30)
        self.assertEqual(jalaali_month_length(1393, 11), 30)
        self.assertEqual(jalaali_month_length(1393, 12), 29)
        self.assertEqual(jalaali_month_length(1394, 12), 29)
        self.assertEqual(jalaali_month_length(1395, 12), 30)


class TestValidity(unittest.TestCase):
    def test_range_limits(self):
        self.assertFalse(is_valid_jalaali_date(-62, 12, 29))
        self.assertTrue(is_valid_jalaali_date(-61, 1, 1))
        self.assertTrue(is_valid_jalaali_date(3177, 12, 29))
        self.assertFalse(is_valid_jalaali_date(3178, 1, 1))

    def test_month_and_day_limits(self):
        self.assertFalse(is_valid_jalaali_date(1393, 0, 1))
        self.assertFalse(is_valid_jalaali_date(1393, 13, 1))
        self.assertFalse(is_valid_jalaali_date(1393, 1, 0))
        self.assertFalse(is_valid_jalaali_date(1393, 1, 32))
        self.assertTrue(is_valid_jalaali_date(1393, 1, 31))
        self.assertFalse(is_valid_jalaali_date(1393, 7, 31))
        self.assertTrue(is_valid_jalaali_date(1393, 7, 30))

    def test_esfand_thirtieth(self):
        self.assertFalse(is_valid_jalaali_date(1394, 12, 30))
        self.assertTrue(is_valid_jalaali_date(1395, 12, 30))
        self.assertTrue(is_valid_jalaali_date(1403, 12, 30))
        self.assertFalse(is_valid_jalaali_date(1404, 12, 30))


if __name__ == "__main__":
    unittest.main()
