"""Dependency injection configuration for the Jalaali calendar engine."""

from __future__ import annotations

from lagom import Container, Singleton

from jalaali_calendar import LOGGER
from jalaali_calendar.adapters.jalaali_converter import JalaaliConverter
from jalaali_calendar.settings.calendar_settings import CalendarSettings
from jalaali_calendar.use_cases.interfaces.calendar_converter_interface import (
    CalendarConverterInterface,
)
from jalaali_calendar.use_cases.month_navigation import MonthNavigationUseCase


_container = None


def configure_container() -> Container:
    """Configure the dependency injection container.

    Returns:
        Configured Lagom container
    """
    container = Container()

    container[CalendarSettings] = Singleton(lambda: CalendarSettings())

    # A) Bind INTERFACE -> ADAPTER
    container[CalendarConverterInterface] = Singleton(lambda: JalaaliConverter())

    # B) Use cases
    container[MonthNavigationUseCase] = Singleton(
        lambda c: MonthNavigationUseCase(c[CalendarConverterInterface])
    )

    LOGGER.info("Calendar container configured")
    return container


def get_container() -> Container:
    """Get the global container instance.

    Returns:
        The configured container
    """
    global _container
    if _container is None:
        _container = configure_container()
    return _container
