"""Custom exceptions for the Jalaali calendar engine."""

from typing import Any, Dict, Optional


class CalendarException(Exception):
    """Base custom exception class.

    Attributes:
        message: The error message as a structured dictionary
    """

    def __init__(self, message: Dict[str, Any]) -> None:
        """Initialize the custom exception.

        Args:
            message: The error message as a dictionary
        """
        self.message = message
        super().__init__(self.message)

    def to_json(self) -> Dict[str, Any]:
        """Return the structured error message.

        Returns:
            Message dictionary
        """
        return dict(self.message)


class InvalidJalaaliYear(CalendarException, ValueError):
    """Raised when a Jalaali year falls outside the breakpoint table.

    Attributes:
        year: The rejected Jalaali year
        min_year: First supported year (inclusive)
        max_year: Last supported year (inclusive)
    """

    def __init__(
        self,
        year: int,
        min_year: int,
        max_year: int,
        detail: Optional[str] = None,
    ) -> None:
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(
            {
                "error": "invalid_jalaali_year",
                "year": year,
                "supported_range": [min_year, max_year],
                "detail": detail or f"Invalid Jalaali year {year}",
            }
        )

    def __str__(self) -> str:
        return self.message["detail"]
