"""Exceptions raised by the calculator engine."""

from __future__ import annotations


class CalculatorError(ValueError):
    """Base class for every failure surfaced by the calculator."""


class InvalidDateFormat(CalculatorError):
    """Raised when a date input is not a real ``YYYY-MM-DD`` calendar date.

    Attributes:
        value: The offending input, exactly as received.
    """

    def __init__(self, value: object, reason: str = "expected YYYY-MM-DD") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid calendar date {value!r}: {reason}")


class DateOutOfRange(CalculatorError):
    """Raised when date arithmetic leaves the supported calendar (years 1-9999).

    Attributes:
        start: Date the offset was applied to.
        days:  Offset in days.
    """

    def __init__(self, start: object, days: int) -> None:
        self.start = start
        self.days = days
        super().__init__(f"{start} {days:+d} day(s) falls outside the supported calendar")
