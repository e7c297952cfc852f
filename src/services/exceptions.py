"""
Service-level exceptions.

This module contains exceptions that can be raised by the cycle calendar
services and by the input parsers in front of them.
"""

class CycleCalendarError(Exception):
    """Base exception for cycle calendar errors."""
    pass

class InvalidDateError(CycleCalendarError, ValueError):
    """Raised when a date string from user input cannot be parsed."""
    pass

class InvalidCycleLengthError(CycleCalendarError, ValueError):
    """Raised when a cycle length is not a positive number of days."""
    pass

class InvalidMonthError(CycleCalendarError, ValueError):
    """Raised when a month number is outside 1-12."""
    pass

class UnsupportedActionError(CycleCalendarError):
    """Raised when a cycle state transition receives an unknown action."""
    pass
