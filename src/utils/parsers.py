"""
Parsing functions for date input received from forms and requests.

The cycle engine assumes well-formed dates, so user input is parsed and
rejected here before it reaches the services.
"""
from typing import Optional
from datetime import date, datetime, timedelta

from src.services.constants import DATE_KEY_FORMAT, NEXT_PERIOD_OFFSET_DAYS
from src.services.exceptions import InvalidDateError

def parse_date(date_str: str, field: str = "date") -> date:
    """
    Parse a YYYY-MM-DD date string.

    Args:
        date_str: Date string as entered by the user
        field: Name of the input, used in the error message

    Returns:
        Parsed date

    Raises:
        InvalidDateError: If the string is empty or not a valid date

    Example:
        >>> parse_date("2024-02-29")
        datetime.date(2024, 2, 29)
    """
    if not date_str or not date_str.strip():
        raise InvalidDateError(f"Missing {field}")

    try:
        return datetime.strptime(date_str.strip(), DATE_KEY_FORMAT).date()
    except ValueError:
        raise InvalidDateError(f"Invalid {field} '{date_str}', expected YYYY-MM-DD")

def parse_period_start(date_str: str) -> date:
    """
    Parse the period start date submitted by the user.

    Dates in the future are accepted; the cycle engine clamps the cycle day.

    Args:
        date_str: Value of the period start form field

    Returns:
        Parsed period start date

    Raises:
        InvalidDateError: If the value is empty, not a valid date, or too
            close to the end of the calendar to project the next period
    """
    return validate_period_start(parse_date(date_str, field="period start date"))

def validate_period_start(start_date: date) -> date:
    """
    Check that the cycle projections of a period start stay within the date range.

    Args:
        start_date: Parsed period start

    Returns:
        The same date

    Raises:
        InvalidDateError: If the next period would fall after date.max
    """
    if date.max - start_date < timedelta(days=NEXT_PERIOD_OFFSET_DAYS):
        raise InvalidDateError(
            f"Period start {start_date.isoformat()} is too late to project the next period"
        )
    return start_date

def parse_optional_date(date_str: Optional[str], field: str = "date") -> Optional[date]:
    """Parse a date string, returning None for missing values."""
    if date_str is None:
        return None
    return parse_date(date_str, field)
