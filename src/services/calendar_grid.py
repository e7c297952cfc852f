"""
Service module for building month grids for the calendar view.

Typical usage:
    grid = build_month_grid(2024, 2)        # [None, None, None, None, 1, 2, ..., 29]
    year, month = navigate_month(2024, 12, 1)  # (2025, 1)
"""
from typing import List, Optional, Tuple
from datetime import MAXYEAR, MINYEAR, date

from src.services.constants import MONTH_NAMES
from src.services.exceptions import InvalidMonthError

def _validate_month(month: int, year: int) -> None:
    """Raise InvalidMonthError if month is outside 1-12 or year outside the date range."""
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"Month must be between 1 and 12, got {month}")
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidMonthError(f"Year must be between {MINYEAR} and {MAXYEAR}, got {year}")

def _first_of_next_month(year: int, month: int) -> date:
    """Get the first day of the month after the given one."""
    return date(year, month + 1, 1)

def first_weekday_index(year: int, month: int) -> int:
    """
    Get the weekday of the first day of a month, with Sunday as 0.

    Example:
        >>> first_weekday_index(2024, 2)  # Thursday
        4
    """
    _validate_month(month, year)
    # date.weekday() counts from Monday
    return (date(year, month, 1).weekday() + 1) % 7

def days_in_month(year: int, month: int) -> int:
    """
    Count the days of a month as the distance to the first of the next month.

    Example:
        >>> days_in_month(2024, 2)
        29
    """
    _validate_month(month, year)
    # No first-of-next-month for December of MAXYEAR
    if month == 12:
        return 31
    return (_first_of_next_month(year, month) - date(year, month, 1)).days

def build_month_grid(year: int, month: int) -> List[Optional[int]]:
    """
    Build the ordered cells of a month grid.

    The grid starts with one blank (None) per weekday before the first of the
    month, followed by the day numbers. The end is not padded, so the length
    is first_weekday_index + days_in_month and is not always a multiple of 7.

    Args:
        year: Calendar year
        month: Month number (1-12)

    Returns:
        List of day numbers with leading None blanks

    Raises:
        InvalidMonthError: If month is outside 1-12 or year outside 1-9999

    Example:
        >>> grid = build_month_grid(2024, 2)
        >>> grid[:5]
        [None, None, None, None, 1]
        >>> len(grid)
        33
    """
    blanks: List[Optional[int]] = [None] * first_weekday_index(year, month)
    return blanks + list(range(1, days_in_month(year, month) + 1))

def navigate_month(year: int, month: int, direction: int) -> Tuple[int, int]:
    """
    Move the displayed month forwards or backwards.

    Args:
        year: Currently displayed year
        month: Currently displayed month (1-12)
        direction: Number of months to move, negative to go back

    Returns:
        Tuple of (year, month) after moving

    Raises:
        InvalidMonthError: If the resulting month leaves the supported date range

    Example:
        >>> navigate_month(2024, 1, -1)
        (2023, 12)
    """
    _validate_month(month, year)
    index = year * 12 + (month - 1) + direction
    new_year, new_month = index // 12, index % 12 + 1
    _validate_month(new_month, new_year)
    return new_year, new_month

def month_title(year: int, month: int) -> str:
    """Title of a month view, e.g. 'February 2024'."""
    _validate_month(month, year)
    return f"{MONTH_NAMES[month - 1]} {year}"
