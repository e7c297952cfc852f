"""
Display formatting functions for cycle and calendar values.

Dates use a fixed English "short month + day" format regardless of locale.
"""
from typing import Optional, Tuple
from datetime import date

from src.models.cycle import CycleSummary
from src.models.phase import CyclePhase
from src.services.constants import MONTH_ABBREVIATIONS, UNKNOWN_LABEL

def format_short_date(value: date) -> str:
    """Format a date as short month and day, e.g. 'Jan 5'."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}"

def format_next_period(next_period: Optional[date]) -> str:
    """Format the projected next period, 'Unknown' when not available."""
    if next_period is None:
        return UNKNOWN_LABEL
    return format_short_date(next_period)

def format_fertile_window(window: Optional[Tuple[date, date]]) -> str:
    """
    Format the fertile window as an en-dash joined range.

    Example:
        >>> format_fertile_window((date(2024, 1, 11), date(2024, 1, 18)))
        'Jan 11–Jan 18'
    """
    if window is None:
        return UNKNOWN_LABEL
    start, end = window
    return f"{format_short_date(start)}–{format_short_date(end)}"

def format_phase_label(phase: CyclePhase) -> str:
    """Format a phase for the status banner, e.g. 'Luteal Phase'."""
    return f"{phase.label} Phase"

def format_cycle_day_banner(cycle_day: int) -> str:
    """Format the cycle day banner, e.g. 'Day 3 of your cycle'."""
    return f"Day {cycle_day} of your cycle"

def format_cycle_info(summary: CycleSummary) -> dict:
    """
    Format the cycle information panel.

    Args:
        summary: CycleSummary of the current cycle

    Returns:
        Dictionary of display strings keyed by panel row
    """
    window = None
    if summary.fertile_window_start and summary.fertile_window_end:
        window = (summary.fertile_window_start, summary.fertile_window_end)

    return {
        "cycle_day": str(summary.cycle_day),
        "phase": summary.phase.label,
        "next_period": format_next_period(summary.next_period),
        "fertile_window": format_fertile_window(window)
    }

def format_cycle_status(summary: CycleSummary) -> dict:
    """Format the status banner shown above the calendar."""
    return {
        "day": format_cycle_day_banner(summary.cycle_day),
        "phase": format_phase_label(summary.phase)
    }
