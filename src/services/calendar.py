"""
Service module for building the annotated calendar month view.

Joins the month grid with the cycle engine and the journal index: every day
cell gets its cycle phase, its recorded mood and a flag for today. Nothing is
cached; the view is rebuilt whenever the month, cycle or journal changes.

Typical usage:
    cycle = update_cycle(period_start)
    view = build_calendar_month(2024, 2, cycle, entries)
    for cell in view.cells:
        ...
"""
from typing import Iterable, Optional, Union
from datetime import date, datetime

from aws_lambda_powertools import Logger

from src.models.calendar import CalendarCell, CalendarMonth
from src.models.cycle import Cycle
from src.models.journal import JournalEntry
from src.services.calendar_grid import build_month_grid, month_title
from src.services.constants import DEFAULT_CYCLE_LENGTH, WEEKDAY_LABELS
from src.services.cycle import phase_for_date
from src.services.journal import JournalIndex, date_key

logger = Logger()

def build_calendar_month(
    year: int,
    month: int,
    cycle: Cycle,
    journal: Union[JournalIndex, Iterable[JournalEntry]] = (),
    today: Optional[date] = None,
    cycle_length: int = DEFAULT_CYCLE_LENGTH
) -> CalendarMonth:
    """
    Build the annotated cells of a month.

    Args:
        year: Displayed year
        month: Displayed month (1-12)
        cycle: Current cycle state; phases are UNKNOWN if it has no start date
        journal: JournalIndex or list of journal entries
        today: Date highlighted as today, defaults to the current date
        cycle_length: Length of the cycle in days

    Returns:
        CalendarMonth with one cell per grid slot

    Raises:
        InvalidMonthError: If month is outside 1-12
    """
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()
    if not isinstance(journal, JournalIndex):
        journal = JournalIndex(journal)

    cells = []
    for day in build_month_grid(year, month):
        if day is None:
            cells.append(CalendarCell())
            continue

        current = date(year, month, day)
        key = date_key(year, month, day)
        cells.append(CalendarCell(
            day_number=day,
            phase=phase_for_date(current, cycle.start_date, cycle_length),
            is_today=current == today,
            mood=journal.mood_for(key),
            date_key=key
        ))

    logger.debug("Built calendar month", extra={
        "year": year,
        "month": month,
        "cells": len(cells),
        "journal_entries": len(journal)
    })

    return CalendarMonth(
        year=year,
        month=month,
        title=month_title(year, month),
        weekdays=list(WEEKDAY_LABELS),
        cells=cells
    )
