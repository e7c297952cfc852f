"""
Service module for menstrual cycle calculations and projections.

This module provides the cycle engine: converting a period start date into a
cycle day and phase, classifying any day of the cycle, and projecting the next
period and fertile window. All functions are pure; the only state is the
Cycle value the caller holds and replaces after each update.

Typical usage:
    cycle = update_cycle(date(2024, 1, 1))
    phase = classify_phase(cycle.current_day)
    next_date = project_next_period(cycle.start_date)
    window_start, window_end = project_fertile_window(cycle.start_date)
"""
from typing import Optional, Tuple, Union
from datetime import date, datetime, timedelta

from aws_lambda_powertools import Logger

from src.models.cycle import Cycle, CycleSummary, SetPeriodStart
from src.models.phase import CyclePhase
from src.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    PHASE_BOUNDARIES,
    NEXT_PERIOD_OFFSET_DAYS,
    FERTILE_WINDOW_START_OFFSET_DAYS,
    FERTILE_WINDOW_END_OFFSET_DAYS
)
from src.services.exceptions import InvalidCycleLengthError, UnsupportedActionError

logger = Logger()

DateLike = Union[date, datetime]

def _as_date(value: DateLike) -> date:
    """Truncate a datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value

def compute_cycle_day(reference_date: DateLike, start_date: DateLike) -> int:
    """
    Calculate the 1-based cycle day of a reference date.

    Both dates are truncated to the calendar day first, so two timestamps on
    the same day always give the same result. The result is not clamped.

    Args:
        reference_date: Date to calculate the cycle day for
        start_date: First day of the period that started the cycle

    Returns:
        Elapsed days since start_date plus one. Zero or negative if the
        start date is after the reference date.

    Example:
        >>> compute_cycle_day(date(2024, 1, 1), date(2024, 1, 1))
        1
        >>> compute_cycle_day(datetime(2024, 1, 3, 23, 59), date(2024, 1, 1))
        3
    """
    return (_as_date(reference_date) - _as_date(start_date)).days + 1

def classify_phase(cycle_day: int, cycle_length: int = DEFAULT_CYCLE_LENGTH) -> CyclePhase:
    """
    Determine the cycle phase of a cycle day.

    The day is folded into [1, cycle_length] first, so days beyond the end of
    the cycle (or before its start) repeat the same pattern.

    Args:
        cycle_day: Day in the cycle (1-based, any integer)
        cycle_length: Length of the cycle in days

    Returns:
        Phase for the normalized day. Never UNKNOWN.

    Raises:
        InvalidCycleLengthError: If cycle_length is less than one day

    Example:
        >>> classify_phase(14)
        <CyclePhase.OVULATORY: 'ovulatory'>
        >>> classify_phase(29)
        <CyclePhase.MENSTRUAL: 'menstrual'>
    """
    if cycle_length < 1:
        raise InvalidCycleLengthError(f"Cycle length must be at least 1 day, got {cycle_length}")

    normalized = (cycle_day - 1) % cycle_length + 1

    for last_day, phase in PHASE_BOUNDARIES:
        if normalized <= last_day:
            return phase

    return CyclePhase.LUTEAL

def phase_for_date(
    target_date: DateLike,
    start_date: Optional[DateLike],
    cycle_length: int = DEFAULT_CYCLE_LENGTH
) -> CyclePhase:
    """
    Determine the phase of a calendar day relative to a period start.

    Args:
        target_date: Calendar day to classify
        start_date: Period start, or None if no cycle is configured
        cycle_length: Length of the cycle in days

    Returns:
        Phase of the day, UNKNOWN when there is no start date
    """
    if start_date is None:
        return CyclePhase.UNKNOWN
    return classify_phase(compute_cycle_day(target_date, start_date), cycle_length)

def project_next_period(start_date: DateLike) -> date:
    """
    Project the start of the next period.

    Example:
        >>> project_next_period(date(2024, 1, 1))
        datetime.date(2024, 1, 29)
    """
    return _as_date(start_date) + timedelta(days=NEXT_PERIOD_OFFSET_DAYS)

def project_fertile_window(start_date: DateLike) -> Tuple[date, date]:
    """
    Project the fertile window of the cycle.

    Args:
        start_date: First day of the current period

    Returns:
        Tuple of (first fertile day, last fertile day), both inclusive

    Example:
        >>> project_fertile_window(date(2024, 1, 1))
        (datetime.date(2024, 1, 11), datetime.date(2024, 1, 18))
    """
    start = _as_date(start_date)
    return (
        start + timedelta(days=FERTILE_WINDOW_START_OFFSET_DAYS),
        start + timedelta(days=FERTILE_WINDOW_END_OFFSET_DAYS)
    )

def unconfigured_cycle() -> Cycle:
    """Cycle used before any period start has been recorded."""
    return Cycle(start_date=None, current_day=1, phase=CyclePhase.UNKNOWN)

def update_cycle(
    new_start_date: DateLike,
    reference_date: Optional[DateLike] = None,
    cycle_length: int = DEFAULT_CYCLE_LENGTH
) -> Cycle:
    """
    Build the cycle state for a new period start.

    Args:
        new_start_date: First day of the most recent period
        reference_date: Date the cycle is evaluated for, defaults to today
        cycle_length: Length of the cycle in days

    Returns:
        New Cycle with the current day clamped to at least 1

    Example:
        >>> cycle = update_cycle(date(2024, 1, 1), date(2024, 1, 15))
        >>> cycle.current_day, cycle.phase.value
        (15, 'ovulatory')
    """
    if reference_date is None:
        reference_date = date.today()

    start = _as_date(new_start_date)
    day = compute_cycle_day(reference_date, start)
    if day < 1:
        logger.warning("Period start is after the reference date", extra={
            "start_date": str(start),
            "reference_date": str(_as_date(reference_date))
        })

    current_day = max(1, day)
    cycle = Cycle(
        start_date=start,
        current_day=current_day,
        phase=classify_phase(current_day, cycle_length)
    )
    logger.debug("Cycle updated", extra={
        "start_date": str(start),
        "current_day": cycle.current_day,
        "phase": cycle.phase.value
    })
    return cycle

def refresh_cycle(
    cycle: Cycle,
    reference_date: Optional[DateLike] = None,
    cycle_length: int = DEFAULT_CYCLE_LENGTH
) -> Cycle:
    """
    Recompute day and phase of an existing cycle for another reference date.

    Args:
        cycle: Cycle currently held by the caller
        reference_date: Date to evaluate, defaults to today
        cycle_length: Length of the cycle in days

    Returns:
        New Cycle with the same start date
    """
    if not cycle.is_configured:
        return unconfigured_cycle()
    return update_cycle(cycle.start_date, reference_date, cycle_length)

def apply_action(
    cycle: Cycle,
    action: SetPeriodStart,
    reference_date: Optional[DateLike] = None,
    cycle_length: int = DEFAULT_CYCLE_LENGTH
) -> Cycle:
    """
    Apply a user action to the cycle state.

    The previous cycle is never modified; callers replace their reference
    with the returned value.

    Args:
        cycle: Current cycle state
        action: User action to apply
        reference_date: Date to evaluate the new cycle for, defaults to today
        cycle_length: Length of the cycle in days

    Returns:
        Cycle after the action

    Raises:
        UnsupportedActionError: If the action type is not recognised
    """
    if isinstance(action, SetPeriodStart):
        logger.info("Setting new period start", extra={
            "previous_start": str(cycle.start_date) if cycle.start_date else None,
            "new_start": str(action.start_date)
        })
        return update_cycle(action.start_date, reference_date, cycle_length)

    raise UnsupportedActionError(f"Unsupported cycle action: {type(action).__name__}")

def cycle_summary(
    cycle: Cycle,
    reference_date: Optional[DateLike] = None,
    cycle_length: int = DEFAULT_CYCLE_LENGTH
) -> CycleSummary:
    """
    Collect the values shown in the cycle information panel.

    Day and phase are recomputed for the reference date from the start
    date, so a cycle created on an earlier day still shows the right values.
    Projections are None for an unconfigured cycle.

    Args:
        cycle: Current cycle state
        reference_date: Date to evaluate, defaults to today
        cycle_length: Length of the cycle in days

    Returns:
        CycleSummary for display
    """
    if not cycle.is_configured:
        return CycleSummary(cycle_day=cycle.current_day, phase=CyclePhase.UNKNOWN)

    if reference_date is None:
        reference_date = date.today()

    cycle_day = max(1, compute_cycle_day(reference_date, cycle.start_date))
    window_start, window_end = project_fertile_window(cycle.start_date)
    return CycleSummary(
        cycle_day=cycle_day,
        phase=classify_phase(cycle_day, cycle_length),
        next_period=project_next_period(cycle.start_date),
        fertile_window_start=window_start,
        fertile_window_end=window_end
    )
