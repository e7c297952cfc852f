"""
Constants and shared data for cycle calendar services.
"""
import os

from src.models.phase import CyclePhase

DEFAULT_CYCLE_LENGTH = 28

# Cycle length used by handlers when a request does not provide one
CYCLE_LENGTH = int(os.environ.get("CYCLE_LENGTH", DEFAULT_CYCLE_LENGTH))

# Last normalized cycle day (inclusive) of each phase
PHASE_BOUNDARIES = [
    (5, CyclePhase.MENSTRUAL),
    (13, CyclePhase.FOLLICULAR),
    (15, CyclePhase.OVULATORY),
]

# Phases shown in the calendar legend, in cycle order
CALENDAR_PHASES = [
    CyclePhase.MENSTRUAL,
    CyclePhase.FOLLICULAR,
    CyclePhase.OVULATORY,
    CyclePhase.LUTEAL,
]

NEXT_PERIOD_OFFSET_DAYS = 28

# Fertile window spans cycle days 11-18
FERTILE_WINDOW_START_OFFSET_DAYS = 10
FERTILE_WINDOW_END_OFFSET_DAYS = 17

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
]

MONTH_ABBREVIATIONS = [name[:3] for name in MONTH_NAMES]

# Sunday first
WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

DATE_KEY_FORMAT = "%Y-%m-%d"

UNKNOWN_LABEL = "Unknown"
NO_ENTRY_MESSAGE = "No journal entry for this day."
NO_SYMPTOMS_LABEL = "None"
NO_NOTES_LABEL = "No notes"
