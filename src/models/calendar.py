"""
Calendar model definitions for the month view.
"""
from typing import Optional
from pydantic import BaseModel

from src.models.journal import Mood
from src.models.phase import CyclePhase

class CalendarCell(BaseModel):
    """
    One slot of the month grid. Leading blanks have no day number.
    """
    day_number: Optional[int] = None
    phase: CyclePhase = CyclePhase.UNKNOWN
    is_today: bool = False
    mood: Optional[Mood] = None
    date_key: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        """Check if this cell is leading padding."""
        return self.day_number is None

class CalendarMonth(BaseModel):
    """
    A fully annotated month ready for rendering.
    """
    year: int
    month: int
    title: str
    weekdays: list[str]
    cells: list[CalendarCell]
