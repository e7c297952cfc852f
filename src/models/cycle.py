"""
Cycle model definition for the current menstrual cycle state.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from src.models.phase import CyclePhase

class Cycle(BaseModel):
    """
    Current cycle state derived from the most recent period start.

    Instances are frozen. Updating the period start produces a new Cycle
    which replaces the previous one.
    """
    model_config = ConfigDict(frozen=True)

    start_date: Optional[date] = None
    current_day: int = Field(1, ge=1)
    phase: CyclePhase = CyclePhase.UNKNOWN

    @property
    def is_configured(self) -> bool:
        """Check if a period start date is known."""
        return self.start_date is not None

class SetPeriodStart(BaseModel):
    """
    User action recording a new period start date.
    """
    model_config = ConfigDict(frozen=True)

    start_date: date

class CycleSummary(BaseModel):
    """
    Values displayed in the cycle information panel.
    """
    cycle_day: int
    phase: CyclePhase
    next_period: Optional[date] = None
    fertile_window_start: Optional[date] = None
    fertile_window_end: Optional[date] = None
