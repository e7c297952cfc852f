"""
Phase model definition for menstrual cycle phases.
"""
from enum import Enum

class CyclePhase(str, Enum):
    """
    Menstrual cycle phases shown on the calendar.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATORY = "ovulatory"
    LUTEAL = "luteal"
    UNKNOWN = "unknown"     # No period start configured

    @property
    def label(self) -> str:
        """Capitalized phase name for display."""
        return self.value.capitalize()
