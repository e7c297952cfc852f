"""
Journal entry model definition for daily mood and symptom notes.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class Mood(str, Enum):
    """
    Moods a user can record for a day.
    """
    HAPPY = "happy"
    ENERGETIC = "energetic"
    NEUTRAL = "neutral"
    SAD = "sad"

class JournalEntry(BaseModel):
    """
    Represents a journal entry for a single calendar day.

    The date is kept as a YYYY-MM-DD string since it is the lookup key
    used by the calendar.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
    content: str = ""
    mood: Mood
    symptoms: list[str] = Field(default_factory=list)
    cycle_day: int = Field(..., alias="cycleDay")
    notes: Optional[str] = None
    voice_note: Optional[str] = Field(None, alias="voiceNote")

class JournalDetails(BaseModel):
    """
    Display values for the journal detail panel of a selected day.
    """
    date_key: str
    has_entry: bool
    message: Optional[str] = None
    mood: Optional[Mood] = None
    symptoms: Optional[str] = None
    notes: Optional[str] = None
    voice_note: Optional[str] = None
