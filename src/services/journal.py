"""
Service module for looking up journal entries by calendar date.

Journal entries arrive as a list; the calendar needs them by day. This module
normalizes the entries and indexes them by their YYYY-MM-DD date key.

Typical usage:
    index = JournalIndex(entries)
    entry = index.lookup("2024-01-05")
    mood = index.mood_for(date(2024, 1, 5))
    details = journal_details("2024-01-05", entry)
"""
from typing import Dict, Iterable, Optional, Union
from datetime import date

from aws_lambda_powertools import Logger

from src.models.journal import JournalEntry, JournalDetails, Mood
from src.services.constants import (
    DATE_KEY_FORMAT,
    NO_ENTRY_MESSAGE,
    NO_SYMPTOMS_LABEL,
    NO_NOTES_LABEL
)

logger = Logger()

def date_key(year: int, month: int, day: int) -> str:
    """
    Build the zero-padded lookup key of a calendar day.

    Example:
        >>> date_key(2024, 1, 5)
        '2024-01-05'
    """
    return f"{year:04d}-{month:02d}-{day:02d}"

def date_key_for(value: date) -> str:
    """Build the lookup key of a date."""
    return value.strftime(DATE_KEY_FORMAT)

def normalize_entry(entry: JournalEntry) -> JournalEntry:
    """
    Return a copy of an entry with display defaults applied.

    Notes default to the entry content and a missing voice note becomes None.
    The original entry is left untouched.

    Args:
        entry: Journal entry as received

    Returns:
        Normalized copy of the entry
    """
    return entry.model_copy(update={
        "notes": entry.notes if entry.notes is not None else entry.content,
        "voice_note": entry.voice_note or None
    })

def build_journal_index(entries: Iterable[JournalEntry]) -> Dict[str, JournalEntry]:
    """
    Index normalized journal entries by date key.

    When several entries share a date the last one listed wins; each
    overwrite is logged.

    Args:
        entries: Journal entries in the order they were listed

    Returns:
        Dictionary mapping YYYY-MM-DD keys to normalized entries

    Example:
        >>> index = build_journal_index(entries)
        >>> index["2024-01-05"].mood
        <Mood.HAPPY: 'happy'>
    """
    index: Dict[str, JournalEntry] = {}
    for entry in entries:
        if entry.date in index:
            logger.warning("Duplicate journal entry date, keeping the last one", extra={
                "date": entry.date,
                "replaced_id": index[entry.date].id,
                "kept_id": entry.id
            })
        index[entry.date] = normalize_entry(entry)
    return index

class JournalIndex:
    """Read-only lookup of journal entries by calendar day."""

    def __init__(self, entries: Iterable[JournalEntry] = ()):
        """
        Initialize the index.

        Args:
            entries: Journal entries to index
        """
        self._entries = build_journal_index(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, date):
            key = date_key_for(key)
        return key in self._entries

    def lookup(self, key: Union[str, date]) -> Optional[JournalEntry]:
        """
        Get the entry for a calendar day.

        Args:
            key: YYYY-MM-DD string or date

        Returns:
            Normalized entry, or None if nothing was recorded that day
        """
        if isinstance(key, date):
            key = date_key_for(key)
        return self._entries.get(key)

    def mood_for(self, key: Union[str, date]) -> Optional[Mood]:
        """Get the recorded mood of a calendar day, if any."""
        entry = self.lookup(key)
        return entry.mood if entry else None

def journal_details(key: str, entry: Optional[JournalEntry]) -> JournalDetails:
    """
    Build the display values of the journal detail panel.

    Args:
        key: Date key of the selected day
        entry: Entry recorded for that day, or None

    Returns:
        JournalDetails with placeholders for missing values
    """
    if entry is None:
        return JournalDetails(date_key=key, has_entry=False, message=NO_ENTRY_MESSAGE)

    return JournalDetails(
        date_key=key,
        has_entry=True,
        mood=entry.mood,
        symptoms=", ".join(entry.symptoms) or NO_SYMPTOMS_LABEL,
        notes=entry.notes or NO_NOTES_LABEL,
        voice_note=entry.voice_note
    )
