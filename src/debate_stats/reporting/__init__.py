"""Roll-up, sorting and rendering of debate statistics."""
from __future__ import annotations

from .rollup import roll_up_speakers
from .sorting import EventSortKey, SpeakerEntry, SpeakerSortKey, sort_events, sort_speakers
from .tables import (
    event_rows,
    format_event_summary,
    format_event_table,
    format_speaker_table,
    speaker_rows,
)

__all__ = [
    "EventSortKey",
    "SpeakerEntry",
    "SpeakerSortKey",
    "event_rows",
    "format_event_summary",
    "format_event_table",
    "format_speaker_table",
    "roll_up_speakers",
    "sort_events",
    "sort_speakers",
    "speaker_rows",
]
