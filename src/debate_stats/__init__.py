"""Statistics over debate transcript datasets."""
from __future__ import annotations

from .config import AppConfig, DatasetConfig, ReportConfig, UIConfig, load_config
from .core import Event, SpeakerStats, Speech, count_words
from .parsing import MalformedRowError, TranscriptRow, read_transcript_rows
from .pipeline import IngestPipeline, IngestProgress, build_events
from .reporting import EventSortKey, SpeakerSortKey, roll_up_speakers, sort_events, sort_speakers
from .runtime import DatasetNotFoundError, DebateSession, create_session, load_session

__all__ = [
    "AppConfig",
    "DatasetConfig",
    "DatasetNotFoundError",
    "DebateSession",
    "Event",
    "EventSortKey",
    "IngestPipeline",
    "IngestProgress",
    "MalformedRowError",
    "ReportConfig",
    "SpeakerSortKey",
    "SpeakerStats",
    "Speech",
    "TranscriptRow",
    "UIConfig",
    "build_events",
    "count_words",
    "create_session",
    "load_config",
    "load_session",
    "read_transcript_rows",
    "roll_up_speakers",
    "sort_events",
    "sort_speakers",
]
