"""Core domain entities used across the project."""
from __future__ import annotations

from .event import Event
from .types import SpeakerStats, Speech
from .words import count_words

__all__ = ["Event", "SpeakerStats", "Speech", "count_words"]
