"""Aggregation of speeches into a single debate event."""
from __future__ import annotations

from typing import Dict, List, Tuple

from .types import SpeakerStats, Speech


class Event:
    """One debate occasion and the statistics of its speeches.

    All counters are updated by :meth:`add_speech`; nothing else mutates an
    event once it has been created.
    """

    def __init__(self, name: str, date: str) -> None:
        self._name = name
        self._date = date
        self._speeches: List[Speech] = []
        self._speakers: Dict[str, SpeakerStats] = {}
        self._speech_count = 0
        self._speaker_count = 0
        self._total_word_count = 0
        self._total_speaking_time = 0.0

    def __repr__(self) -> str:
        return (
            f"Event(name={self._name!r}, date={self._date!r}, "
            f"speeches={self._speech_count}, speakers={self._speaker_count})"
        )

    def add_speech(self, speech: Speech) -> None:
        self._speeches.append(speech)
        self._speech_count += 1
        self._total_word_count += speech.word_count
        self._total_speaking_time += speech.length_seconds

        stats = self._speakers.get(speech.speaker)
        if stats is None:
            stats = SpeakerStats()
            self._speakers[speech.speaker] = stats
            self._speaker_count += 1
        stats.record_speech(speech)

    @property
    def name(self) -> str:
        return self._name

    @property
    def date(self) -> str:
        return self._date

    @property
    def speech_count(self) -> int:
        return self._speech_count

    @property
    def speaker_count(self) -> int:
        return self._speaker_count

    @property
    def total_word_count(self) -> int:
        return self._total_word_count

    @property
    def total_speaking_time(self) -> float:
        return self._total_speaking_time

    @property
    def speeches(self) -> Tuple[Speech, ...]:
        """Speeches in chronological order."""

        return tuple(sorted(self._speeches, key=lambda speech: speech.position))

    @property
    def average_word_count(self) -> float:
        if not self._speech_count:
            return 0.0
        return self._total_word_count / self._speech_count

    @property
    def average_speaking_time(self) -> float:
        if not self._speech_count:
            return 0.0
        return self._total_speaking_time / self._speech_count

    def speakers(self) -> Dict[str, SpeakerStats]:
        """Return a snapshot of the per-speaker statistics.

        The returned records are copies; mutating them does not affect the
        event.
        """

        return {name: stats.copy() for name, stats in self._speakers.items()}


__all__ = ["Event"]
