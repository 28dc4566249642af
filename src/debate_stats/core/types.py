"""Typed domain objects for debate transcripts."""

from __future__ import annotations

from dataclasses import dataclass, field

from .words import count_words


@dataclass(frozen=True, slots=True)
class Speech:
    """A single speech contribution within a debate event."""

    position: int
    speaker: str
    script: str
    length_seconds: float = 0.0
    word_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "word_count", count_words(self.script))


@dataclass(slots=True)
class SpeakerStats:
    """Running totals for one speaker, per event or across all events."""

    times_spoke: int = 0
    total_word_count: int = 0
    total_speaking_time: float = 0.0
    appearances: int = 0

    def record_speech(self, speech: Speech) -> None:
        self.times_spoke += 1
        self.total_word_count += speech.word_count
        self.total_speaking_time += speech.length_seconds

    def record_appearance(self) -> None:
        self.appearances += 1

    def merge(self, other: SpeakerStats) -> None:
        """Add the speech totals of ``other`` without touching appearances."""

        self.times_spoke += other.times_spoke
        self.total_word_count += other.total_word_count
        self.total_speaking_time += other.total_speaking_time

    def copy(self) -> SpeakerStats:
        return SpeakerStats(
            times_spoke=self.times_spoke,
            total_word_count=self.total_word_count,
            total_speaking_time=self.total_speaking_time,
            appearances=self.appearances,
        )

    @property
    def average_word_count(self) -> float:
        if not self.times_spoke:
            return 0.0
        return self.total_word_count / self.times_spoke

    @property
    def average_speaking_time(self) -> float:
        if not self.times_spoke:
            return 0.0
        return self.total_speaking_time / self.times_spoke


__all__ = ["SpeakerStats", "Speech"]
