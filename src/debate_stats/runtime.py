"""Application level helpers for loading and querying a transcript session."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .config import AppConfig
from .core import Event, SpeakerStats
from .pipeline import IngestPipeline, ProgressCallback
from .reporting import (
    EventSortKey,
    SpeakerEntry,
    SpeakerSortKey,
    roll_up_speakers,
    sort_events,
    sort_speakers,
)


class DatasetNotFoundError(FileNotFoundError):
    """Raised when the transcript dataset does not exist."""


@dataclass(frozen=True, slots=True)
class DebateSession:
    """All events of one ingested dataset.

    The session owns the events for the lifetime of the process; every query
    returns a fresh list or snapshot.
    """

    source: Path
    events: Tuple[Event, ...]

    def sorted_events(self, key: EventSortKey | str = EventSortKey.DATE) -> List[Event]:
        return sort_events(self.events, key)

    def event_at(self, index: int) -> Event:
        """Return the event at 1-based ``index`` in ingestion order."""

        if index < 1 or index > len(self.events):
            raise IndexError(f"No event #{index}; the dataset has {len(self.events)} events")
        return self.events[index - 1]

    def speakers(self) -> Dict[str, SpeakerStats]:
        return roll_up_speakers(self.events)

    def sorted_speakers(
        self,
        key: SpeakerSortKey | str = SpeakerSortKey.NAME,
        *,
        event: Optional[Event] = None,
    ) -> List[SpeakerEntry]:
        """Sort the speakers of ``event``, or of all events when omitted."""

        source = event.speakers() if event is not None else self.speakers()
        return sort_speakers(source, key)

    @property
    def speech_count(self) -> int:
        return sum(event.speech_count for event in self.events)


def load_session(
    path: Path,
    *,
    encoding: str = "utf8",
    progress_callback: Optional[ProgressCallback] = None,
) -> DebateSession:
    if not path.is_file():
        raise DatasetNotFoundError(f"Transcript dataset {path} does not exist")
    events: Sequence[Event] = IngestPipeline(encoding=encoding).run(path, progress_callback=progress_callback)
    return DebateSession(source=path, events=tuple(events))


def create_session(
    config: AppConfig,
    *,
    dataset_path: Optional[Path] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> DebateSession:
    """Load the dataset configured in ``config`` or the explicit ``dataset_path``."""

    path = dataset_path or Path(config.dataset.path)
    return load_session(path, encoding=config.dataset.encoding, progress_callback=progress_callback)


__all__ = ["DatasetNotFoundError", "DebateSession", "create_session", "load_session"]
