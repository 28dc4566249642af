"""Grouping of transcript rows into debate events."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Literal, Optional
import logging

from ..core import Event, Speech
from ..parsing import MalformedRowError, TranscriptRow, read_transcript_rows

LOGGER = logging.getLogger(__name__)

IngestProgressKind = Literal[
    "start",
    "event",
    "skipped",
    "finished",
    "error",
]


@dataclass(slots=True)
class IngestProgress:
    """Progress notification emitted by :class:`IngestPipeline`."""

    kind: IngestProgressKind
    events: int
    speeches: int
    skipped: int = 0
    line_number: int | None = None
    event: Event | None = None
    message: str | None = None


ProgressCallback = Callable[[IngestProgress], None]
EventCallback = Callable[[Event], None]


def build_events(rows: Iterable[TranscriptRow], *, on_event: Optional[EventCallback] = None) -> List[Event]:
    """Group ``rows`` into events by contiguous runs of the same date.

    A new event starts whenever a row's date differs from the previous row's
    date, so a date that reappears later opens a second event. Speech
    positions restart at 1 for every event.
    """

    events: List[Event] = []
    current: Event | None = None
    previous_date: str | None = None
    position = 0
    for row in rows:
        if current is None or row.date != previous_date:
            current = Event(row.event_name, row.date)
            events.append(current)
            previous_date = row.date
            position = 1
            if on_event:
                on_event(current)
        else:
            position += 1
        current.add_speech(Speech(position, row.speaker, row.script, row.length_seconds))
    return events


class IngestPipeline:
    """Read a transcript file and build its events."""

    def __init__(self, *, encoding: str = "utf8") -> None:
        self._encoding = encoding

    def run(self, path: Path, *, progress_callback: Optional[ProgressCallback] = None) -> List[Event]:
        """Ingest ``path`` end-to-end and return the events in file order."""

        events: List[Event] = []
        skipped = 0
        speeches = 0

        def handle_skip(error: MalformedRowError) -> None:
            nonlocal skipped
            skipped += 1
            self._notify(
                progress_callback,
                IngestProgress(
                    kind="skipped",
                    events=len(events),
                    speeches=speeches,
                    skipped=skipped,
                    line_number=error.line_number,
                    message=str(error),
                ),
            )

        def handle_event(event: Event) -> None:
            events.append(event)
            self._notify(
                progress_callback,
                IngestProgress(
                    kind="event",
                    events=len(events),
                    speeches=speeches,
                    skipped=skipped,
                    event=event,
                    message=f"Reading {event.name} ({event.date})",
                ),
            )

        def counted(rows: Iterable[TranscriptRow]) -> Iterable[TranscriptRow]:
            nonlocal speeches
            for row in rows:
                yield row
                speeches += 1

        LOGGER.info("Reading in events from %s", path)
        self._notify(
            progress_callback,
            IngestProgress(kind="start", events=0, speeches=0, message=f"Reading {path}"),
        )
        try:
            rows = read_transcript_rows(path, encoding=self._encoding, on_skip=handle_skip)
            build_events(counted(rows), on_event=handle_event)
        except (OSError, UnicodeError) as exc:
            LOGGER.exception("Reading %s failed: %s", path, exc)
            self._notify(
                progress_callback,
                IngestProgress(
                    kind="error",
                    events=len(events),
                    speeches=speeches,
                    skipped=skipped,
                    message=str(exc),
                ),
            )
            raise
        LOGGER.info(
            "Finished reading file: %s events, %s speeches, %s skipped rows",
            len(events),
            speeches,
            skipped,
        )
        self._notify(
            progress_callback,
            IngestProgress(
                kind="finished",
                events=len(events),
                speeches=speeches,
                skipped=skipped,
                message="Finished reading file",
            ),
        )
        return events

    @staticmethod
    def _notify(callback: Optional[ProgressCallback], progress: IngestProgress) -> None:
        if callback:
            callback(progress)


__all__ = ["IngestPipeline", "IngestProgress", "ProgressCallback", "build_events"]
