"""Utilities for reading debate transcript CSV files into rows."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Tuple
import logging
import re

LOGGER = logging.getLogger(__name__)

_TEXT_FIELDS = ("date", "event", "section", "speaker", "script")
_LENGTH_PATTERN = re.compile(r"^\s*(?P<seconds>\d+(?:\.\d*)?)")


@dataclass(slots=True)
class TranscriptRow:
    """One parsed line of the transcript dataset."""

    line_number: int
    date: str
    event_name: str
    section: str
    speaker: str
    script: str
    length_seconds: float = 0.0


class MalformedRowError(ValueError):
    """Raised when a transcript line is missing one of its text fields."""

    def __init__(self, line_number: int, field: str) -> None:
        super().__init__(f"Bad {field}: line #{line_number} of file")
        self.line_number = line_number
        self.field = field


SkipCallback = Callable[[MalformedRowError], None]


def _next_field(line: str, start: int) -> Optional[Tuple[str, int]]:
    """Read the field beginning at ``start``.

    Returns the value and the index just past its separating comma, or
    ``None`` when the field is not terminated. Quoted fields run to the next
    double quote and may contain commas.
    """

    if start < len(line) and line[start] == '"':
        end = line.find('"', start + 1)
        if end == -1:
            return None
        value = line[start + 1 : end]
        position = end + 1
        if position < len(line) and line[position] == ",":
            position += 1
        return value, position
    end = line.find(",", start)
    if end == -1:
        return None
    return line[start:end], end + 1


def parse_length(raw: str) -> Optional[float]:
    """Parse the leading number of ``raw`` as seconds.

    Returns ``None`` when ``raw`` does not start with a non-negative number.
    """

    match = _LENGTH_PATTERN.match(raw)
    if not match:
        return None
    return float(match.group("seconds"))


def parse_transcript_line(line: str, line_number: int) -> TranscriptRow:
    """Split one CSV line into a :class:`TranscriptRow`.

    Raises :class:`MalformedRowError` naming the first field that could not
    be read. An unreadable length is not an error and becomes ``0``.
    """

    values = []
    position = 0
    for field_name in _TEXT_FIELDS:
        result = _next_field(line, position)
        if result is None:
            raise MalformedRowError(line_number, field_name)
        value, position = result
        values.append(value)

    remainder = line[position:]
    length_seconds = parse_length(remainder)
    if length_seconds is None:
        LOGGER.debug("Unreadable length %r on line %s, using 0", remainder.strip(), line_number)
        length_seconds = 0.0

    date, event_name, section, speaker, script = values
    return TranscriptRow(
        line_number=line_number,
        date=date,
        event_name=event_name,
        section=section,
        speaker=speaker,
        script=script,
        length_seconds=length_seconds,
    )


def iter_transcript_rows(
    lines: Iterable[str],
    *,
    skip_header: bool = True,
    on_skip: Optional[SkipCallback] = None,
) -> Iterator[TranscriptRow]:
    """Yield the well-formed rows of ``lines`` in file order.

    Line numbers are 1-based and count the header. Malformed lines are logged
    with their line number and skipped; blank lines are ignored.
    """

    for line_number, raw_line in enumerate(lines, start=1):
        if skip_header and line_number == 1:
            continue
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            yield parse_transcript_line(line, line_number)
        except MalformedRowError as exc:
            LOGGER.warning("Skipping row: %s", exc)
            if on_skip:
                on_skip(exc)


def read_transcript_rows(
    path: Path,
    *,
    encoding: str = "utf8",
    on_skip: Optional[SkipCallback] = None,
) -> Iterator[TranscriptRow]:
    """Read ``path`` and yield its rows, discarding the header line.

    Undecodable bytes become U+FFFD so one bad row cannot abort the read.
    """

    with path.open("r", encoding=encoding, errors="replace") as fh:
        yield from iter_transcript_rows(fh, on_skip=on_skip)


__all__ = [
    "MalformedRowError",
    "TranscriptRow",
    "iter_transcript_rows",
    "parse_length",
    "parse_transcript_line",
    "read_transcript_rows",
]
