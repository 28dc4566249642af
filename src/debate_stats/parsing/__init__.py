"""Parsing helpers for debate transcript files."""
from __future__ import annotations

from .transcripts import (
    MalformedRowError,
    TranscriptRow,
    iter_transcript_rows,
    parse_length,
    parse_transcript_line,
    read_transcript_rows,
)

__all__ = [
    "MalformedRowError",
    "TranscriptRow",
    "iter_transcript_rows",
    "parse_length",
    "parse_transcript_line",
    "read_transcript_rows",
]
