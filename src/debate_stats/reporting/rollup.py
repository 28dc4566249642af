"""Cross-event speaker statistics."""
from __future__ import annotations

from typing import Dict, Iterable

from ..core import Event, SpeakerStats


def roll_up_speakers(events: Iterable[Event]) -> Dict[str, SpeakerStats]:
    """Combine the speaker statistics of ``events`` into one mapping.

    ``appearances`` counts the events a speaker took part in, the other
    totals are summed over every speech. The events are only read.
    """

    combined: Dict[str, SpeakerStats] = {}
    for event in events:
        for speaker, stats in event.speakers().items():
            entry = combined.get(speaker)
            if entry is None:
                entry = SpeakerStats()
                combined[speaker] = entry
            entry.merge(stats)
            entry.record_appearance()
    return combined


__all__ = ["roll_up_speakers"]
