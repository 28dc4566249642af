"""Text tables and row dictionaries for the report views."""
from __future__ import annotations

from typing import Dict, List, Sequence

from ..core import Event
from .sorting import SpeakerEntry

_RULE = "=" * 67


def _number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def format_event_table(events: Sequence[Event], title: str = "All Events") -> str:
    lines = ["", _RULE, f"\t{title}:", _RULE]
    for index, event in enumerate(events, start=1):
        lines.append(f"{index:>3}| {event.name:<40} | {event.date:<11} | {event.speaker_count:<3}")
    lines.append("")
    return "\n".join(lines)


def format_event_summary(event: Event) -> str:
    rows = (
        ("Total Word Count", _number(event.total_word_count)),
        ("Average Word Count", _number(event.average_word_count)),
        ("Total Speaking Time", _number(event.total_speaking_time)),
        ("Average Speaking Time", _number(event.average_speaking_time)),
    )
    lines = ["", _RULE, f"\t{event.name} : {event.date}", ""]
    lines.extend(f"{label:<25} | {value:<5}" for label, value in rows)
    lines.append(_RULE)
    return "\n".join(lines)


def format_speaker_table(
    speakers: Sequence[SpeakerEntry],
    title: str,
    *,
    show_appearances: bool = False,
) -> str:
    """Render speaker statistics as a fixed-width table.

    ``show_appearances`` adds the number of events per speaker, which is only
    meaningful for the roll-up over all events.
    """

    header = f"    | {'Speaker':<21}"
    if show_appearances:
        header += "| #EVENTS "
    header += "|   WC  | AVG WC | TOT TIME | AVG TIME "
    lines = ["", _RULE, f"\t{title}", _RULE, header]
    for index, (name, stats) in enumerate(speakers, start=1):
        line = f"{index:<3} | {name:<20} | "
        if show_appearances:
            line += f"{stats.appearances:<6} | "
        line += (
            f"{stats.total_word_count:<5} | {_number(stats.average_word_count):<6} | "
            f"{_number(stats.total_speaking_time):<8} | {_number(stats.average_speaking_time):<7}"
        )
        lines.append(line)
    lines.append("")
    return "\n".join(lines)


def event_rows(events: Sequence[Event]) -> List[Dict[str, str]]:
    return [
        {
            "index": str(index),
            "name": event.name,
            "date": event.date,
            "speakers": str(event.speaker_count),
            "speeches": str(event.speech_count),
        }
        for index, event in enumerate(events, start=1)
    ]


def speaker_rows(speakers: Sequence[SpeakerEntry]) -> List[Dict[str, str]]:
    return [
        {
            "index": str(index),
            "name": name,
            "appearances": str(stats.appearances),
            "words": str(stats.total_word_count),
            "avg_words": _number(stats.average_word_count),
            "time": _number(stats.total_speaking_time),
            "avg_time": _number(stats.average_speaking_time),
        }
        for index, (name, stats) in enumerate(speakers, start=1)
    ]


__all__ = [
    "event_rows",
    "format_event_summary",
    "format_event_table",
    "format_speaker_table",
    "speaker_rows",
]
