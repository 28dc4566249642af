"""Sort orders for the event and speaker views."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple, Union

from ..core import Event, SpeakerStats

SpeakerEntry = Tuple[str, SpeakerStats]


class EventSortKey(str, Enum):
    NAME = "name"
    DATE = "date"
    SPEAKER_COUNT = "speakers"


class SpeakerSortKey(str, Enum):
    NAME = "name"
    TOTAL_WORD_COUNT = "words"
    AVERAGE_WORD_COUNT = "avg-words"
    TOTAL_SPEAKING_TIME = "time"
    AVERAGE_SPEAKING_TIME = "avg-time"
    APPEARANCES = "appearances"


# key function and whether the order is descending
_EVENT_ORDERS: Dict[EventSortKey, Tuple[Callable[[Event], Any], bool]] = {
    EventSortKey.NAME: (lambda event: event.name, False),
    EventSortKey.DATE: (lambda event: event.date, True),
    EventSortKey.SPEAKER_COUNT: (lambda event: event.speaker_count, True),
}

_SPEAKER_ORDERS: Dict[SpeakerSortKey, Tuple[Callable[[SpeakerEntry], Any], bool]] = {
    SpeakerSortKey.NAME: (lambda entry: entry[0], False),
    SpeakerSortKey.TOTAL_WORD_COUNT: (lambda entry: entry[1].total_word_count, True),
    SpeakerSortKey.AVERAGE_WORD_COUNT: (lambda entry: entry[1].average_word_count, True),
    SpeakerSortKey.TOTAL_SPEAKING_TIME: (lambda entry: entry[1].total_speaking_time, True),
    SpeakerSortKey.AVERAGE_SPEAKING_TIME: (lambda entry: entry[1].average_speaking_time, True),
    SpeakerSortKey.APPEARANCES: (lambda entry: entry[1].appearances, True),
}


def sort_events(events: Iterable[Event], key: EventSortKey | str) -> List[Event]:
    """Return ``events`` as a new list ordered by ``key``.

    Names sort ascending; dates and speaker counts sort descending so the
    most recent and the best attended events come first.
    """

    key_func, descending = _EVENT_ORDERS[EventSortKey(key)]
    return sorted(events, key=key_func, reverse=descending)


def sort_speakers(
    speakers: Union[Mapping[str, SpeakerStats], Iterable[SpeakerEntry]],
    key: SpeakerSortKey | str,
) -> List[SpeakerEntry]:
    """Return ``(name, stats)`` pairs ordered by ``key``.

    Names sort ascending, every numeric order is descending.
    """

    entries = list(speakers.items()) if isinstance(speakers, Mapping) else list(speakers)
    key_func, descending = _SPEAKER_ORDERS[SpeakerSortKey(key)]
    return sorted(entries, key=key_func, reverse=descending)


__all__ = ["EventSortKey", "SpeakerEntry", "SpeakerSortKey", "sort_events", "sort_speakers"]
