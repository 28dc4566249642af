"""Interactive terminal menu over a loaded transcript session.

The menu mirrors the classic layout of the tool: a main menu leading to an
event list (with per-event details) and to the speaker roll-up over all
events. Input and output are injectable so the loop can be driven from tests.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .core import Event
from .reporting import (
    EventSortKey,
    SpeakerSortKey,
    format_event_summary,
    format_event_table,
    format_speaker_table,
)
from .runtime import DebateSession

_RULE = "=" * 67
INVALID_OPTION = "Invalid Option."

_EVENT_SORT_CHOICES: Dict[str, EventSortKey] = {
    "A": EventSortKey.NAME,
    "B": EventSortKey.DATE,
    "C": EventSortKey.SPEAKER_COUNT,
}

_EVENT_SPEAKER_SORT_CHOICES: Dict[str, SpeakerSortKey] = {
    "A": SpeakerSortKey.NAME,
    "B": SpeakerSortKey.TOTAL_WORD_COUNT,
    "C": SpeakerSortKey.AVERAGE_WORD_COUNT,
    "D": SpeakerSortKey.TOTAL_SPEAKING_TIME,
    "E": SpeakerSortKey.AVERAGE_SPEAKING_TIME,
}

_ALL_SPEAKER_SORT_CHOICES: Dict[str, SpeakerSortKey] = {
    "A": SpeakerSortKey.NAME,
    "B": SpeakerSortKey.APPEARANCES,
    "C": SpeakerSortKey.TOTAL_WORD_COUNT,
    "D": SpeakerSortKey.AVERAGE_WORD_COUNT,
    "E": SpeakerSortKey.TOTAL_SPEAKING_TIME,
    "F": SpeakerSortKey.AVERAGE_SPEAKING_TIME,
}


class InteractiveMenu:
    """Prompt loop for browsing events and speakers.

    ``event_sort`` orders the event list when it is first shown; without it
    the events appear in file order.
    """

    def __init__(
        self,
        session: DebateSession,
        *,
        input_func: Optional[Callable[[str], str]] = None,
        output: Callable[[str], None] = print,
        event_sort: Optional[EventSortKey] = None,
    ) -> None:
        self._session = session
        self._event_sort = event_sort
        self._input = input_func or input
        self._output = output

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""

        try:
            self._main_menu()
        except EOFError:
            self._output("")

    def _ask(self) -> str:
        return self._input("\t>>").strip().upper()

    def _main_menu(self) -> None:
        while True:
            self._output(
                "\n".join(
                    [
                        "",
                        _RULE,
                        "\tMain Menu",
                        _RULE,
                        "\tA) View Events",
                        "\tB) View Speakers",
                        "\tX) Exit",
                        "",
                    ]
                )
            )
            choice = self._ask()
            if choice == "A":
                self._events_menu()
            elif choice == "B":
                self._speakers_menu()
            elif choice == "X":
                return
            else:
                self._output(INVALID_OPTION)

    def _events_menu(self) -> None:
        # the listing keeps its last sort order so "#" refers to what was shown
        if self._event_sort is None:
            listing: List[Event] = list(self._session.events)
        else:
            listing = self._session.sorted_events(self._event_sort)
        self._output(format_event_table(listing))
        while True:
            self._output(
                "\n".join(
                    [
                        "Display All Events: ",
                        "\tA) Sort by Name",
                        "\tB) Sort by Date",
                        "\tC) Sort by Number of Speakers",
                        "\t#) View Event Details",
                        "\tX) Go Back",
                        "",
                    ]
                )
            )
            choice = self._ask()
            if choice == "X":
                return
            if choice in _EVENT_SORT_CHOICES:
                listing = self._session.sorted_events(_EVENT_SORT_CHOICES[choice])
                self._output(format_event_table(listing))
                continue
            try:
                index = int(choice)
            except ValueError:
                self._output(INVALID_OPTION)
                continue
            if 1 <= index <= len(listing):
                self._event_details(listing[index - 1])
            else:
                self._output(INVALID_OPTION)

    def _event_details(self, event: Event) -> None:
        self._output(format_event_summary(event))
        while True:
            self._output(
                "\n".join(
                    [
                        "Display Speakers: ",
                        "\tA) Sort by Name",
                        "\tB) Sort by Highest Word Count",
                        "\tC) Sort by Average Word Count",
                        "\tD) Sort by Longest Speaking Time",
                        "\tE) Sort by Average Speaking Time",
                        "\tX) Go Back",
                        "",
                    ]
                )
            )
            choice = self._ask()
            if choice == "X":
                return
            key = _EVENT_SPEAKER_SORT_CHOICES.get(choice)
            if key is None:
                self._output(INVALID_OPTION)
                continue
            speakers = self._session.sorted_speakers(key, event=event)
            self._output(format_speaker_table(speakers, event.name))

    def _speakers_menu(self) -> None:
        while True:
            self._output(
                "\n".join(
                    [
                        "",
                        _RULE,
                        "\tView Speakers",
                        _RULE,
                        "\tA) Sort by Name",
                        "\tB) Sort by Number of Events Attended",
                        "\tC) Sort by Highest Word Count",
                        "\tD) Sort by Average Word Count",
                        "\tE) Sort by Highest Speaking Time",
                        "\tF) Sort by Average Speaking Time",
                        "\tX) Go Back",
                        "",
                    ]
                )
            )
            choice = self._ask()
            if choice == "X":
                return
            key = _ALL_SPEAKER_SORT_CHOICES.get(choice)
            if key is None:
                self._output(INVALID_OPTION)
                continue
            speakers = self._session.sorted_speakers(key)
            self._output(format_speaker_table(speakers, "All Events", show_appearances=True))


__all__ = ["INVALID_OPTION", "InteractiveMenu"]
