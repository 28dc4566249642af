"""NiceGUI powered browser view of the debate statistics."""
from __future__ import annotations

from typing import Dict, List, Optional

from nicegui import ui

from ..config import AppConfig
from ..core import Event
from ..reporting import EventSortKey, SpeakerSortKey, event_rows, speaker_rows
from ..runtime import DebateSession

_EVENT_SORT_LABELS: Dict[str, str] = {
    EventSortKey.NAME.value: "Name",
    EventSortKey.DATE.value: "Date (newest first)",
    EventSortKey.SPEAKER_COUNT.value: "Number of speakers",
}

_SPEAKER_SORT_LABELS: Dict[str, str] = {
    SpeakerSortKey.NAME.value: "Name",
    SpeakerSortKey.APPEARANCES.value: "Events attended",
    SpeakerSortKey.TOTAL_WORD_COUNT.value: "Highest word count",
    SpeakerSortKey.AVERAGE_WORD_COUNT.value: "Average word count",
    SpeakerSortKey.TOTAL_SPEAKING_TIME.value: "Longest speaking time",
    SpeakerSortKey.AVERAGE_SPEAKING_TIME.value: "Average speaking time",
}

_EVENT_COLUMNS = [
    {"name": "index", "label": "#", "field": "index", "align": "right"},
    {"name": "name", "label": "Event", "field": "name", "align": "left"},
    {"name": "date", "label": "Date", "field": "date", "align": "left"},
    {"name": "speakers", "label": "Speakers", "field": "speakers", "align": "right"},
    {"name": "speeches", "label": "Speeches", "field": "speeches", "align": "right"},
]

_SPEAKER_COLUMNS = [
    {"name": "index", "label": "#", "field": "index", "align": "right"},
    {"name": "name", "label": "Speaker", "field": "name", "align": "left"},
    {"name": "appearances", "label": "Events", "field": "appearances", "align": "right"},
    {"name": "words", "label": "WC", "field": "words", "align": "right"},
    {"name": "avg_words", "label": "Avg WC", "field": "avg_words", "align": "right"},
    {"name": "time", "label": "Total time", "field": "time", "align": "right"},
    {"name": "avg_time", "label": "Avg time", "field": "avg_time", "align": "right"},
]


def _event_options(session: DebateSession) -> Dict[int, str]:
    return {
        index: f"{index}. {event.name} ({event.date})"
        for index, event in enumerate(session.events, start=1)
    }


def _summary_text(event: Event) -> str:
    return (
        f"**{event.name}** : {event.date}\n\n"
        f"Total word count: {event.total_word_count}  \n"
        f"Average word count: {event.average_word_count:.1f}  \n"
        f"Total speaking time: {event.total_speaking_time:g}  \n"
        f"Average speaking time: {event.average_speaking_time:.1f}"
    )


def run_ui(
    config: AppConfig,
    *,
    session: DebateSession,
    host: str = "127.0.0.1",
    port: int = 8080,
) -> None:
    """Start the NiceGUI based statistics view."""

    selected_event: Optional[Event] = session.events[0] if session.events else None

    ui.colors(primary="#2563eb", secondary="#111827", accent="#f97316")

    with ui.header().classes("items-center justify-between bg-primary text-white px-6 py-3 shadow-lg"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("record_voice_over").classes("text-2xl")
            ui.label(config.ui.title).classes("text-lg font-semibold")
        ui.badge(
            f"{len(session.events)} events · {session.speech_count} speeches",
            color="accent",
        ).classes("text-sm")

    with ui.row().classes("w-full max-w-6xl mx-auto mt-4 gap-6 flex-col lg:flex-row"):
        with ui.card().classes("w-full lg:w-1/2 shadow-md"):
            ui.label("All events").classes("text-base font-semibold mb-2")
            event_sort_select = ui.select(
                _EVENT_SORT_LABELS,
                value=EventSortKey(config.report.event_sort).value,
                label="Sort by",
            ).classes("w-64")
            event_table = ui.table(columns=_EVENT_COLUMNS, rows=[], row_key="index").classes("w-full")
            event_table.props("dense flat")
        with ui.card().classes("w-full lg:w-1/2 shadow-md"):
            ui.label("Event details").classes("text-base font-semibold mb-2")
            event_select = ui.select(
                _event_options(session),
                value=1 if selected_event else None,
                label="Event",
            ).classes("w-full")
            summary = ui.markdown("").classes("text-sm")
            detail_sort_select = ui.select(
                {key: label for key, label in _SPEAKER_SORT_LABELS.items() if key != SpeakerSortKey.APPEARANCES.value},
                value=SpeakerSortKey.NAME.value,
                label="Sort speakers by",
            ).classes("w-64")
            detail_columns = [column for column in _SPEAKER_COLUMNS if column["name"] != "appearances"]
            detail_table = ui.table(columns=detail_columns, rows=[], row_key="index").classes("w-full")
            detail_table.props("dense flat")

    with ui.card().classes("w-full max-w-6xl mx-auto mt-4 shadow-md"):
        ui.label("All speakers").classes("text-base font-semibold mb-2")
        speaker_sort_select = ui.select(
            _SPEAKER_SORT_LABELS,
            value=SpeakerSortKey(config.report.speaker_sort).value,
            label="Sort by",
        ).classes("w-64")
        speaker_table = ui.table(columns=_SPEAKER_COLUMNS, rows=[], row_key="index").classes("w-full")
        speaker_table.props("dense flat")

    def refresh_events() -> None:
        listing: List[Event] = session.sorted_events(event_sort_select.value)
        event_table.rows = event_rows(listing)

    def refresh_details() -> None:
        if selected_event is None:
            summary.set_content("No events loaded")
            detail_table.rows = []
            return
        summary.set_content(_summary_text(selected_event))
        speakers = session.sorted_speakers(detail_sort_select.value, event=selected_event)
        detail_table.rows = speaker_rows(speakers)

    def refresh_speakers() -> None:
        speaker_table.rows = speaker_rows(session.sorted_speakers(speaker_sort_select.value))

    def handle_event_selected() -> None:
        nonlocal selected_event
        if event_select.value is None:
            selected_event = None
        else:
            selected_event = session.event_at(int(event_select.value))
        refresh_details()

    event_sort_select.on_value_change(lambda _: refresh_events())
    event_select.on_value_change(lambda _: handle_event_selected())
    detail_sort_select.on_value_change(lambda _: refresh_details())
    speaker_sort_select.on_value_change(lambda _: refresh_speakers())

    refresh_events()
    refresh_details()
    refresh_speakers()

    ui.run(reload=False, host=host, port=port, title=config.ui.title)
