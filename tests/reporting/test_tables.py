from debate_stats.core import Event, SpeakerStats, Speech
from debate_stats.reporting import (
    event_rows,
    format_event_summary,
    format_event_table,
    format_speaker_table,
    speaker_rows,
)


def _sample_event() -> Event:
    event = Event("Democratic Debate", "2019-06-26")
    event.add_speech(Speech(1, "Julian Castro", "Hello, world.", 10.0))
    event.add_speech(Speech(2, "Tulsi Gabbard", "Thank you.", 5.0))
    return event


def test_event_table_lists_index_name_date_and_speakers():
    table = format_event_table([_sample_event()])

    row = next(line for line in table.splitlines() if "Democratic Debate" in line)
    assert row.startswith("  1| Democratic Debate")
    assert "2019-06-26" in row
    assert row.rstrip().endswith("| 2")


def test_event_summary_shows_totals_and_averages():
    summary = format_event_summary(_sample_event())

    assert "Democratic Debate : 2019-06-26" in summary
    assert "Total Word Count          | 4" in summary
    assert "Average Word Count        | 2" in summary
    assert "Total Speaking Time       | 15" in summary
    assert "Average Speaking Time     | 7.5" in summary


def test_speaker_table_shows_appearances_only_when_requested():
    speakers = [("Julian Castro", SpeakerStats(times_spoke=2, total_word_count=30, total_speaking_time=9.0, appearances=4))]

    with_appearances = format_speaker_table(speakers, "All Events", show_appearances=True)
    without = format_speaker_table(speakers, "Democratic Debate")

    assert "#EVENTS" in with_appearances
    assert "#EVENTS" not in without
    row = next(line for line in with_appearances.splitlines() if "Julian Castro" in line)
    assert [cell.strip() for cell in row.split("|")] == ["1", "Julian Castro", "4", "30", "15", "9", "4.5"]


def test_row_helpers_use_display_strings():
    rows = event_rows([_sample_event()])
    assert rows == [
        {"index": "1", "name": "Democratic Debate", "date": "2019-06-26", "speakers": "2", "speeches": "2"}
    ]

    speakers = speaker_rows([("Tulsi Gabbard", SpeakerStats(times_spoke=3, total_word_count=10, total_speaking_time=4.0))])
    assert speakers[0]["avg_words"] == "3.3"
    assert speakers[0]["time"] == "4"
