from __future__ import annotations

import dataclasses

import pytest

from debate_stats.core import Event, SpeakerStats, Speech


@pytest.fixture()
def speeches():
    return [
        Speech(1, "Amy Klobuchar", "Hello, world.", 10.0),
        Speech(2, "Pete Buttigieg", "One two three.", 5.0),
        Speech(3, "Amy Klobuchar", "Yes.", 2.5),
    ]


def test_speech_computes_word_count_once():
    speech = Speech(1, "Joe Biden", "Folks, here's the deal.", 7.0)

    assert speech.word_count == 4
    with pytest.raises(dataclasses.FrozenInstanceError):
        speech.script = "changed"  # type: ignore[misc]


def test_speech_length_defaults_to_zero():
    assert Speech(1, "Joe Biden", "Thanks.").length_seconds == 0.0


def test_new_event_starts_empty():
    event = Event("Democratic Debate", "2019-06-26")

    assert event.name == "Democratic Debate"
    assert event.date == "2019-06-26"
    assert event.speech_count == 0
    assert event.speaker_count == 0
    assert event.total_word_count == 0
    assert event.total_speaking_time == 0
    assert event.speeches == ()
    assert event.speakers() == {}
    assert event.average_word_count == 0
    assert event.average_speaking_time == 0


def test_add_speech_updates_event_totals(speeches):
    event = Event("Democratic Debate", "2019-06-26")
    for speech in speeches:
        event.add_speech(speech)

    assert event.speech_count == len(speeches)
    assert event.total_word_count == sum(speech.word_count for speech in speeches) == 6
    assert event.total_speaking_time == pytest.approx(17.5)
    assert event.average_word_count == pytest.approx(2.0)
    assert event.average_speaking_time == pytest.approx(17.5 / 3)


def test_repeated_speaker_is_counted_once(speeches):
    event = Event("Democratic Debate", "2019-06-26")
    for speech in speeches:
        event.add_speech(speech)

    speakers = event.speakers()
    assert event.speaker_count == len(speakers) == 2
    assert speakers["Amy Klobuchar"].times_spoke == 2
    assert speakers["Amy Klobuchar"].total_word_count == 3
    assert speakers["Amy Klobuchar"].total_speaking_time == pytest.approx(12.5)
    assert speakers["Amy Klobuchar"].appearances == 0


def test_speeches_are_returned_chronologically():
    event = Event("Democratic Debate", "2019-06-26")
    event.add_speech(Speech(2, "B", "Second.", 1.0))
    event.add_speech(Speech(1, "A", "First.", 1.0))

    assert [speech.position for speech in event.speeches] == [1, 2]


def test_speakers_returns_a_snapshot(speeches):
    event = Event("Democratic Debate", "2019-06-26")
    event.add_speech(speeches[0])

    snapshot = event.speakers()
    snapshot["Amy Klobuchar"].record_speech(speeches[2])
    snapshot["Somebody Else"] = SpeakerStats()

    assert event.speakers()["Amy Klobuchar"].times_spoke == 1
    assert event.speaker_count == 1


def test_speaker_averages():
    stats = SpeakerStats(times_spoke=3, total_word_count=300, total_speaking_time=90.0)

    assert stats.average_word_count == 100
    assert stats.average_speaking_time == 30


def test_speaker_averages_are_zero_without_speeches():
    stats = SpeakerStats()

    assert stats.average_word_count == 0
    assert stats.average_speaking_time == 0


def test_merge_and_appearance_leave_other_record_untouched():
    first = SpeakerStats(times_spoke=1, total_word_count=10, total_speaking_time=4.0)
    second = SpeakerStats(times_spoke=2, total_word_count=5, total_speaking_time=1.0)

    first.merge(second)
    first.record_appearance()

    assert first == SpeakerStats(times_spoke=3, total_word_count=15, total_speaking_time=5.0, appearances=1)
    assert second == SpeakerStats(times_spoke=2, total_word_count=5, total_speaking_time=1.0)
