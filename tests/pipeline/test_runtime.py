from __future__ import annotations

import pytest

from debate_stats.config import AppConfig, DatasetConfig
from debate_stats.reporting import EventSortKey, SpeakerSortKey
from debate_stats.runtime import DatasetNotFoundError, create_session, load_session


def test_missing_dataset_raises(tmp_path):
    with pytest.raises(DatasetNotFoundError):
        load_session(tmp_path / "nope.csv")


def test_create_session_uses_configured_path(transcript_csv):
    config = AppConfig(dataset=DatasetConfig(path=str(transcript_csv)))

    session = create_session(config)

    assert session.source == transcript_csv
    assert len(session.events) == 2
    assert session.speech_count == 5


def test_session_queries(transcript_csv):
    session = load_session(transcript_csv)

    assert [event.date for event in session.sorted_events(EventSortKey.DATE)] == ["2020-02-25", "2019-06-26"]
    assert session.event_at(1).name == "Democratic Debate, Night 1"
    with pytest.raises(IndexError):
        session.event_at(3)
    with pytest.raises(IndexError):
        session.event_at(0)

    speakers = session.speakers()
    warren = speakers["Elizabeth Warren"]
    assert warren.appearances == 2
    assert warren.times_spoke == 2
    assert warren.total_word_count == 8 + 3
    assert warren.total_speaking_time == 28.0
    assert speakers["Lester Holt"].times_spoke == 2
    assert speakers["Lester Holt"].appearances == 1

    first_event = session.sorted_speakers(SpeakerSortKey.TOTAL_WORD_COUNT, event=session.event_at(1))
    assert [name for name, _ in first_event] == ["Elizabeth Warren", "Lester Holt"]
    assert all(stats.appearances == 0 for _, stats in first_event)

    overall = session.sorted_speakers(SpeakerSortKey.APPEARANCES)
    assert overall[0][0] == "Elizabeth Warren"
