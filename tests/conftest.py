from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_TRANSCRIPT = (
    "date,debate_name,debate_section,speaker,speech,speaking_time_seconds\n"
    '2019-06-26,"Democratic Debate, Night 1",Part 1,Lester Holt,"Good evening, everyone.",10\n'
    '2019-06-26,"Democratic Debate, Night 1",Part 1,Elizabeth Warren,"Thank you. It is great to be here.",20\n'
    '2019-06-26,"Democratic Debate, Night 1",Part 1,Lester Holt,"Senator, thank you.",abc\n'
    '2019-06-26,"Democratic Debate, Night 1,Part 1\n'
    '2020-02-25,South Carolina Debate,Part 1,Elizabeth Warren,"I will win.",8\n'
    '2020-02-25,South Carolina Debate,Part 1,Bernie Sanders,"Let me be clear.",12\n'
)


@pytest.fixture()
def transcript_csv(tmp_path) -> Path:
    path = tmp_path / "transcripts.csv"
    path.write_text(SAMPLE_TRANSCRIPT, encoding="utf8")
    return path
