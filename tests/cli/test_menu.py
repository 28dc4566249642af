from __future__ import annotations

from typing import Iterable, List

import pytest

from debate_stats.menu import INVALID_OPTION, InteractiveMenu
from debate_stats.reporting import EventSortKey
from debate_stats.runtime import load_session


class ScriptedConsole:
    def __init__(self, answers: Iterable[str]):
        self._answers = list(answers)
        self.output: List[str] = []

    def ask(self, prompt: str) -> str:
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture()
def session(transcript_csv):
    return load_session(transcript_csv)


def _run(session, answers, **options) -> ScriptedConsole:
    console = ScriptedConsole(answers)
    InteractiveMenu(session, input_func=console.ask, output=console.write, **options).run()
    return console


def test_event_details_follow_the_displayed_sort_order(session):
    console = _run(session, ["a", "b", "1", "b", "x", "x", "x"])

    assert "South Carolina Debate : 2020-02-25" in console.text
    assert "Democratic Debate, Night 1 : 2019-06-26" not in console.text
    speaker_table = next(chunk for chunk in console.output if "Bernie Sanders" in chunk and "AVG WC" in chunk)
    assert speaker_table.index("Bernie Sanders") < speaker_table.index("Elizabeth Warren")


def test_speakers_menu_shows_the_roll_up(session):
    console = _run(session, ["B", "B", "X", "X"])

    table = next(chunk for chunk in console.output if "#EVENTS" in chunk)
    first_row = next(line for line in table.splitlines() if line.startswith("1 "))
    assert "Elizabeth Warren" in first_row
    assert [cell.strip() for cell in first_row.split("|")][2] == "2"


def test_invalid_options_reprompt(session):
    console = _run(session, ["Q", "A", "9", "Z", "X", "B", "G", "X", "X"])

    assert console.output.count(INVALID_OPTION) == 4
    assert "Main Menu" in console.output[-1]


def test_end_of_input_leaves_the_menu(session):
    console = _run(session, ["A", "1"])

    assert "Democratic Debate, Night 1 : 2019-06-26" in console.text
    assert console.output[-1] == ""


def test_configured_event_sort_orders_the_first_listing(session):
    console = _run(session, ["A", "1"], event_sort=EventSortKey.DATE)

    assert "South Carolina Debate : 2020-02-25" in console.text
    assert "Democratic Debate, Night 1 : 2019-06-26" not in console.text
