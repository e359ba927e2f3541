"""Session log ordering, capacity and formatting."""

from __future__ import annotations

from datetime import datetime

import pytest

from pinball_editor.services.event_log import EventLog


def _clock() -> datetime:
    return datetime(2024, 5, 6, 7, 8, 9)


def test_entries_are_newest_first_and_timestamped():
    log = EventLog(clock=_clock)

    log.log("first")
    log.log("second")

    assert log.lines() == ["[07:08:09] second", "[07:08:09] first"]


def test_log_is_capped_at_capacity():
    log = EventLog(capacity=60, clock=_clock)

    for index in range(75):
        log.log(f"event {index}")

    assert len(log) == 60
    assert log.messages()[0] == "event 74"
    assert log.messages()[-1] == "event 15"


def test_listeners_receive_each_entry():
    log = EventLog(clock=_clock)
    received = []
    log.add_listener(received.append)

    entry = log.log("hello")
    log.remove_listener(received.append)
    log.log("ignored")

    assert received == [entry]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        EventLog(capacity=0)
