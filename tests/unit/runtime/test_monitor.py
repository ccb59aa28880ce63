# tests/unit/runtime/test_monitor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging

import pytest

from fsmkit.core.errors import InvalidStateChangeError
from fsmkit.core.notifications import StructuralTopic, TokenTopic
from fsmkit.runtime.monitor import NotificationLogger, NotificationMonitor


def test_monitor_records_history(simple_machine):
    monitor = NotificationMonitor(simple_machine.channel)
    simple_machine.update_token_to_next_state_by_event_name("t1", "Start")

    assert [entry["topic"] for entry in monitor.history] == [TokenTopic.CREATED, TokenTopic.STATE_CHANGED]
    assert all("timestamp" in entry for entry in monitor.history)
    assert monitor.event_count == 2
    assert monitor.get_metric(TokenTopic.CREATED) == 1
    assert monitor.get_metric(TokenTopic.SELF_TRANSITION) == 0
    assert monitor.metrics == {TokenTopic.CREATED: 1, TokenTopic.STATE_CHANGED: 1}


def test_monitor_query(simple_machine):
    monitor = NotificationMonitor(simple_machine.channel)
    simple_machine.create_token_instance("a")
    simple_machine.create_token_instance("b")
    simple_machine.add_event("Extra")

    assert len(monitor.query(topic=TokenTopic.CREATED)) == 2
    assert [n.token_id for n in monitor.query(token_id="b")] == ["b"]
    assert monitor.query(topic=StructuralTopic.EVENT_ADDED)[0].event.event_name == "Extra"
    assert monitor.query(topic=StructuralTopic.EVENT_ADDED, token_id="a") == []
    assert len(monitor.query()) == 3


def test_monitor_clear_and_detach(simple_machine):
    monitor = NotificationMonitor(simple_machine.channel)
    simple_machine.create_token_instance("a")
    monitor.clear_history()
    assert monitor.history == []
    assert monitor.metrics == {}

    monitor.detach()
    simple_machine.create_token_instance("b")
    assert monitor.event_count == 0


def test_logger_levels(simple_machine, caplog):
    NotificationLogger(simple_machine.channel, logging.getLogger("fsmkit.test"))
    with caplog.at_level(logging.DEBUG, logger="fsmkit.test"):
        simple_machine.add_event("Extra")
        simple_machine.update_token_to_next_state_by_event_name("t1", "Start")
        with pytest.raises(InvalidStateChangeError):
            simple_machine.update_token_to_next_state_by_event_name("t1", "Start")

    records = [r for r in caplog.records if r.name == "fsmkit.test"]
    assert [r.levelno for r in records] == [logging.DEBUG, logging.DEBUG, logging.DEBUG, logging.WARNING]
    assert "EVENT_ADDED" in records[0].getMessage()
    assert "INVALID_STATE_CHANGE" in records[-1].getMessage()


def test_logger_detach(simple_machine, caplog):
    notification_logger = NotificationLogger(simple_machine.channel, logging.getLogger("fsmkit.test"))
    notification_logger.detach()
    with caplog.at_level(logging.DEBUG, logger="fsmkit.test"):
        simple_machine.add_event("Extra")
    assert [r for r in caplog.records if r.name == "fsmkit.test"] == []
