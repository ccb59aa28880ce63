# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def fsm():
    """An empty machine named 'test'."""
    from fsmkit.core.machine import FiniteStateMachine

    return FiniteStateMachine("test")


@pytest.fixture
def simple_machine(fsm):
    """
    Idle(0) --Start(0)--> Running(1) --Stop(1)--> Done(2, final).
    """
    idle = fsm.add_state("Idle")
    running = fsm.add_state("Running")
    done = fsm.add_final_state("Done")
    start = fsm.add_event("Start")
    stop = fsm.add_event("Stop")
    fsm.add_state_transition(idle, start, running)
    fsm.add_state_transition(running, stop, done)
    return fsm


@pytest.fixture
def traffic_light():
    """The traffic light machine used by the scenario tests."""
    from fsmkit.core.machine import FiniteStateMachine

    fsm = FiniteStateMachine("trafficLight")
    red = fsm.add_state("Red")
    yellow = fsm.add_state("Yellow")
    green = fsm.add_state("Green", 999)
    damaged = fsm.add_final_state("Damaged", -1)

    fsm.add_event("NoCar")
    fsm.add_event("Secs_10", 10)
    fsm.add_event("Secs_60", 60)
    fsm.add_event("Secs_90", 90)
    very_long_time = fsm.add_event("Secs_600", 600)

    (
        fsm.get_state_by_name("Red")
        .add_transition(fsm.get_event_by_name("NoCar"), green)
        .add_transition(fsm.get_event_by_name("Secs_60"), green)
        .add_transition(fsm.get_event_by_name("Secs_600"), damaged)
    )

    yellow.add_transition(fsm.get_event_by_id(10), fsm.get_state_by_name("Red"))
    yellow.add_transition(fsm.get_event_by_name("Secs_60"), fsm.get_state_by_id(-1))
    yellow.add_transition(very_long_time, damaged)

    fsm.add_state_transition_by_name("Green", "Secs_90", "Yellow")
    fsm.add_state_transition(green, very_long_time, damaged)
    return fsm


@pytest.fixture
def handler():
    """A handler spy for notification tests."""
    return MagicMock()
