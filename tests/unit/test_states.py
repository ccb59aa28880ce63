# tests/unit/test_states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from fsmkit.core.errors import (
    FinalStateMutationError,
    IncompleteTransitionInputError,
    TransitionConflictError,
    UnknownTransitionError,
)
from fsmkit.core.events import Event
from fsmkit.core.outputs import NoArgEffect, StateEffect, StateEventEffect
from fsmkit.core.states import State


@pytest.fixture
def red():
    return State("light", 0, "Red")


@pytest.fixture
def green():
    return State("light", 1, "Green")


@pytest.fixture
def broken():
    return State("light", -1, "Broken", final=True)


@pytest.fixture
def go():
    return Event(0, "Go")


def test_state_properties(red, broken):
    assert red.fsm_name == "light"
    assert red.state_id == 0
    assert red.state_name == "Red"
    assert red.final is False
    assert broken.final is True
    assert red.is_deterministic()
    assert not red.is_initial_state()
    assert red.initial_region_name is None


def test_state_equals_other_representations(red):
    assert red.equals(red)
    assert red.equals(red.state_id)
    assert red.equals(red.state_name)
    assert red.equals(State("other", 0, "Red"))
    assert not red.equals(State("light", 0, "Blue"))
    assert not red.equals(1)
    assert not red.equals(None)
    assert not red.equals()


def test_mark_initial_is_idempotent(red):
    assert red.mark_initial("light") is red
    red.mark_initial("light")
    assert red.is_initial_state()
    assert red.initial_region_name == "light"
    red.unmark_initial()
    red.unmark_initial()
    assert not red.is_initial_state()


def test_determinism_toggle(red):
    assert red.mark_non_deterministic() is red
    assert not red.is_deterministic()
    red.mark_deterministic()
    assert red.is_deterministic()


def test_add_transition_chains(red, green, go):
    stop = Event(1, "Stop")
    assert red.add_transition(go, green).add_transition(stop, red) is red
    assert red.next_state(go) is green
    assert red.next_state(stop) is red
    assert red.transition_table_size == 2


def test_add_identical_transition_is_noop(red, green, go):
    red.add_transition(go, green)
    red.add_transition(go, green)
    assert red.transition_table_size == 1


def test_add_conflicting_transition_fails(red, green, go):
    red.add_transition(go, green)
    with pytest.raises(TransitionConflictError):
        red.add_transition(go, red)
    assert red.next_state(go) is green


def test_add_transition_incomplete_input(red, green, go):
    with pytest.raises(IncompleteTransitionInputError):
        red.add_transition(None, green)
    with pytest.raises(IncompleteTransitionInputError):
        red.add_transition(go, None)


def test_add_transition_rejects_bare_callable_output(red, green, go):
    with pytest.raises(TypeError):
        red.add_transition(go, green, lambda: None)
    assert red.transition_table_size == 0


def test_final_state_rejects_mutation(broken, red, go):
    with pytest.raises(FinalStateMutationError):
        broken.add_transition(go, red)
    with pytest.raises(FinalStateMutationError):
        broken.add_transition(None, None)
    with pytest.raises(FinalStateMutationError):
        broken.remove_transition(go)
    assert broken.transition_table_size == 0
    assert broken.next_state(go) is None


def test_remove_transition(red, green, go):
    output = NoArgEffect(MagicMock())
    red.add_transition(go, green, output)
    assert red.remove_transition(go) is red
    assert red.next_state(go) is None
    assert red.next_output(go) is None


def test_remove_transition_errors(red, go):
    with pytest.raises(IncompleteTransitionInputError):
        red.remove_transition(None)
    with pytest.raises(UnknownTransitionError):
        red.remove_transition(go)


def test_lookup_requires_matching_event_identity(red, green, go):
    red.add_transition(go, green)
    assert red.next_state(Event(0, "Other")) is None
    assert red.next_state(Event(0, "Go")) is green
    assert red.next_state(None) is None


def test_is_final_state_for_empty_table(red, green, go):
    assert red.is_final_state()
    red.add_transition(go, green)
    assert not red.is_final_state()
    assert not red.final


def test_existence_predicates(red, green, go):
    red.add_transition(go, green)
    assert red.is_transition_valid(go)
    assert red.has_next_state_on_event(go, green)
    assert red.has_next_state_on_event(go, "Green")
    assert not red.has_next_state_on_event(go, red)
    assert not red.has_next_state_on_event(go, None)
    assert red.has_next_transition(green)
    assert red.has_next_transition(1)
    assert not red.has_next_transition(red)
    assert not green.has_next_transition(red)


def test_execute_output_variants(red, green, go):
    plain, moore, mealy = MagicMock(), MagicMock(), MagicMock()
    stop, pause = Event(1, "Stop"), Event(2, "Pause")
    red.add_transition(go, green, NoArgEffect(plain))
    red.add_transition(stop, green, StateEffect(moore))
    red.add_transition(pause, green, StateEventEffect(mealy))

    red.execute_output(go)
    red.execute_output(stop)
    red.execute_output(pause)

    plain.assert_called_once_with()
    moore.assert_called_once_with(red)
    mealy.assert_called_once_with(red, pause)


def test_execute_output_without_output_is_noop(red, green, go):
    red.add_transition(go, green)
    red.execute_output(go)
    red.execute_output(Event(9, "Unknown"))


def test_state_table_string(red, green, go, broken):
    stop = Event(1, "Stop")
    red.add_transition(go, green).add_transition(stop, broken)
    assert red.get_state_table_string("\t") == (
        "Red(0) ---[ Go(0) ]--> Green(1:FS)\n" "\tRed(0) ---[ Stop(1) ]--> Broken(-1:FS)\n"
    )
    assert broken.get_state_table_string() == "Broken(-1:FS) ---[X]\n"


def test_state_string_form(red):
    red.mark_initial("light")
    assert str(red) == "Red(0:IS@light:FS)"
    red.add_transition(Event(0, "Go"), red)
    assert str(red) == "Red(0:IS@light)"


def test_transitions_copy(red, green, go):
    red.add_transition(go, green)
    transitions = red.transitions
    assert len(transitions) == 1
    assert transitions[0].event is go
    assert transitions[0].target is green
    transitions.clear()
    assert red.transition_table_size == 1
