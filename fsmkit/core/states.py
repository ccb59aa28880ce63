# fsmkit/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from fsmkit.core.errors import (
    FinalStateMutationError,
    IncompleteTransitionInputError,
    TransitionConflictError,
    UnknownTransitionError,
)
from fsmkit.core.events import Event
from fsmkit.core.outputs import OutputFunction, validate_output


@dataclass(frozen=True)
class Transition:
    """
    An outbound edge of a state: the triggering event, the target state and the
    optional output executed when the edge is traversed.
    """

    event: Event
    target: "State"
    output: Optional[OutputFunction] = None

    def __str__(self) -> str:
        return f"---[ {self.event} ]--> {self.target}"


class State:
    """
    A named state owning its outbound transition table and output table.

    Both tables are keyed by the stable event id. A final state never allocates
    its tables, so it can never gain an outbound transition.
    """

    def __init__(
        self,
        fsm_name: str,
        state_id: int,
        state_name: str,
        final: bool = False,
        deterministic: bool = True,
    ) -> None:
        """
        :param fsm_name: Name of the owning machine.
        :param state_id: Numeric id, unique within the owning machine.
        :param state_name: Human readable name.
        :param final: Whether this is a final state. Fixed for the life of the state.
        :param deterministic: Whether outbound transitions are resolved statically.
        :raises ValueError: If the id is not an integer or the name is empty.
        """
        if isinstance(state_id, bool) or not isinstance(state_id, int):
            raise ValueError("State ID must be an integer")
        if not state_name or not isinstance(state_name, str):
            raise ValueError("State name must be a non-empty string")

        self._fsm_name = fsm_name
        self._state_id = state_id
        self._state_name = state_name
        self._final = final
        self._deterministic = deterministic
        self._initial_region_name: Optional[str] = None
        self._transition_table: Optional[Dict[int, Transition]] = None if final else {}

    @property
    def fsm_name(self) -> str:
        return self._fsm_name

    @property
    def state_id(self) -> int:
        return self._state_id

    @property
    def state_name(self) -> str:
        return self._state_name

    @property
    def final(self) -> bool:
        """True only if the state was constructed as a final state."""
        return self._final

    @property
    def initial_region_name(self) -> Optional[str]:
        return self._initial_region_name

    def equals(self, other: Any = None) -> bool:
        """
        Compare against another State, a bare id or a bare name.

        :param other: A State, an int id or a str name.
        :return: True if the matching field(s) are equal, otherwise False.
        """
        if isinstance(other, State):
            return self._state_id == other._state_id and self._state_name == other._state_name
        if isinstance(other, bool):
            return False
        if isinstance(other, int):
            return self._state_id == other
        if isinstance(other, str):
            return self._state_name == other
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._state_id, self._state_name))

    def mark_initial(self, region_name: str) -> "State":
        """Tag this state as the initial state of a region."""
        self._initial_region_name = region_name
        return self

    def unmark_initial(self) -> "State":
        self._initial_region_name = None
        return self

    def is_initial_state(self) -> bool:
        return bool(self._initial_region_name)

    def mark_deterministic(self) -> "State":
        self._deterministic = True
        return self

    def mark_non_deterministic(self) -> "State":
        self._deterministic = False
        return self

    def is_deterministic(self) -> bool:
        return self._deterministic

    def is_final_state(self) -> bool:
        """
        True if the state was built final or has no outbound transitions. A state
        with an empty table is a dead end and is reported as final.
        """
        return self._final or not self._transition_table

    def add_transition(
        self, event: Optional[Event], next_state: Optional["State"], output: Optional[OutputFunction] = None
    ) -> "State":
        """
        Add an outbound transition on an event.

        Re-adding the same event with the same target is a no-op.

        :param event: The triggering event.
        :param next_state: The target state.
        :param output: Optional output executed when the edge is traversed.
        :return: This state, to allow chaining.
        :raises FinalStateMutationError: If this state is final.
        :raises IncompleteTransitionInputError: If event or next_state is missing.
        :raises TransitionConflictError: If the event already leads to another state.
        """
        if self._final or self._transition_table is None:
            raise FinalStateMutationError(f"Cannot add transition to final state: {self}")
        if event is None:
            raise IncompleteTransitionInputError("Cannot add transition for an invalid event")
        if next_state is None:
            raise IncompleteTransitionInputError("Cannot add transition for an invalid next state")
        validate_output(output)

        current = self._lookup(event)
        if current is not None:
            if current.target.equals(next_state):
                return self
            raise TransitionConflictError(
                f"Cannot add multiple transitions for an event: {self} ---[ {event} ]--> {next_state}, "
                f"already leads to {current.target}"
            )

        self._transition_table[event.event_id] = Transition(event, next_state, output)
        return self

    def remove_transition(self, event: Optional[Event]) -> "State":
        """
        Remove the outbound transition for an event, together with its output.

        :raises FinalStateMutationError: If this state is final.
        :raises IncompleteTransitionInputError: If event is missing.
        :raises UnknownTransitionError: If no transition exists for the event.
        """
        if self._final or self._transition_table is None:
            raise FinalStateMutationError(f"Cannot remove transition from final state: {self}")
        if event is None:
            raise IncompleteTransitionInputError("Cannot remove transition for an invalid event")
        if self._lookup(event) is None:
            raise UnknownTransitionError(f"Cannot remove non-existent transition for event: {event}")

        del self._transition_table[event.event_id]
        return self

    def _lookup(self, event: Optional[Event]) -> Optional[Transition]:
        if self._final or not self._transition_table or event is None:
            return None
        transition = self._transition_table.get(event.event_id)
        if transition is None or not transition.event.equals(event):
            return None
        return transition

    def get_transition(self, event: Optional[Event]) -> Optional[Transition]:
        """Return the edge record for an event, or None."""
        return self._lookup(event)

    def next_state(self, event: Optional[Event]) -> Optional["State"]:
        transition = self._lookup(event)
        return transition.target if transition else None

    def next_output(self, event: Optional[Event]) -> Optional[OutputFunction]:
        transition = self._lookup(event)
        return transition.output if transition else None

    def is_transition_valid(self, event: Optional[Event]) -> bool:
        return self.next_state(event) is not None

    def has_next_state_on_event(self, event: Optional[Event], candidate: Any) -> bool:
        """True if ``event`` leads to ``candidate`` (a State, id or name)."""
        target = self.next_state(event)
        if target is None or candidate is None:
            return False
        return target.equals(candidate)

    def has_next_transition(self, candidate: Any) -> bool:
        """True if any outbound transition leads to ``candidate``."""
        if not self._transition_table or candidate is None:
            return False
        return any(t.target.equals(candidate) for t in self._transition_table.values())

    def execute_output(self, event: Optional[Event]) -> None:
        """Run the output attached to the transition on ``event``, if any."""
        output = self.next_output(event)
        if output is None:
            return
        output(self, event)

    @property
    def transition_table_size(self) -> int:
        return len(self._transition_table) if self._transition_table else 0

    @property
    def transitions(self) -> List[Transition]:
        """A copy of the outbound edges in insertion order."""
        return list(self._transition_table.values()) if self._transition_table else []

    def get_state_table_string(self, separator: str = "") -> str:
        """
        Render the outbound transitions, one line per edge.

        :param separator: Prefix for every line after the first.
        """
        if self.is_final_state():
            return f"{self} ---[X]\n"

        lines = [f"{self} {transition}\n" for transition in self._transition_table.values()]
        return lines[0] + "".join(separator + line for line in lines[1:])

    def __repr__(self) -> str:
        return f"State({self._fsm_name!r}, {self._state_id!r}, {self._state_name!r}, final={self._final!r})"

    def __str__(self) -> str:
        initial_info = f":IS@{self._initial_region_name}" if self.is_initial_state() else ""
        final_info = ":FS" if self.is_final_state() else ""
        return f"{self._state_name}({self._state_id}{initial_info}{final_info})"
