# fsmkit/core/outputs.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Output functions attached to transitions.

An output is a side effect executed when a token traverses an edge. The caller
chooses the call shape when attaching it:

- ``NoArgEffect``: ``fn()``
- ``StateEffect``: ``fn(state)`` (Moore style, sees the state being left)
- ``StateEventEffect``: ``fn(state, event)`` (Mealy style, also sees the input)

All variants are invoked the same way by the engine, ``output(state, event)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from fsmkit.core.events import Event
    from fsmkit.core.states import State


@dataclass(frozen=True)
class NoArgEffect:
    """Plain side effect that takes no arguments."""

    fn: Callable[[], Any]

    def __call__(self, state: "State", event: "Event") -> None:
        self.fn()


@dataclass(frozen=True)
class StateEffect:
    """Moore-style output receiving the current state."""

    fn: Callable[["State"], Any]

    def __call__(self, state: "State", event: "Event") -> None:
        self.fn(state)


@dataclass(frozen=True)
class StateEventEffect:
    """Mealy-style output receiving the current state and the triggering event."""

    fn: Callable[["State", "Event"], Any]

    def __call__(self, state: "State", event: "Event") -> None:
        self.fn(state, event)


OutputFunction = Union[NoArgEffect, StateEffect, StateEventEffect]

OUTPUT_TYPES = (NoArgEffect, StateEffect, StateEventEffect)


def validate_output(output: Any) -> None:
    """
    Ensure an output is one of the tagged variants.

    :param output: The object to check; None is accepted.
    :raises TypeError: If a bare callable or any other object is given.
    """
    if output is None or isinstance(output, OUTPUT_TYPES):
        return
    raise TypeError(
        f"Output must be NoArgEffect, StateEffect or StateEventEffect, not {type(output).__name__}"
    )
