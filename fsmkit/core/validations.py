# fsmkit/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, List, Set

from fsmkit.core.errors import ValidationError

if TYPE_CHECKING:
    from fsmkit.core.machine import FiniteStateMachine


class Validator:
    """
    Checks a machine's registries and transition tables for structural problems
    that the mutating operations cannot rule out on their own.
    """

    def __init__(self) -> None:
        self._rules = _DefaultValidationRules

    def collect_errors(self, machine: "FiniteStateMachine") -> List[str]:
        """
        Run every rule against the machine.

        :param machine: The machine to check.
        :return: One message per problem found.
        """
        errors: List[str] = []
        errors.extend(self._rules.check_initial_state(machine))
        errors.extend(self._rules.check_registered_members(machine))
        errors.extend(self._rules.check_reachability(machine))
        errors.extend(self._rules.check_non_deterministic(machine))
        return errors

    def validate_state_machine(self, machine: "FiniteStateMachine") -> None:
        """
        :raises ValidationError: If any rule fails, with every message joined.
        """
        errors = self.collect_errors(machine)
        if errors:
            raise ValidationError("\n".join(errors))


class _DefaultValidationRules:
    """
    Built-in rules. Each returns a list of messages.
    """

    @staticmethod
    def check_initial_state(machine: "FiniteStateMachine") -> List[str]:
        if machine.states and machine.get_initial_state() is None:
            return [f"Machine '{machine.name}' has states but no initial state for its default region"]
        return []

    @staticmethod
    def check_registered_members(machine: "FiniteStateMachine") -> List[str]:
        """Edges added directly on a State can point outside the machine."""
        errors = []
        for state in machine.states.values():
            for transition in state.transitions:
                if machine.get_event(transition.event.event_id, transition.event.event_name) is None:
                    errors.append(f"Transition of {state} uses unregistered event {transition.event}")
                target = transition.target
                if machine.get_state(target.state_id, target.state_name) is None:
                    errors.append(f"Transition of {state} on {transition.event} targets unregistered state {target}")
        return errors

    @staticmethod
    def check_reachability(machine: "FiniteStateMachine") -> List[str]:
        roots = list(machine.initial_states.values())
        if not roots:
            return []

        seen: Set[int] = set()
        pending = list(roots)
        while pending:
            state = pending.pop()
            if state.state_id in seen:
                continue
            seen.add(state.state_id)
            pending.extend(t.target for t in state.transitions)

        return [
            f"State {state} is unreachable from any initial state"
            for state_id, state in machine.states.items()
            if state_id not in seen
        ]

    @staticmethod
    def check_non_deterministic(machine: "FiniteStateMachine") -> List[str]:
        """Tokens on or moving into these states cannot advance without a resolver."""
        return [
            f"State {state} is non-deterministic and needs a resolver to advance tokens"
            for state in machine.states.values()
            if not state.is_deterministic()
        ]
