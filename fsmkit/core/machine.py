# fsmkit/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from fsmkit.core.errors import (
    DuplicateIdentityError,
    EventNotFoundError,
    FSMError,
    IncompleteTransitionInputError,
    InitialStateMissingError,
    InvalidStateChangeError,
    NonDeterministicResolverMissingError,
    SelfTransitionDisallowedError,
    StateNotFoundError,
    TokenNotFoundError,
    TransitionError,
)
from fsmkit.core.events import Event
from fsmkit.core.notifications import (
    NotificationChannel,
    StructuralNotification,
    StructuralTopic,
    TokenNotification,
    TokenTopic,
)
from fsmkit.core.outputs import OutputFunction
from fsmkit.core.states import State
from fsmkit.core.validations import Validator

logger = logging.getLogger(__name__)

Resolver = Callable[[str, State, Event], Optional[State]]


class FiniteStateMachine:
    """
    Owns the state and event registries, the initial state of every region and
    the current state of every token instance. All structural changes and token
    moves are published on the machine's notification channel.
    """

    def __init__(
        self,
        name: str,
        allow_self_transition: bool = True,
        auto_initial_state: bool = True,
        channel: Optional[NotificationChannel] = None,
    ) -> None:
        """
        :param name: Machine name, also the name of its default region.
        :param allow_self_transition: Whether a state may transition to itself.
        :param auto_initial_state: Whether the first state added becomes the
            initial state of the default region.
        :param channel: Notification channel to publish on; a private one is created if omitted.
        :raises ValueError: If the name is empty.
        """
        if not name or not isinstance(name, str):
            raise ValueError("Machine name must be a non-empty string")

        self._name = name
        self._allow_self_transition = allow_self_transition
        self._auto_initial_state = auto_initial_state
        self._channel = channel if channel is not None else NotificationChannel()
        self._states: Dict[int, State] = {}
        self._events: Dict[int, Event] = {}
        self._initial_states: Dict[str, State] = {}
        self._token_instances: Dict[str, State] = {}
        self._next_state_id = 0
        self._next_event_id = 0

    @classmethod
    def create(cls, name: str, **kwargs) -> "FiniteStateMachine":
        """Create a new, empty machine."""
        return cls(name, **kwargs)

    @property
    def name(self) -> str:
        return self._name

    @property
    def channel(self) -> NotificationChannel:
        return self._channel

    @property
    def allow_self_transition(self) -> bool:
        return self._allow_self_transition

    @allow_self_transition.setter
    def allow_self_transition(self, allow: bool) -> None:
        self._allow_self_transition = allow

    @property
    def auto_initial_state(self) -> bool:
        return self._auto_initial_state

    @auto_initial_state.setter
    def auto_initial_state(self, enabled: bool) -> None:
        self._auto_initial_state = enabled

    @property
    def states(self) -> Dict[int, State]:
        """A copy of the state registry keyed by state id."""
        return dict(self._states)

    @property
    def events(self) -> Dict[int, Event]:
        """A copy of the event registry keyed by event id."""
        return dict(self._events)

    @property
    def initial_states(self) -> Dict[str, State]:
        """A copy of the region name to initial state mapping."""
        return dict(self._initial_states)

    @property
    def token_instances(self) -> Dict[str, State]:
        """A copy of the token id to current state mapping."""
        return dict(self._token_instances)

    def clear_all(self) -> None:
        """Drop every state, event, initial state and token instance."""
        self._states.clear()
        self._events.clear()
        self._initial_states.clear()
        self._token_instances.clear()
        self._next_state_id = 0
        self._next_event_id = 0
        logger.debug("Cleared machine %s", self._name)
        self._publish(StructuralTopic.CLEARED)

    def is_empty(self) -> bool:
        return not self._states and not self._events and not self._initial_states

    # ------------------------------------------------------------------
    # Registries
    # ------------------------------------------------------------------

    def add_state(self, state_name: str, state_id: Optional[int] = None) -> State:
        """
        Register a new state.

        :param state_name: Name of the state.
        :param state_id: Optional id; the next free id is used if omitted.
        :return: The new state.
        :raises DuplicateIdentityError: If the id is already registered.
        """
        return self._register_state(state_name, state_id, final=False)

    def add_final_state(self, state_name: str, state_id: Optional[int] = None) -> State:
        """
        Register a new final state. Final states never have outbound transitions.

        :raises DuplicateIdentityError: If the id is already registered.
        """
        return self._register_state(state_name, state_id, final=True)

    def _register_state(self, state_name: str, state_id: Optional[int], final: bool) -> State:
        if state_id is None:
            state_id = self._next_state_id
        state = State(self._name, state_id, state_name, final=final)
        if state_id in self._states:
            raise DuplicateIdentityError(f"Duplicate state: {state}[{self._name}]")

        self._states[state_id] = state
        self._next_state_id = max(self._next_state_id, state_id + 1)
        logger.debug("Added %s %s to %s", "final state" if final else "state", state, self._name)
        topic = StructuralTopic.FINAL_STATE_ADDED if final else StructuralTopic.STATE_ADDED
        self._publish(topic, state=state)

        if self._auto_initial_state and self._name not in self._initial_states:
            self.set_initial_state(state)
        return state

    def add_event(self, event_name: str, event_id: Optional[int] = None) -> Event:
        """
        Register a new event.

        :param event_name: Name of the event.
        :param event_id: Optional id; the next free id is used if omitted.
        :return: The new event.
        :raises DuplicateIdentityError: If the id is already registered.
        """
        if event_id is None:
            event_id = self._next_event_id
        event = Event(event_id, event_name)
        if event_id in self._events:
            raise DuplicateIdentityError(f"Duplicate event: {event}[{self._name}]")

        self._events[event_id] = event
        self._next_event_id = max(self._next_event_id, event_id + 1)
        logger.debug("Added event %s to %s", event, self._name)
        self._publish(StructuralTopic.EVENT_ADDED, event=event)
        return event

    def get_state(self, state_id: int, state_name: str) -> Optional[State]:
        """Return the state matching both id and name, or None."""
        state = self.get_state_by_id(state_id)
        if state is None or state.state_name != state_name:
            return None
        return state

    def get_state_by_id(self, state_id: int) -> Optional[State]:
        if isinstance(state_id, bool) or not isinstance(state_id, int):
            return None
        return self._states.get(state_id)

    def get_state_by_name(self, state_name: str) -> Optional[State]:
        for state in self._states.values():
            if state.state_name == state_name:
                return state
        return None

    def get_event(self, event_id: int, event_name: str) -> Optional[Event]:
        """Return the event matching both id and name, or None."""
        event = self.get_event_by_id(event_id)
        if event is None or event.event_name != event_name:
            return None
        return event

    def get_event_by_id(self, event_id: int) -> Optional[Event]:
        if isinstance(event_id, bool) or not isinstance(event_id, int):
            return None
        return self._events.get(event_id)

    def get_event_by_name(self, event_name: str) -> Optional[Event]:
        for event in self._events.values():
            if event.event_name == event_name:
                return event
        return None

    def _resolve_state(self, state: Optional[State]) -> Optional[State]:
        """Map a State object to the registered state with the same identity."""
        if not isinstance(state, State):
            return None
        return self.get_state(state.state_id, state.state_name)

    def _resolve_event(self, event: Optional[Event]) -> Optional[Event]:
        if not isinstance(event, Event):
            return None
        return self.get_event(event.event_id, event.event_name)

    # ------------------------------------------------------------------
    # Initial states
    # ------------------------------------------------------------------

    def get_initial_state(self, region_name: Optional[str] = None) -> Optional[State]:
        """Return the initial state of a region, the machine's own region by default."""
        return self._initial_states.get(region_name or self._name)

    def set_initial_state(self, state: State, region_name: Optional[str] = None) -> State:
        """
        Make a registered state the initial state of a region, replacing the
        current holder of that region. A holder that has since been re-tagged for
        another region keeps its mark.

        :param state: The new initial state.
        :param region_name: Region name, the machine's own name by default.
        :return: The registered state now marked initial.
        :raises StateNotFoundError: If the state is not registered.
        """
        region_name = region_name or self._name
        target = self._resolve_state(state)
        if target is None:
            raise StateNotFoundError(f"Cannot set initial state, {state} is not registered in {self._name}")

        current = self._initial_states.get(region_name)
        if current is target and target.initial_region_name == region_name:
            return target
        if current is not None and current.initial_region_name == region_name:
            current.unmark_initial()
            self._publish(StructuralTopic.INITIAL_STATE_REMOVED, state=current, region=region_name)

        self._initial_states[region_name] = target.mark_initial(region_name)
        logger.debug("Initial state of region %s is now %s", region_name, target)
        self._publish(StructuralTopic.INITIAL_STATE_ADDED, state=target, region=region_name)
        return target

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def add_state_transition(
        self,
        state: Optional[State],
        event: Optional[Event],
        next_state: Optional[State],
        output: Optional[OutputFunction] = None,
    ) -> State:
        """
        Add a transition between two registered states.

        :param state: Source state.
        :param event: Triggering event.
        :param next_state: Target state.
        :param output: Optional output executed when the transition is taken.
        :return: The source state.
        :raises IncompleteTransitionInputError: If an argument is not registered.
        :raises SelfTransitionDisallowedError: If source equals target and self transitions are off.
        :raises TransitionError: For final-state and conflict failures raised by the state.
        """
        source = self._resolve_state(state)
        trigger = self._resolve_event(event)
        target = self._resolve_state(next_state)
        if source is None or trigger is None or target is None:
            raise IncompleteTransitionInputError(
                f"Cannot create state transition on incomplete input: {state}, {event}, {next_state}"
            )
        if not self._allow_self_transition and source.equals(target):
            raise SelfTransitionDisallowedError(f"Self transition disabled for {source}[{self._name}]")

        is_new = source.get_transition(trigger) is None
        source.add_transition(trigger, target, output)
        if is_new:
            logger.debug("Added transition %s ---[ %s ]--> %s", source, trigger, target)
            self._publish(StructuralTopic.TRANSITION_ADDED, state=source, event=trigger, next_state=target)
        return source

    def add_state_transition_by_id(
        self, state_id: int, event_id: int, next_state_id: int, output: Optional[OutputFunction] = None
    ) -> State:
        return self.add_state_transition(
            self.get_state_by_id(state_id), self.get_event_by_id(event_id), self.get_state_by_id(next_state_id), output
        )

    def add_state_transition_by_name(
        self, state_name: str, event_name: str, next_state_name: str, output: Optional[OutputFunction] = None
    ) -> State:
        return self.add_state_transition(
            self.get_state_by_name(state_name),
            self.get_event_by_name(event_name),
            self.get_state_by_name(next_state_name),
            output,
        )

    def add_state_transition_for_all_states(
        self, event: Optional[Event], next_state: Optional[State], output: Optional[OutputFunction] = None
    ) -> None:
        """
        Add the same transition to every non-final state. A state with no
        transitions yet counts as final and is skipped. States that reject the
        transition (a conflicting edge, a forbidden self transition) are skipped too.

        :raises IncompleteTransitionInputError: If the event or target is not registered.
        """
        trigger = self._resolve_event(event)
        target = self._resolve_state(next_state)
        if trigger is None or target is None:
            raise IncompleteTransitionInputError(
                f"Cannot create state transition on incomplete input: {event}, {next_state}"
            )

        for state in list(self._states.values()):
            if state.is_final_state():
                continue
            try:
                self.add_state_transition(state, trigger, target, output)
            except TransitionError as e:
                logger.debug("Skipped %s while adding %s for all states: %s", state, trigger, e)

    def add_state_transition_for_all_states_by_id(
        self, event_id: int, next_state_id: int, output: Optional[OutputFunction] = None
    ) -> None:
        self.add_state_transition_for_all_states(
            self.get_event_by_id(event_id), self.get_state_by_id(next_state_id), output
        )

    def add_state_transition_for_all_states_by_name(
        self, event_name: str, next_state_name: str, output: Optional[OutputFunction] = None
    ) -> None:
        self.add_state_transition_for_all_states(
            self.get_event_by_name(event_name), self.get_state_by_name(next_state_name), output
        )

    def remove_state_transition(self, state: Optional[State], event: Optional[Event]) -> State:
        """
        Remove the transition of a registered state on an event.

        :raises IncompleteTransitionInputError: If an argument is not registered.
        :raises FinalStateMutationError: If the state is final.
        :raises UnknownTransitionError: If the state has no transition on the event.
        """
        source = self._resolve_state(state)
        trigger = self._resolve_event(event)
        if source is None or trigger is None:
            raise IncompleteTransitionInputError(
                f"Cannot remove state transition on incomplete input: {state}, {event}"
            )

        target = source.next_state(trigger)
        source.remove_transition(trigger)
        logger.debug("Removed transition %s ---[ %s ]--> %s", source, trigger, target)
        self._publish(StructuralTopic.TRANSITION_REMOVED, state=source, event=trigger, next_state=target)
        return source

    def remove_state_transition_by_id(self, state_id: int, event_id: int) -> State:
        return self.remove_state_transition(self.get_state_by_id(state_id), self.get_event_by_id(event_id))

    def remove_state_transition_by_name(self, state_name: str, event_name: str) -> State:
        return self.remove_state_transition(self.get_state_by_name(state_name), self.get_event_by_name(event_name))

    def remove_state_transition_for_all_states(self, event: Optional[Event]) -> None:
        """
        Remove the transition on an event from every non-final state that has one.

        :raises IncompleteTransitionInputError: If the event is not registered.
        """
        trigger = self._resolve_event(event)
        if trigger is None:
            raise IncompleteTransitionInputError(f"Cannot remove state transition on incomplete input: {event}")

        for state in list(self._states.values()):
            if state.is_final_state():
                continue
            try:
                self.remove_state_transition(state, trigger)
            except TransitionError as e:
                logger.debug("Skipped %s while removing %s for all states: %s", state, trigger, e)

    def remove_state_transition_for_all_states_by_id(self, event_id: int) -> None:
        self.remove_state_transition_for_all_states(self.get_event_by_id(event_id))

    def remove_state_transition_for_all_states_by_name(self, event_name: str) -> None:
        self.remove_state_transition_for_all_states(self.get_event_by_name(event_name))

    def next_state(self, state: Optional[State], event: Optional[Event]) -> Optional[State]:
        """Return the target of the transition of ``state`` on ``event``, or None."""
        source = self._resolve_state(state)
        trigger = self._resolve_event(event)
        if source is None or trigger is None:
            return None
        return source.next_state(trigger)

    def next_state_by_id(self, state_id: int, event_id: int) -> Optional[State]:
        return self.next_state(self.get_state_by_id(state_id), self.get_event_by_id(event_id))

    def next_state_by_name(self, state_name: str, event_name: str) -> Optional[State]:
        return self.next_state(self.get_state_by_name(state_name), self.get_event_by_name(event_name))

    def is_transition_valid(
        self, state: Optional[State], event: Optional[Event], next_state: Optional[State]
    ) -> bool:
        """True if ``state`` transitions to ``next_state`` on ``event``."""
        source = self._resolve_state(state)
        trigger = self._resolve_event(event)
        target = self._resolve_state(next_state)
        if source is None or trigger is None or target is None:
            return False
        return source.has_next_state_on_event(trigger, target)

    def is_transition_valid_by_id(self, state_id: int, event_id: int, next_state_id: int) -> bool:
        return self.is_transition_valid(
            self.get_state_by_id(state_id), self.get_event_by_id(event_id), self.get_state_by_id(next_state_id)
        )

    def is_transition_valid_by_name(self, state_name: str, event_name: str, next_state_name: str) -> bool:
        return self.is_transition_valid(
            self.get_state_by_name(state_name),
            self.get_event_by_name(event_name),
            self.get_state_by_name(next_state_name),
        )

    def is_transition_valid_by_event(self, state: Optional[State], event: Optional[Event]) -> bool:
        """True if ``state`` has any transition on ``event``."""
        source = self._resolve_state(state)
        trigger = self._resolve_event(event)
        if source is None or trigger is None:
            return False
        return source.is_transition_valid(trigger)

    def is_transition_valid_by_event_id(self, state_id: int, event_id: int) -> bool:
        return self.is_transition_valid_by_event(self.get_state_by_id(state_id), self.get_event_by_id(event_id))

    def is_transition_valid_by_event_name(self, state_name: str, event_name: str) -> bool:
        return self.is_transition_valid_by_event(
            self.get_state_by_name(state_name), self.get_event_by_name(event_name)
        )

    # ------------------------------------------------------------------
    # Token instances
    # ------------------------------------------------------------------

    @staticmethod
    def _check_token_id(token_id: str) -> None:
        if not isinstance(token_id, str) or not token_id.strip():
            raise ValueError("Token ID must be a non-blank string")

    def has_token_instance(self, token_id: str) -> bool:
        return token_id in self._token_instances

    def create_token_instance(self, token_id: str, region_name: Optional[str] = None) -> State:
        """
        Place a new token on the initial state of a region.

        :param token_id: Non-blank token id.
        :param region_name: Region whose initial state is used, the machine's own by default.
        :return: The token's current state.
        :raises ValueError: If the token id is blank.
        :raises DuplicateIdentityError: If the token already exists.
        :raises InitialStateMissingError: If the region has no initial state.
        """
        self._check_token_id(token_id)
        if token_id in self._token_instances:
            raise DuplicateIdentityError(f"Duplicate token instance: {token_id}[{self._name}]")

        initial = self._initial_for_token(token_id, region_name)
        self._bind_new_token(token_id, initial)
        return initial

    def _initial_for_token(self, token_id: str, region_name: Optional[str]) -> State:
        region_name = region_name or self._name
        initial = self._initial_states.get(region_name)
        if initial is None:
            raise self._token_failure(
                TokenTopic.STATE_NOT_FOUND,
                InitialStateMissingError(f"No initial state for region {region_name}[{self._name}]"),
                token_id,
            )
        return initial

    def _bind_new_token(self, token_id: str, initial: State) -> None:
        self._token_instances[token_id] = initial
        logger.debug("Created token %s at %s", token_id, initial)
        self._publish_token(TokenTopic.CREATED, token_id, state=initial)

    def get_token_instance(
        self, token_id: str, auto_create: bool = True, region_name: Optional[str] = None
    ) -> State:
        """
        Return the current state of a token, creating the token if allowed.

        :param token_id: Non-blank token id.
        :param auto_create: Create the token on the region's initial state if missing.
        :param region_name: Region used when creating the token.
        :raises TokenNotFoundError: If the token is missing and auto_create is False.
        """
        self._check_token_id(token_id)
        state = self._token_instances.get(token_id)
        if state is not None:
            return state
        if auto_create:
            return self.create_token_instance(token_id, region_name)
        raise self._token_failure(
            TokenTopic.TOKEN_NOT_FOUND,
            TokenNotFoundError(f"Token instance not found: {token_id}[{self._name}]"),
            token_id,
        )

    def update_token_to_next_state(
        self, token_id: str, event: Optional[Event], resolver: Optional[Resolver] = None
    ) -> State:
        """
        Move a token along the transition of its current state on ``event``.

        When the current state or the target is non-deterministic, the target in
        the table is only tentative and ``resolver(token_id, current, event)``
        chooses the actual next state. The token does not move if any step fails.

        :param token_id: Token to move; a missing token starts on the default initial
            state and is created only if the move succeeds.
        :param event: Registered triggering event.
        :param resolver: Chooses the next state of non-deterministic transitions.
        :return: The token's new current state.
        :raises EventNotFoundError: If the event is not registered.
        :raises NonDeterministicResolverMissingError: If resolution is needed and no resolver is given.
        :raises StateNotFoundError: If the resolver returns an unregistered state.
        :raises InvalidStateChangeError: If there is no next state.
        """
        return self._advance(token_id, self._resolve_event(event), event, resolver)

    def update_token_to_next_state_by_event_id(
        self, token_id: str, event_id: int, resolver: Optional[Resolver] = None
    ) -> State:
        return self._advance(token_id, self.get_event_by_id(event_id), event_id, resolver)

    def update_token_to_next_state_by_event_name(
        self, token_id: str, event_name: str, resolver: Optional[Resolver] = None
    ) -> State:
        return self._advance(token_id, self.get_event_by_name(event_name), event_name, resolver)

    def _advance(
        self, token_id: str, trigger: Optional[Event], requested: object, resolver: Optional[Resolver]
    ) -> State:
        # A missing token is only bound once the move commits.
        self._check_token_id(token_id)
        current = self._token_instances.get(token_id)
        is_new = current is None
        if is_new:
            current = self._initial_for_token(token_id, None)
        if trigger is None:
            raise self._token_failure(
                TokenTopic.EVENT_NOT_FOUND,
                EventNotFoundError(f"Event {requested} is not registered in {self._name}"),
                token_id,
                state=current,
            )

        tentative = current.next_state(trigger)
        next_state = tentative
        if not current.is_deterministic() or (tentative is not None and not tentative.is_deterministic()):
            self._publish_token(
                TokenTopic.NON_DETERMINISTIC_PENDING, token_id, state=current, event=trigger, next_state=tentative
            )
            if resolver is None:
                raise self._token_failure(
                    TokenTopic.RESOLVER_MISSING,
                    NonDeterministicResolverMissingError(
                        f"No resolver for non-deterministic transition of {current} on {trigger}[{self._name}]"
                    ),
                    token_id,
                    state=current,
                    event=trigger,
                    next_state=tentative,
                )
            resolved = resolver(token_id, current, trigger)
            next_state = None
            if resolved is not None:
                next_state = self._resolve_state(resolved)
                if next_state is None:
                    raise self._token_failure(
                        TokenTopic.STATE_NOT_FOUND,
                        StateNotFoundError(f"Resolver returned unregistered state {resolved}[{self._name}]"),
                        token_id,
                        state=current,
                        event=trigger,
                    )

        if next_state is None:
            raise self._token_failure(
                TokenTopic.INVALID_STATE_CHANGE,
                InvalidStateChangeError(f"Invalid state change from {current} on {trigger}[{self._name}]"),
                token_id,
                state=current,
                event=trigger,
            )

        current.execute_output(trigger)
        if is_new:
            self._bind_new_token(token_id, current)

        if next_state.equals(current):
            topic = TokenTopic.SELF_TRANSITION
        elif next_state.is_final_state():
            topic = TokenTopic.REACHED_FINAL_STATE
        else:
            topic = TokenTopic.STATE_CHANGED
        self._publish_token(topic, token_id, state=current, event=trigger, next_state=next_state)

        self._token_instances[token_id] = next_state
        logger.debug("Token %s: %s ---[ %s ]--> %s", token_id, current, trigger, next_state)
        return next_state

    def _token_failure(
        self,
        topic: TokenTopic,
        error: FSMError,
        token_id: str,
        state: Optional[State] = None,
        event: Optional[Event] = None,
        next_state: Optional[State] = None,
    ) -> FSMError:
        """Log and publish a token failure; return the error for the caller to raise."""
        logger.warning("Token %s failed in %s: %s", token_id, self._name, error)
        self._publish_token(topic, token_id, state=state, event=event, next_state=next_state, error=error)
        return error

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def _publish(
        self,
        topic: StructuralTopic,
        state: Optional[State] = None,
        event: Optional[Event] = None,
        next_state: Optional[State] = None,
        region: Optional[str] = None,
    ) -> None:
        self._channel.publish(
            StructuralNotification(
                topic=topic, fsm_name=self._name, state=state, event=event, next_state=next_state, region=region
            )
        )

    def _publish_token(
        self,
        topic: TokenTopic,
        token_id: str,
        state: Optional[State] = None,
        event: Optional[Event] = None,
        next_state: Optional[State] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._channel.publish(
            TokenNotification(
                topic=topic,
                fsm_name=self._name,
                token_id=token_id,
                state=state,
                event=event,
                next_state=next_state,
                error=error,
            )
        )

    # ------------------------------------------------------------------
    # Validation and diagnostics
    # ------------------------------------------------------------------

    def validate(self) -> List[str]:
        """Return a list of structural problems; empty if none were found."""
        return Validator().collect_errors(self)

    @property
    def state_table_string(self) -> str:
        return "".join(state.get_state_table_string("\t") for state in self._states.values())

    def __repr__(self) -> str:
        return f"FiniteStateMachine({self._name!r})"

    def __str__(self) -> str:
        states = "".join(f"\t{state}\n" for state in self._states.values())
        events = "".join(f"\t{event}\n" for event in self._events.values())
        table = "".join(
            f"\t{line}"
            for state in self._states.values()
            for line in state.get_state_table_string().splitlines(keepends=True)
        )
        return f"FSM: {self._name}\nSTATES:\n{states}\nEVENTS:\n{events}\nSTATE TABLE:\n{table}"
