# fsmkit/core/notifications.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Publish/subscribe channel for machine notifications.

Two independent topic sets are published: structural topics describe changes to
the registries and transition tables, token topics describe the lifecycle and
moves of token instances, including failures. Handlers are registered per topic
and called synchronously, in subscription order, with a typed payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Union

if TYPE_CHECKING:
    from fsmkit.core.events import Event
    from fsmkit.core.states import State


class StructuralTopic(Enum):
    """Changes to the machine's registries and transition tables."""

    CLEARED = auto()
    INITIAL_STATE_ADDED = auto()
    INITIAL_STATE_REMOVED = auto()
    FINAL_STATE_ADDED = auto()
    STATE_ADDED = auto()
    EVENT_ADDED = auto()
    TRANSITION_ADDED = auto()
    TRANSITION_REMOVED = auto()


class TokenTopic(Enum):
    """Lifecycle, moves and failures of token instances."""

    CREATED = auto()
    STATE_CHANGED = auto()
    SELF_TRANSITION = auto()
    REACHED_FINAL_STATE = auto()
    NON_DETERMINISTIC_PENDING = auto()
    INVALID_STATE_CHANGE = auto()
    TOKEN_NOT_FOUND = auto()
    STATE_NOT_FOUND = auto()
    EVENT_NOT_FOUND = auto()
    RESOLVER_MISSING = auto()


TOKEN_ERROR_TOPICS = frozenset(
    {
        TokenTopic.INVALID_STATE_CHANGE,
        TokenTopic.TOKEN_NOT_FOUND,
        TokenTopic.STATE_NOT_FOUND,
        TokenTopic.EVENT_NOT_FOUND,
        TokenTopic.RESOLVER_MISSING,
    }
)


@dataclass(frozen=True)
class StructuralNotification:
    """Payload of a structural topic."""

    topic: StructuralTopic
    fsm_name: str
    state: Optional["State"] = None
    event: Optional["Event"] = None
    next_state: Optional["State"] = None
    region: Optional[str] = None


@dataclass(frozen=True)
class TokenNotification:
    """
    Payload of a token topic. ``state`` is the token's current state, ``next_state``
    the target of the move (tentative for NON_DETERMINISTIC_PENDING) and ``error``
    the exception raised to the caller for error topics.
    """

    topic: TokenTopic
    fsm_name: str
    token_id: Optional[str] = None
    state: Optional["State"] = None
    event: Optional["Event"] = None
    next_state: Optional["State"] = None
    error: Optional[Exception] = None

    @property
    def is_error(self) -> bool:
        return self.topic in TOKEN_ERROR_TOPICS


Topic = Union[StructuralTopic, TokenTopic]
Notification = Union[StructuralNotification, TokenNotification]
Handler = Callable[[Notification], None]

ALL_TOPICS: List[Topic] = [*StructuralTopic, *TokenTopic]


class NotificationChannel:
    """
    Registry of handlers per topic. Publishing is synchronous; an exception raised
    by a handler propagates to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Topic, List[Handler]] = {}

    def subscribe(self, topic: Topic, handler: Handler) -> None:
        """
        Register a handler for a topic. A handler is registered at most once per topic.

        :param topic: A StructuralTopic or TokenTopic member.
        :param handler: Callable receiving the notification payload.
        :raises TypeError: If the topic is not a known topic member.
        """
        if not isinstance(topic, (StructuralTopic, TokenTopic)):
            raise TypeError(f"Unknown notification topic: {topic!r}")
        handlers = self._handlers.setdefault(topic, [])
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, topic: Topic, handler: Handler) -> None:
        handlers = self._handlers.get(topic)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def subscribe_all(self, handler: Handler) -> None:
        """Register a handler for every structural and token topic."""
        for topic in ALL_TOPICS:
            self.subscribe(topic, handler)

    def unsubscribe_all(self, handler: Handler) -> None:
        for topic in ALL_TOPICS:
            self.unsubscribe(topic, handler)

    def handlers(self, topic: Topic) -> List[Handler]:
        """A copy of the handlers registered for a topic."""
        return list(self._handlers.get(topic, []))

    def publish(self, notification: Notification) -> None:
        # Snapshot so handlers may unsubscribe while being called.
        for handler in list(self._handlers.get(notification.topic, [])):
            handler(notification)

    def clear(self) -> None:
        """Drop every registered handler."""
        self._handlers.clear()
