"""
Core package: events, states, the machine and its notification channel.
"""

# Import order matters to avoid circular dependencies
from .events import Event
from .outputs import NoArgEffect, OutputFunction, StateEffect, StateEventEffect
from .states import State, Transition
from .notifications import (
    NotificationChannel,
    StructuralNotification,
    StructuralTopic,
    TokenNotification,
    TokenTopic,
)
from .validations import Validator
from .machine import FiniteStateMachine, Resolver

__all__ = [
    "Event",
    "NoArgEffect",
    "OutputFunction",
    "StateEffect",
    "StateEventEffect",
    "State",
    "Transition",
    "NotificationChannel",
    "StructuralNotification",
    "StructuralTopic",
    "TokenNotification",
    "TokenTopic",
    "Validator",
    "FiniteStateMachine",
    "Resolver",
]
