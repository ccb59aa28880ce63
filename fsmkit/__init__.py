"""fsmkit: embeddable finite state machine engine

Define named states and events, wire a transition graph between them, attach
optional outputs to transitions and drive independently addressable tokens
through the graph.

Responsibilities:
    - State and event registries with stable integer ids
    - Per-state transition and output tables
    - Initial states per named region
    - Token instances and their advancement, including non-deterministic
      transitions resolved by the caller
    - Structural and token notifications

Cross-cutting Concerns:
    Thread Safety:
        - The engine is single threaded; callers serialize access

    Error Handling:
        - Structural mutations fail fast with FSMError subclasses
        - Token failures are raised and mirrored on the notification channel

    Logging:
        - Standard library logging, one logger per module
        - No handlers are configured by the library
"""

from fsmkit.core import (
    Event,
    FiniteStateMachine,
    NoArgEffect,
    NotificationChannel,
    State,
    StateEffect,
    StateEventEffect,
    StructuralNotification,
    StructuralTopic,
    TokenNotification,
    TokenTopic,
    Transition,
)

__version__ = "0.1.0"

__all__ = [
    "Event",
    "FiniteStateMachine",
    "NoArgEffect",
    "NotificationChannel",
    "State",
    "StateEffect",
    "StateEventEffect",
    "StructuralNotification",
    "StructuralTopic",
    "TokenNotification",
    "TokenTopic",
    "Transition",
]
