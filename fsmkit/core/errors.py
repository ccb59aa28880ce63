# fsmkit/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class FSMError(Exception):
    """
    Base exception class for errors raised by the finite state machine engine.
    """


class DuplicateIdentityError(FSMError):
    """
    Raised when a state, event or token id is registered twice.
    """


class TransitionError(FSMError):
    """
    Raised when a transition cannot be added to or removed from a state.
    """


class IncompleteTransitionInputError(TransitionError):
    """
    Raised when a state or event argument of a transition does not resolve.
    """


class FinalStateMutationError(TransitionError):
    """
    Raised when a transition is added to or removed from a final state.
    """


class TransitionConflictError(TransitionError):
    """
    Raised when an event already leads to a different state.
    """


class UnknownTransitionError(TransitionError):
    """
    Raised when removing a transition that does not exist.
    """


class SelfTransitionDisallowedError(TransitionError):
    """
    Raised when declaring a self transition on a machine that forbids them.
    """


class LookupFailedError(FSMError):
    """
    Base class for failed token, state and event lookups.
    """


class TokenNotFoundError(LookupFailedError):
    """
    Raised when a token instance does not exist and may not be created.
    """


class EventNotFoundError(LookupFailedError):
    """
    Raised when an event is not registered with the machine.
    """


class StateNotFoundError(LookupFailedError):
    """
    Raised when a state is not registered with the machine.
    """


class InitialStateMissingError(StateNotFoundError):
    """
    Raised when a region has no initial state to place a new token on.
    """


class NonDeterministicResolverMissingError(FSMError):
    """
    Raised when a non-deterministic transition is taken without a resolver.
    """


class InvalidStateChangeError(FSMError):
    """
    Raised when a token cannot move on the given event.
    """


class ValidationError(FSMError):
    """
    Raised when validation detects structural problems in a machine.
    """
