# fsmkit/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any


class Event:
    """
    An immutable identity record used as the key of transition tables. Events are
    identified by a numeric id and a name, both fixed for the life of the object.
    """

    __slots__ = ("_event_id", "_event_name")

    def __init__(self, event_id: int, event_name: str) -> None:
        """
        :param event_id: Numeric id, unique within the owning machine.
        :param event_name: Human readable name.
        :raises ValueError: If the id is not an integer or the name is empty.
        """
        if isinstance(event_id, bool) or not isinstance(event_id, int):
            raise ValueError("Event ID must be an integer")
        if not event_name or not isinstance(event_name, str):
            raise ValueError("Event name must be a non-empty string")
        object.__setattr__(self, "_event_id", event_id)
        object.__setattr__(self, "_event_name", event_name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Event is immutable")

    @property
    def event_id(self) -> int:
        """The numeric id of the event."""
        return self._event_id

    @property
    def event_name(self) -> str:
        """The name of the event."""
        return self._event_name

    def equals(self, other: Any = None) -> bool:
        """
        Compare against another Event, a bare id or a bare name.

        :param other: An Event, an int id or a str name.
        :return: True if the matching field(s) are equal, otherwise False.
        """
        if isinstance(other, Event):
            return self._event_id == other._event_id and self._event_name == other._event_name
        if isinstance(other, bool):
            return False
        if isinstance(other, int):
            return self._event_id == other
        if isinstance(other, str):
            return self._event_name == other
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._event_id, self._event_name))

    def __repr__(self) -> str:
        return f"Event({self._event_id!r}, {self._event_name!r})"

    def __str__(self) -> str:
        return f"{self._event_name}({self._event_id})"
