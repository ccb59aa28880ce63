# fsmkit/runtime/monitor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Observers that attach to a machine's notification channel."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, List, Optional

from fsmkit.core.notifications import (
    Notification,
    NotificationChannel,
    Topic,
    TokenNotification,
)


class NotificationMonitor:
    """
    Records every notification published on a channel and counts them per topic.

    History entries are dictionaries with ``topic``, ``timestamp`` and
    ``notification`` keys, in publication order.
    """

    def __init__(self, channel: NotificationChannel) -> None:
        self._channel = channel
        self._history: List[Dict[str, Any]] = []
        self._metrics: Dict[Topic, int] = {}
        self._history_lock = threading.Lock()
        self._channel.subscribe_all(self.track)

    @property
    def history(self) -> List[Dict[str, Any]]:
        """A copy of the recorded history."""
        with self._history_lock:
            return list(self._history)

    @property
    def metrics(self) -> Dict[Topic, int]:
        """A copy of the per-topic counts."""
        with self._history_lock:
            return dict(self._metrics)

    @property
    def event_count(self) -> int:
        with self._history_lock:
            return len(self._history)

    def track(self, notification: Notification) -> None:
        """Record a notification. Registered on every topic of the channel."""
        with self._history_lock:
            self._history.append(
                {"topic": notification.topic, "timestamp": time.time(), "notification": notification}
            )
            self._metrics[notification.topic] = self._metrics.get(notification.topic, 0) + 1

    def get_metric(self, topic: Topic) -> int:
        """Number of notifications seen for a topic; 0 if none."""
        with self._history_lock:
            return self._metrics.get(topic, 0)

    def query(self, topic: Optional[Topic] = None, token_id: Optional[str] = None) -> List[Notification]:
        """
        Return recorded notifications, optionally filtered.

        :param topic: Only notifications of this topic.
        :param token_id: Only token notifications for this token.
        """
        with self._history_lock:
            entries = list(self._history)

        results = []
        for entry in entries:
            notification = entry["notification"]
            if topic is not None and notification.topic != topic:
                continue
            if token_id is not None:
                if not isinstance(notification, TokenNotification) or notification.token_id != token_id:
                    continue
            results.append(notification)
        return results

    def clear_history(self) -> None:
        with self._history_lock:
            self._history.clear()
            self._metrics.clear()

    def detach(self) -> None:
        """Stop recording."""
        self._channel.unsubscribe_all(self.track)


class NotificationLogger:
    """
    Writes every notification to a standard library logger. Token failures are
    logged at WARNING, everything else at DEBUG.
    """

    def __init__(self, channel: NotificationChannel, logger: Optional[logging.Logger] = None) -> None:
        self._channel = channel
        self._logger = logger or logging.getLogger(__name__)
        self._channel.subscribe_all(self.log)

    def log(self, notification: Notification) -> None:
        if isinstance(notification, TokenNotification):
            level = logging.WARNING if notification.is_error else logging.DEBUG
            self._logger.log(
                level,
                "[%s] token %s %s: %s ---[ %s ]--> %s%s",
                notification.fsm_name,
                notification.token_id,
                notification.topic.name,
                notification.state,
                notification.event,
                notification.next_state,
                f" ({notification.error})" if notification.error else "",
            )
            return

        self._logger.debug(
            "[%s] %s: state=%s event=%s next_state=%s region=%s",
            notification.fsm_name,
            notification.topic.name,
            notification.state,
            notification.event,
            notification.next_state,
            notification.region,
        )

    def detach(self) -> None:
        self._channel.unsubscribe_all(self.log)
