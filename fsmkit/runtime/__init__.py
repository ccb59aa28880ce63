"""
Runtime observers for machine notifications.
"""

from .monitor import NotificationLogger, NotificationMonitor

__all__ = ["NotificationLogger", "NotificationMonitor"]
