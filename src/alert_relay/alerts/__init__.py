"""Alert pipeline: extraction from Slack messages and dispatch to a notifier."""

from alert_relay.alerts.dispatcher import AlertDispatcher, build_message
from alert_relay.alerts.extractor import AlertExtractor
from alert_relay.alerts.notifier import NotificationError, Notifier

__all__ = [
    "AlertDispatcher",
    "AlertExtractor",
    "NotificationError",
    "Notifier",
    "build_message",
]
