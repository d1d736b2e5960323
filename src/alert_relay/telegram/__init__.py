"""Telegram egress: Bot API client used as the alert notifier."""

from alert_relay.telegram.client import TelegramNotifier, get_notifier, reset_notifier

__all__ = [
    "TelegramNotifier",
    "get_notifier",
    "reset_notifier",
]
