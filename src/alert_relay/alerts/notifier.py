"""Outbound notifier interface consumed by the dispatcher."""

from typing import Protocol

from alert_relay.models.alert import SendOutcome


class NotificationError(Exception):
    """Raised by a notifier when a send fails below the API level (transport, protocol)."""


class Notifier(Protocol):
    """Anything that can deliver a plain-text message to a destination.

    Implementations:
    - TelegramNotifier (telegram/client.py)
    """

    async def send(self, destination: str, text: str) -> SendOutcome:
        """Send ``text`` to ``destination`` and return the API outcome.

        Raises NotificationError if the request could not be completed.
        """
        ...
