"""Alert message construction and delivery.

Delivery is fire-and-forget from the caller's point of view: failures are
caught and logged here and reported through ``DeliveryResult``, never raised.
"""

import logging

from alert_relay.alerts.notifier import NotificationError, Notifier
from alert_relay.models.alert import AlertRecord, AlertStatus, DeliveryResult

logger = logging.getLogger(__name__)

TITLES = {
    AlertStatus.STARTED: ("Agent CPU Throttling Started", "Servers over 85%:"),
    AlertStatus.RESOLVED: ("Agent CPU Throttling Resolved", "Servers below 85%:"),
}


def build_message(record: AlertRecord) -> str:
    """Render an alert record as plain text: title, subtext, then one server per line.

    With no servers the text ends right after the subtext line's newline.
    """
    title, subtext = TITLES[record.status]
    return "\n".join([title, subtext, "\n".join(record.servers)])


class AlertDispatcher:
    """Sends alert records to a single destination through a notifier."""

    def __init__(self, notifier: Notifier, destination: str):
        self.notifier = notifier
        self.destination = destination

    async def dispatch(self, record: AlertRecord) -> DeliveryResult:
        """Build the message for ``record`` and send it. Never raises on delivery failure."""
        text = build_message(record)

        try:
            outcome = await self.notifier.send(self.destination, text)
        except NotificationError as exc:
            logger.error("Alert delivery to %s failed: %s", self.destination, exc, exc_info=True)
            return DeliveryResult(delivered=False, error_detail=str(exc))

        if not outcome.ok:
            detail = (
                f"SendMessage error code: {outcome.error_code} "
                f"SendMessage description: {outcome.description}"
            )
            logger.error("Alert delivery to %s rejected: %s", self.destination, detail)
            return DeliveryResult(delivered=False, error_detail=detail)

        logger.info(
            "Delivered %s alert for %d server(s) to %s",
            record.status.value,
            len(record.servers),
            self.destination,
        )
        return DeliveryResult(delivered=True)
