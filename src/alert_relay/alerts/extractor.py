"""Alert extraction from Grafana messages posted to Slack.

Turns the free-form text of a Grafana Slack notification, e.g.::

    [FIRING:1] Grafana alert
    Agent CPU throttling
    ---
    TENANT = FA Finance
    SERVER = 10.0.0.1 CPU Over 85%

plus its attachment color into an ``AlertRecord``. Every function here is pure:
no I/O, no settings lookups, same input gives the same output.
"""

import logging
import re

from pydantic import ValidationError

from alert_relay.models.alert import AlertRecord, AlertStatus
from alert_relay.models.slack import Attachment, EventEnvelope

logger = logging.getLogger(__name__)

# Grafana sets color="danger" (red) for firing alerts and color="good" (green) on resolve
COLOR_STATUS = {
    "danger": AlertStatus.STARTED,
    "good": AlertStatus.RESOLVED,
}

SERVER_PATTERN = re.compile(r"\bserver\s*=\s*", re.IGNORECASE)


def infer_status(attachments: list[Attachment]) -> AlertStatus | None:
    """Map the first attachment's color to an alert status.

    Returns None when there is no attachment, no color, or an unrecognized color.
    """
    if not attachments or not attachments[0].color:
        return None
    return COLOR_STATUS.get(attachments[0].color.lower())


def split_lines(text: str) -> list[str]:
    """Split message text into trimmed, non-empty lines, preserving order."""
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if line]


def tenant_pattern(tenant: str) -> re.Pattern:
    """Build a case-insensitive ``tenant = <name>`` matcher, tolerant of spacing around '='."""
    name = r"\s+".join(re.escape(part) for part in tenant.split())
    return re.compile(rf"tenant\s*=\s*{name}", re.IGNORECASE)


def has_tenant(lines: list[str], pattern: re.Pattern) -> bool:
    """Return True if any line carries the tenant marker."""
    return any(pattern.search(line) for line in lines)


def extract_servers(lines: list[str]) -> list[str]:
    """Collect the value of every ``server = ...`` line in encounter order.

    The ``server =`` prefix is removed and the remainder trimmed, so
    ``"SERVER = 10.0.0.1 CPU Over 85%"`` yields ``"10.0.0.1 CPU Over 85%"``.
    Duplicates are kept.
    """
    return [
        SERVER_PATTERN.sub("", line).strip()
        for line in lines
        if SERVER_PATTERN.search(line)
    ]


class AlertExtractor:
    """Decides whether a Slack event is a relevant alert and normalizes it.

    Args:
        channel_id: Slack channel the alerts are posted to. Events from any
            other channel are ignored.
        marker: Case-insensitive substring identifying the monitoring source.
        tenant: Tenant name that must appear on a ``TENANT = ...`` line.
    """

    def __init__(self, channel_id: str, marker: str = "grafana", tenant: str = "FA Finance"):
        self.channel_id = channel_id
        self.marker = marker.lower()
        self._tenant = tenant_pattern(tenant)

    def extract(self, payload: dict) -> AlertRecord | None:
        """Extract an alert from a decoded Slack Events API payload.

        Returns None when the payload carries no ``event`` object or the
        event is not a relevant alert.
        """
        event = payload.get("event")
        if not isinstance(event, dict):
            return None

        try:
            envelope = EventEnvelope.model_validate(event)
        except ValidationError:
            logger.info("Ignoring malformed Slack event in channel %s", event.get("channel"))
            return None

        return self.extract_envelope(envelope)

    def extract_envelope(self, envelope: EventEnvelope) -> AlertRecord | None:
        """Apply the alert filters in order and build the record.

        1. Wrong (or missing) channel -> skip
        2. No source marker in text -> skip
        3. Unknown attachment color -> skip
        4. No tenant line anywhere in the message -> skip
        """
        if not envelope.channel_id or envelope.channel_id != self.channel_id:
            return None

        if self.marker not in envelope.text.lower():
            return None

        status = infer_status(envelope.attachments)
        if status is None:
            logger.debug("No recognized attachment color in channel %s", envelope.channel_id)
            return None

        lines = split_lines(envelope.text)

        # Tenant gate is message-global: servers are only collected once it matches
        if not has_tenant(lines, self._tenant):
            logger.debug("Tenant line not found, skipping %s alert", status.value)
            return None

        return AlertRecord(status=status, servers=extract_servers(lines))
