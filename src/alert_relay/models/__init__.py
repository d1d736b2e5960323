"""Data models and enums for the alert relay pipeline."""

from alert_relay.models.alert import AlertRecord, AlertStatus, DeliveryResult, SendOutcome
from alert_relay.models.slack import Attachment, EventEnvelope

__all__ = [
    "AlertRecord",
    "AlertStatus",
    "Attachment",
    "DeliveryResult",
    "EventEnvelope",
    "SendOutcome",
]
