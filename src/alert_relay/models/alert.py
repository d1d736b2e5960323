"""Canonical alert record and delivery outcome models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class AlertStatus(str, Enum):
    """Alert lifecycle state, derived from the Slack attachment color."""

    STARTED = "started"
    RESOLVED = "resolved"


class AlertRecord(BaseModel):
    """Normalized alert extracted from a monitoring chat message."""

    model_config = ConfigDict(frozen=True)

    status: AlertStatus
    servers: list[str] = []  # Trimmed, in first-seen order, not deduplicated


class SendOutcome(BaseModel):
    """Reply from the outbound notifier for a single send."""

    ok: bool
    error_code: int | None = None
    description: str | None = None


class DeliveryResult(BaseModel):
    """Result of dispatching one alert record."""

    delivered: bool
    error_detail: str | None = None
