"""Slack event dispatch: alert extraction and background delivery."""

import logging

from fastapi import BackgroundTasks

from alert_relay.alerts.dispatcher import AlertDispatcher
from alert_relay.alerts.extractor import AlertExtractor
from alert_relay.config import Settings, get_settings
from alert_relay.models.alert import AlertRecord, DeliveryResult
from alert_relay.telegram.client import get_notifier

logger = logging.getLogger(__name__)


def build_extractor(settings: Settings) -> AlertExtractor:
    """Create an extractor bound to the configured channel, marker and tenant."""
    return AlertExtractor(
        channel_id=settings.slack_target_channel_id,
        marker=settings.alert_marker,
        tenant=settings.alert_tenant,
    )


def handle_slack_event(payload: dict, background_tasks: BackgroundTasks) -> AlertRecord | None:
    """Extract an alert from an authenticated payload and schedule its delivery.

    Returns the extracted record, or None if the event is not a relevant alert.
    Delivery runs after the response is sent, so its outcome never affects it.
    """
    settings = get_settings()
    record = build_extractor(settings).extract(payload)

    if record is None:
        event = payload.get("event")
        logger.debug(
            "Event is not a relevant alert (channel %s)",
            event.get("channel") if isinstance(event, dict) else None,
        )
        return None

    logger.info(
        "Dispatching %s alert with %d server(s)",
        record.status.value,
        len(record.servers),
    )
    background_tasks.add_task(deliver_alert, record)
    return record


async def deliver_alert(record: AlertRecord) -> DeliveryResult:
    """Send an alert record to the configured Telegram chat."""
    settings = get_settings()
    dispatcher = AlertDispatcher(get_notifier(), settings.alerts_chat_telegram_id)
    return await dispatcher.dispatch(record)
