"""Slack ingress: webhook gate, authentication, and event handling."""

from alert_relay.slack.gate import InvalidPayload, Unauthorized
from alert_relay.slack.handlers import deliver_alert, handle_slack_event
from alert_relay.slack.router import router

__all__ = [
    "InvalidPayload",
    "Unauthorized",
    "deliver_alert",
    "handle_slack_event",
    "router",
]
