"""Tests for alert message construction and dispatch failure isolation."""

from unittest.mock import AsyncMock

import pytest

from alert_relay.alerts.dispatcher import AlertDispatcher, build_message
from alert_relay.alerts.notifier import NotificationError
from alert_relay.models.alert import AlertRecord, AlertStatus, SendOutcome

CHAT_ID = "-1001234567890"
SERVERS = ["10.0.0.1 CPU Over 85%", "10.0.0.2 CPU Over 85%"]


@pytest.fixture
def notifier() -> AsyncMock:
    """A notifier whose send succeeds by default."""
    mock = AsyncMock()
    mock.send.return_value = SendOutcome(ok=True)
    return mock


# -- build_message --


def test_build_message_started():
    record = AlertRecord(status=AlertStatus.STARTED, servers=SERVERS)
    assert build_message(record) == (
        "Agent CPU Throttling Started\n"
        "Servers over 85%:\n"
        "10.0.0.1 CPU Over 85%\n"
        "10.0.0.2 CPU Over 85%"
    )


def test_build_message_resolved():
    record = AlertRecord(status=AlertStatus.RESOLVED, servers=["10.0.0.1 CPU below 85%"])
    assert build_message(record) == (
        "Agent CPU Throttling Resolved\nServers below 85%:\n10.0.0.1 CPU below 85%"
    )


def test_build_message_without_servers_ends_after_subtext():
    """An empty server list leaves a blank section after the subtext line."""
    text = build_message(AlertRecord(status=AlertStatus.STARTED, servers=[]))
    assert text == "Agent CPU Throttling Started\nServers over 85%:\n"
    assert text.splitlines()[-1] == "Servers over 85%:"


# -- dispatch --


async def test_dispatch_success(notifier: AsyncMock):
    record = AlertRecord(status=AlertStatus.STARTED, servers=SERVERS)

    result = await AlertDispatcher(notifier, CHAT_ID).dispatch(record)

    assert result.delivered is True
    assert result.error_detail is None
    notifier.send.assert_awaited_once_with(CHAT_ID, build_message(record))


async def test_dispatch_rejected_outcome(notifier: AsyncMock):
    """A non-ok API reply is reported, not raised."""
    notifier.send.return_value = SendOutcome(
        ok=False, error_code=400, description="Bad Request: chat not found"
    )

    result = await AlertDispatcher(notifier, CHAT_ID).dispatch(
        AlertRecord(status=AlertStatus.RESOLVED, servers=SERVERS)
    )

    assert result.delivered is False
    assert result.error_detail == (
        "SendMessage error code: 400 SendMessage description: Bad Request: chat not found"
    )


async def test_dispatch_transport_failure_is_caught(notifier: AsyncMock, caplog):
    """A NotificationError is logged and converted into a failed result."""
    notifier.send.side_effect = NotificationError("connection refused")

    with caplog.at_level("ERROR"):
        result = await AlertDispatcher(notifier, CHAT_ID).dispatch(
            AlertRecord(status=AlertStatus.STARTED, servers=[])
        )

    assert result.delivered is False
    assert result.error_detail == "connection refused"
    assert "connection refused" in caplog.text


async def test_dispatch_twice_sends_twice(notifier: AsyncMock):
    """No dedup: the same record dispatched twice is delivered twice."""
    dispatcher = AlertDispatcher(notifier, CHAT_ID)
    record = AlertRecord(status=AlertStatus.STARTED, servers=SERVERS)

    await dispatcher.dispatch(record)
    await dispatcher.dispatch(record)

    assert notifier.send.await_count == 2
