"""Tests for AlertRecord, DeliveryResult and SendOutcome models."""

import pytest
from pydantic import ValidationError

from alert_relay.models.alert import AlertRecord, AlertStatus, DeliveryResult, SendOutcome


def test_alert_status_values():
    assert AlertStatus("started") is AlertStatus.STARTED
    assert AlertStatus("resolved") is AlertStatus.RESOLVED


def test_alert_record_preserves_server_order():
    record = AlertRecord(status=AlertStatus.STARTED, servers=["b", "a", "b"])
    assert record.servers == ["b", "a", "b"]


def test_alert_record_defaults_to_no_servers():
    assert AlertRecord(status=AlertStatus.RESOLVED).servers == []


def test_alert_record_is_frozen():
    record = AlertRecord(status=AlertStatus.STARTED)
    with pytest.raises(ValidationError):
        record.status = AlertStatus.RESOLVED


def test_alert_record_rejects_unknown_status():
    with pytest.raises(ValidationError):
        AlertRecord(status="firing")


def test_delivery_result_defaults():
    result = DeliveryResult(delivered=True)
    assert result.error_detail is None


def test_send_outcome_error_fields():
    outcome = SendOutcome(ok=False, error_code=429, description="Too Many Requests")
    assert outcome.ok is False
    assert outcome.error_code == 429
