"""Inbound request gate: payload parsing and configuration-gated authentication.

Two authentication steps exist and each is enabled by configuration:

- Outgoing-webhook token: the payload ``token`` must equal the configured token.
- Request signature: Slack's ``X-Slack-Signature`` header, checked with the
  signing secret over the exact raw body.

The URL verification challenge is answered by the router before either check.
"""

import json
import logging

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from alert_relay.config import Settings, get_settings

logger = logging.getLogger(__name__)


class InvalidPayload(HTTPException):
    """Body is missing, not JSON, empty, or not a JSON object."""

    def __init__(self, detail: str = "Invalid JSON or empty payload."):
        super().__init__(status_code=400, detail=detail)


class Unauthorized(HTTPException):
    """Token or signature does not match the configured credentials."""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(status_code=401, detail=detail)


async def parse_slack_payload(request: Request) -> dict:
    """Decode the raw request body into a non-empty JSON object.

    Reads the raw body rather than relying on FastAPI body parsing so that the
    same bytes can later be checked against the request signature.

    Raises InvalidPayload (400) on empty, non-UTF-8, undecodable, falsy, or
    non-object bodies.
    """
    body = await request.body()
    try:
        payload = json.loads(body.decode("utf-8"))
    except ValueError:
        raise InvalidPayload()

    if not payload or not isinstance(payload, dict):
        raise InvalidPayload()

    return payload


def verify_token(payload: dict, settings: Settings) -> None:
    """Compare the payload token with the configured outgoing-webhook token.

    No-op unless ``slack_verify_token`` is enabled. A missing or null token
    field is treated as the empty string.
    """
    if not settings.slack_verify_token:
        return

    received = payload.get("token") or ""
    if received != settings.slack_outgoing_webhook_token:
        logger.warning("Rejected Slack request with invalid token")
        raise Unauthorized("Unauthorized - invalid Slack token")


async def verify_signature(request: Request, settings: Settings) -> None:
    """Verify the Slack request signature over the raw body.

    No-op unless ``slack_signing_secret`` is set. Missing headers, a non-numeric
    timestamp, or a body that is not UTF-8 are rejected as Unauthorized.
    """
    if not settings.slack_signing_secret:
        return

    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")
    if not timestamp or not signature:
        logger.warning("Rejected Slack request without signature headers")
        raise Unauthorized("Unauthorized - missing Slack signature")

    body = await request.body()
    verifier = SignatureVerifier(signing_secret=settings.slack_signing_secret)

    try:
        valid = verifier.is_valid(body=body.decode("utf-8"), timestamp=timestamp, signature=signature)
    except ValueError:
        valid = False

    if not valid:
        logger.warning("Rejected Slack request with invalid signature")
        raise Unauthorized("Unauthorized - invalid Slack signature")


async def authenticate_slack_request(request: Request, payload: dict) -> None:
    """Run every enabled authentication step. Raises Unauthorized (401) on failure."""
    settings = get_settings()
    verify_token(payload, settings)
    await verify_signature(request, settings)
