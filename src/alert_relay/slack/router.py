"""Slack webhook router: challenge handshake, authentication, and alert intake."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from alert_relay.slack.gate import authenticate_slack_request, parse_slack_payload
from alert_relay.slack.handlers import handle_slack_event

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    request: Request,
    background_tasks: BackgroundTasks,
    payload: dict = Depends(parse_slack_payload),
):
    """Receive Slack webhook events.

    The URL verification challenge is echoed before authentication. Every
    authenticated event is acknowledged with a plain ``OK`` so Slack does not
    retry, whether or not it turned out to be a relevant alert.
    """
    if payload.get("challenge") is not None:
        return JSONResponse({"challenge": payload["challenge"]})

    await authenticate_slack_request(request, payload)

    handle_slack_event(payload, background_tasks)
    return PlainTextResponse("OK")
