"""Telegram Bot API notifier.

Implements the ``Notifier`` interface with a single ``sendMessage`` call per
alert. A cached instance is built from application settings, following the
lazy-init pattern used for the other clients.
"""

import logging

import httpx
from pydantic import ValidationError

from alert_relay.alerts.notifier import NotificationError
from alert_relay.config import get_settings
from alert_relay.models.alert import SendOutcome

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.telegram.org"


class TelegramNotifier:
    """Sends plain-text messages through the Telegram Bot API.

    Args:
        bot_token: Bot token issued by BotFather.
        bot_username: Bot username, used for log context only.
        api_base: Bot API base URL (override for a local Bot API server).
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        bot_token: str,
        bot_username: str = "",
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 10.0,
    ):
        self.bot_token = bot_token
        self.bot_username = bot_username
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def send_message_url(self) -> str:
        return f"{self.api_base}/bot{self.bot_token}/sendMessage"

    async def send(self, destination: str, text: str) -> SendOutcome:
        """Send ``text`` to the chat ``destination``.

        The Bot API answers with ``{"ok": bool, "error_code": int, "description": str}``
        for both successes and rejections, so the outcome is decoded from the body
        regardless of HTTP status. Network failures and undecodable or malformed replies raise
        NotificationError.
        """
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.post(
                    self.send_message_url,
                    json={"chat_id": destination, "text": text},
                )
        except httpx.HTTPError as exc:
            raise NotificationError(f"Telegram request failed: {exc!r}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise NotificationError(
                f"Telegram returned non-JSON response (HTTP {response.status_code})"
            ) from exc

        if not isinstance(body, dict) or "ok" not in body:
            raise NotificationError(
                f"Telegram returned unexpected response (HTTP {response.status_code})"
            )

        logger.debug(
            "sendMessage via @%s to %s: ok=%s", self.bot_username, destination, body["ok"]
        )
        try:
            return SendOutcome(
                ok=bool(body["ok"]),
                error_code=body.get("error_code"),
                description=body.get("description"),
            )
        except ValidationError as exc:
            raise NotificationError(
                f"Telegram returned unexpected response (HTTP {response.status_code}): {body!r}"
            ) from exc


_notifier: TelegramNotifier | None = None


def get_notifier() -> TelegramNotifier:
    """Return a cached Telegram notifier configured from settings.

    Creates the notifier on first call. Subsequent calls return the cached instance.
    """
    global _notifier
    if _notifier is None:
        settings = get_settings()
        _notifier = TelegramNotifier(
            bot_token=settings.telegram_bot_token,
            bot_username=settings.telegram_bot_username,
            api_base=settings.telegram_api_base,
        )
    return _notifier


def reset_notifier() -> None:
    """Reset the cached notifier instance. Used for testing."""
    global _notifier
    _notifier = None
