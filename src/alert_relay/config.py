"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack (inbound)
    slack_target_channel_id: str = ""
    slack_verify_token: bool = False
    slack_outgoing_webhook_token: str = ""
    slack_signing_secret: str = ""

    # Alert parsing
    alert_marker: str = "grafana"
    alert_tenant: str = "FA Finance"

    # Telegram (outbound)
    telegram_bot_token: str = ""
    telegram_bot_username: str = ""
    telegram_api_base: str = "https://api.telegram.org"
    alerts_chat_telegram_id: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
