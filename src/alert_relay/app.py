"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from alert_relay.config import get_settings
from alert_relay.logging_config import configure_logging
from alert_relay.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Alert Relay",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "alert-relay",
        "version": "0.1.0",
    }


def main() -> None:
    """Run the service with uvicorn on the configured port."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
