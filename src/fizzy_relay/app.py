"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from fizzy_relay import __version__
from fizzy_relay.config import get_settings
from fizzy_relay.fizzy.router import router as fizzy_router
from fizzy_relay.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging from settings on startup."""
    configure_logging(get_settings().log_level)
    yield


app = FastAPI(
    title="Fizzy Slack Relay",
    version=__version__,
    lifespan=lifespan,
)
app.include_router(fizzy_router)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "fizzy-slack-relay",
        "version": __version__,
    }
