"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from trengo_fields.config import get_settings
from trengo_fields.logging_config import configure_logging
from trengo_fields.webhook.router import router as webhook_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Trengo Fields",
    lifespan=lifespan,
)
app.include_router(webhook_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "trengo-fields",
        "version": "0.1.0",
    }
