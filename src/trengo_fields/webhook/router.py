"""Trengo webhook router."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from trengo_fields.config import Settings, get_settings
from trengo_fields.webhook.handlers import process_ticket_webhook

router = APIRouter(prefix="", tags=["trengo"])


@router.post("/trengo/webhook")
async def trengo_webhook(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Receive a Trengo message webhook.

    Trengo posts the message as form data; the raw body is decoded by the
    handler so malformed bodies produce the handler's 500 response rather
    than a FastAPI validation error.
    """
    body = await request.body()
    result = await process_ticket_webhook(body, settings)
    return JSONResponse(result.body, status_code=result.status_code)
