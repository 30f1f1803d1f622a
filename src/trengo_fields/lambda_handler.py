"""AWS Lambda entry point for API Gateway proxy events.

Runs the same processing as the FastAPI route, for deployments that invoke
the handler directly instead of serving HTTP.
"""

import asyncio
import base64
import binascii
import json
import logging

from trengo_fields.config import get_settings
from trengo_fields.logging_config import configure_logging
from trengo_fields.webhook.handlers import process_ticket_webhook

logger = logging.getLogger(__name__)

_logging_configured = False


def _proxy_response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event: dict, context: object = None) -> dict:
    """Handle an API Gateway proxy event and return a proxy response."""
    global _logging_configured
    settings = get_settings()
    if not _logging_configured:
        configure_logging(settings.log_level)
        _logging_configured = True

    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as exc:
            logger.error("Invalid base64 body: %s", exc)
            return _proxy_response(500, {"message": f"Invalid base64 body: {exc}"})

    result = asyncio.run(process_ticket_webhook(body, settings))
    return _proxy_response(result.status_code, result.body)
