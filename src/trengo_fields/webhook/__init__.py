"""Webhook ingress: body decoding, request processing, and the HTTP route."""

from trengo_fields.webhook.decoder import WebhookDecodeError, decode_form_body, parse_ticket_message
from trengo_fields.webhook.handlers import WebhookResult, process_ticket_webhook
from trengo_fields.webhook.router import router

__all__ = [
    "WebhookDecodeError",
    "WebhookResult",
    "decode_form_body",
    "parse_ticket_message",
    "process_ticket_webhook",
    "router",
]
