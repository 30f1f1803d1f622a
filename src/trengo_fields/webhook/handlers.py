"""Trengo webhook processing: decode, extract, notify, respond."""

import logging
from dataclasses import dataclass, field

from trengo_fields.config import Settings
from trengo_fields.extraction import parse_custom_ticket_fields
from trengo_fields.trengo import set_ticket_custom_fields
from trengo_fields.webhook.decoder import parse_ticket_message

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "some error happened"


@dataclass(frozen=True)
class WebhookResult:
    """Status code and JSON body to return to the webhook caller."""

    status_code: int
    body: dict = field(default_factory=dict)


async def process_ticket_webhook(body: bytes | str | None, settings: Settings) -> WebhookResult:
    """Handle one inbound Trengo message webhook.

    Decodes the form body, extracts the link field and, when one is found,
    sends it to Trengo. Returns 201 on every non-exceptional path, including
    when the Trengo call fails. Decode and extraction errors return 500.

    The signing secret is not checked; requests are accepted unauthenticated.
    """
    try:
        ticket = parse_ticket_message(body)

        update = parse_custom_ticket_fields(ticket.message, settings)
        if update is not None:
            await set_ticket_custom_fields(update.to_payload(), ticket.ticket_id, settings)
        else:
            logger.info("No custom fields found in message for ticket %s", ticket.ticket_id)

        return WebhookResult(
            status_code=201,
            body={"message": f"Ticket's {ticket.ticket_id} custom fields set"},
        )
    except Exception as exc:
        logger.error("Error processing Trengo webhook: %s", exc, exc_info=True)
        return WebhookResult(
            status_code=500,
            body={"message": str(exc) or FALLBACK_ERROR_MESSAGE},
        )
