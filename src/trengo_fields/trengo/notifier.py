"""Send custom field values to Trengo.

See https://developers.trengo.com/reference/custom-data. Delivery is
fire-and-log: failures are logged and never raised, so a Trengo outage
cannot turn a webhook into an error response.
"""

import logging

import httpx

from trengo_fields.config import Settings

logger = logging.getLogger(__name__)

# Transport failures, non-2xx responses, and URLs httpx refuses to build
_DELIVERY_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


async def set_ticket_custom_fields(payload: str, ticket_id: int, settings: Settings) -> bool:
    """POST a serialized custom field update to a ticket.

    Args:
        payload: JSON body, e.g. '{"custom_field_id": "1", "value": "https://..."}'.
        ticket_id: Trengo ticket id.
        settings: Provides the API token and base URL.

    Returns True if Trengo accepted the update, False otherwise.
    """
    url = f"{settings.trengo_api_base_url}/tickets/{ticket_id}/custom_fields"
    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {settings.trengo_token}",
        "Content-Type": "application/json",
    }

    try:
        # No timeout of our own: the hosting platform's invocation limit applies.
        async with httpx.AsyncClient(timeout=None) as client:
            response = await client.post(url, headers=headers, content=payload)
            response.raise_for_status()
    except _DELIVERY_ERRORS:
        logger.error("Error when sending to Trengo for ticket %s", ticket_id, exc_info=True)
        return False
    except Exception:
        # e.g. UnicodeEncodeError from a token httpx cannot put in a header
        logger.error(
            "Unexpected error when sending to Trengo for ticket %s", ticket_id, exc_info=True
        )
        return False

    logger.info("Custom fields set on ticket %s", ticket_id)
    return True
