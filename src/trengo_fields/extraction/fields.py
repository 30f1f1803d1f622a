"""Parse custom ticket field values out of a message.

Only the link field is supported. A message yields at most one update; further
field kinds would return one update each.
"""

import re

from trengo_fields.config import Settings
from trengo_fields.models.ticket import CustomFieldUpdate

# https:, http: or www. at the start of the message or of a whitespace-separated word
LINK_PATTERN = re.compile(r"(?<!\S)(?:https:|http:|www\.)\S*", re.IGNORECASE)


def extract_link(message: str) -> str | None:
    """Return the first link in the message, or None if there is none."""
    match = LINK_PATTERN.search(message)
    return match.group(0) if match else None


def parse_custom_ticket_fields(message: str, settings: Settings) -> CustomFieldUpdate | None:
    """Build the link field update for a message.

    Returns None when the message contains no link.
    """
    link = extract_link(message)
    if link is None:
        return None
    return CustomFieldUpdate(custom_field_id=settings.trengo_link_field_id, value=link)
