"""Custom field extraction from ticket message text."""

from trengo_fields.extraction.fields import LINK_PATTERN, extract_link, parse_custom_ticket_fields

__all__ = ["LINK_PATTERN", "extract_link", "parse_custom_ticket_fields"]
