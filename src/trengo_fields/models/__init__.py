"""Data models for inbound ticket messages and outbound field updates."""

from trengo_fields.models.ticket import CustomFieldUpdate, TicketMessage

__all__ = [
    "CustomFieldUpdate",
    "TicketMessage",
]
