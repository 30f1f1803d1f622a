"""Trengo API egress."""

from trengo_fields.trengo.notifier import set_ticket_custom_fields

__all__ = ["set_ticket_custom_fields"]
