"""Ticket message and custom field update models."""

from pydantic import BaseModel


class TicketMessage(BaseModel):
    """A decoded Trengo webhook message."""

    message: str
    ticket_id: int  # Trengo sends it form-encoded, e.g. "42"


class CustomFieldUpdate(BaseModel):
    """One custom field value to set on a ticket."""

    custom_field_id: str
    value: str

    def to_payload(self) -> str:
        """Serialize to the JSON body expected by the custom_fields endpoint."""
        return self.model_dump_json()
