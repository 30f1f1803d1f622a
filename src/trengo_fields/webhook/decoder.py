"""Decoding of Trengo's form-encoded webhook bodies."""

import re
from urllib.parse import parse_qsl

from trengo_fields.models.ticket import TicketMessage


class WebhookDecodeError(ValueError):
    """Raised when a webhook body is absent or not valid form data."""


# A "%" not followed by two hex digits
INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_form_body(body: bytes | str | None) -> dict[str, str]:
    """Decode a ``key=value&key=value`` body into a flat dict.

    Keys and values are percent-decoded (``+`` becomes a space). Values may
    contain any character once decoded. Repeated keys keep the last value.

    Raises WebhookDecodeError if the body is empty, a field has no ``=``, a
    ``%`` is not followed by two hex digits, or the escapes are not UTF-8.
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    if not body:
        raise WebhookDecodeError("Request body is empty")

    match = INVALID_ESCAPE.search(body)
    if match:
        raise WebhookDecodeError(f"Malformed percent escape at position {match.start()}")

    try:
        pairs = parse_qsl(body, keep_blank_values=True, strict_parsing=True, errors="strict")
    except ValueError as exc:
        raise WebhookDecodeError(f"Malformed form body: {exc}") from exc
    return dict(pairs)


def parse_ticket_message(body: bytes | str | None) -> TicketMessage:
    """Decode a webhook body into a TicketMessage.

    Raises WebhookDecodeError for malformed bodies and pydantic.ValidationError
    when ``message`` or ``ticket_id`` is missing or invalid.
    """
    fields = decode_form_body(body)
    return TicketMessage.model_validate(fields)
